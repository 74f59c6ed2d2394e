"""Models API endpoints.

GET /api/models - List models (search, ethnicity, skip/take, sort)
POST /api/models - Create model
GET /api/models/{model_id} - Get model with videos
PUT /api/models/{model_id} - Replace model fields
DELETE /api/models/{model_id} - Delete model
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from mediadesk.api.app import get_db_session, get_settings
from mediadesk.api.errors import service_errors
from mediadesk.api.presenters import model_detail
from mediadesk.catalog import models as catalog
from mediadesk.config import Settings
from mediadesk.db.repo import DbSession
from mediadesk.listing.filters import ModelFilter
from mediadesk.listing.paging import parse_page
from mediadesk.models.types import (
    DeleteResponse,
    ModelDetail,
    ModelListResponse,
    ModelPayload,
)

router = APIRouter()


@router.get("/models", response_model=ModelListResponse)
def list_models(
    skip: str | None = None,
    take: str | None = None,
    search: str | None = None,
    ethnicity: str | None = None,
    sort: str | None = None,
    session: DbSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> ModelListResponse:
    """List one page of models, newest first.

    Args:
        skip: Offset into the filtered set (defaults to 0).
        take: Page size (defaults to the configured models page size).
        search: Case-insensitive substring of the name.
        ethnicity: Exact ethnicity match.
        sort: Reorders the returned page only (a-z, z-a, most-videos, ...).
        session: Database session (injected).
        settings: App settings (injected).

    Returns:
        ModelListResponse envelope with data, total, skip and take.
    """
    page = parse_page(skip, take, settings.models_page_size)
    model_filter = ModelFilter.from_params(search, ethnicity)

    with service_errors("fetch models"):
        models, total = catalog.list_models(session, model_filter, page, sort)

    return ModelListResponse(
        data=[model_detail(m, settings.image_hosts) for m in models],
        total=total,
        skip=page.skip,
        take=page.take,
    )


@router.post("/models", response_model=ModelDetail, status_code=201)
def create_model(
    payload: ModelPayload,
    session: DbSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> ModelDetail:
    """Create a model.

    Raises:
        HTTPException: 400 if name is missing or a field is malformed.
    """
    with service_errors("create model"):
        model = catalog.create_model(session, payload)

    return model_detail(model, settings.image_hosts)


@router.get("/models/{model_id}", response_model=ModelDetail)
def get_model(
    model_id: str,
    session: DbSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> ModelDetail:
    """Get a model with its videos.

    Raises:
        HTTPException: 404 if model not found.
    """
    with service_errors("fetch model"):
        model = catalog.get_model(session, model_id)

    if model is None:
        raise HTTPException(status_code=404, detail="Model not found")

    return model_detail(model, settings.image_hosts)


@router.put("/models/{model_id}", response_model=ModelDetail)
def update_model(
    model_id: str,
    payload: ModelPayload,
    session: DbSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> ModelDetail:
    """Replace every field of a model.

    Fields left out of the body are cleared.

    Raises:
        HTTPException: 400 if name is missing, 404 if model not found.
    """
    with service_errors("update model"):
        model = catalog.update_model(session, model_id, payload)

    if model is None:
        raise HTTPException(status_code=404, detail="Model not found")

    return model_detail(model, settings.image_hosts)


@router.delete("/models/{model_id}", response_model=DeleteResponse)
def delete_model(
    model_id: str,
    session: DbSession = Depends(get_db_session),
) -> DeleteResponse:
    """Delete a model. Linked videos are kept.

    Raises:
        HTTPException: 404 if model not found.
    """
    with service_errors("delete model"):
        deleted = catalog.delete_model(session, model_id)

    if not deleted:
        raise HTTPException(status_code=404, detail="Model not found")

    return DeleteResponse(success=True)
