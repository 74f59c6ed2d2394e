"""Model catalog operations.

Create and update both take the full field set: optional fields left
out are cleared, not kept.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from mediadesk.catalog.errors import CatalogValidationError
from mediadesk.core.coerce import blank_to_none, parse_date
from mediadesk.db import repo
from mediadesk.db.repo import DbSession
from mediadesk.db.schema import GENDERS
from mediadesk.listing.filters import ModelFilter
from mediadesk.listing.paging import Page
from mediadesk.listing.sorting import sort_models
from mediadesk.models.domain import ModelEntity, ModelInput
from mediadesk.models.types import ModelPayload

logger = logging.getLogger(__name__)


def build_model_input(payload: ModelPayload) -> ModelInput:
    """Validate a payload and coerce it into a ModelInput.

    Raises:
        CatalogValidationError: If name is missing or a field is malformed.
    """
    name = blank_to_none(payload.name)
    if name is None:
        raise CatalogValidationError("Name is required")

    gender = blank_to_none(payload.gender)
    if gender is not None and gender not in GENDERS:
        raise CatalogValidationError(
            f"Invalid gender: {gender!r} (expected one of {', '.join(GENDERS)})"
        )

    try:
        date_of_birth = parse_date(payload.date_of_birth, "dateOfBirth")
    except ValueError as e:
        raise CatalogValidationError(str(e)) from e

    return ModelInput(
        name=name,
        ethnicity=blank_to_none(payload.ethnicity),
        gender=gender,
        image=blank_to_none(payload.image),
        bio=blank_to_none(payload.bio),
        date_of_birth=date_of_birth,
        measurements=blank_to_none(payload.measurements),
    )


def list_models(
    session: DbSession, model_filter: ModelFilter, page: Page, sort: str | None = None
) -> tuple[list[ModelEntity], int]:
    """Fetch one page of models, then apply the page-scoped sort."""
    models, total = repo.list_models(session, model_filter, page)
    return sort_models(models, sort), total


def get_model(session: DbSession, model_id: str) -> ModelEntity | None:
    return repo.get_model(session, model_id)


def create_model(session: DbSession, payload: ModelPayload) -> ModelEntity:
    """Validate and persist a new model."""
    data = build_model_input(payload)
    try:
        model = repo.create_model(session, data)
        repo.commit(session)
    except SQLAlchemyError:
        repo.rollback(session)
        raise

    logger.info(f"Created model {model.id}")
    return model


def update_model(session: DbSession, model_id: str, payload: ModelPayload) -> ModelEntity | None:
    """Replace a model's fields. Returns None if the model does not exist."""
    data = build_model_input(payload)
    try:
        model = repo.replace_model(session, model_id, data)
        repo.commit(session)
    except SQLAlchemyError:
        repo.rollback(session)
        raise

    if model is not None:
        logger.info(f"Updated model {model_id}")
    return model


def delete_model(session: DbSession, model_id: str) -> bool:
    """Delete a model. Returns False if the model does not exist."""
    try:
        deleted = repo.delete_model(session, model_id)
        repo.commit(session)
    except SQLAlchemyError:
        repo.rollback(session)
        raise

    if deleted:
        logger.info(f"Deleted model {model_id}")
    return deleted
