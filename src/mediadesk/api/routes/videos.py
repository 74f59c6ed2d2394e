"""Videos API endpoints.

GET /api/videos - List videos (search, modelId, skip/take, sort)
POST /api/videos - Create video
GET /api/videos/{video_id} - Get video with models
PUT /api/videos/{video_id} - Replace video fields and model links
DELETE /api/videos/{video_id} - Delete video
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from mediadesk.api.app import get_db_session, get_settings
from mediadesk.api.errors import service_errors
from mediadesk.api.presenters import video_detail
from mediadesk.catalog import videos as catalog
from mediadesk.config import Settings
from mediadesk.db.repo import DbSession
from mediadesk.listing.filters import VideoFilter
from mediadesk.listing.paging import parse_page
from mediadesk.models.types import (
    DeleteResponse,
    VideoDetail,
    VideoListResponse,
    VideoPayload,
)

router = APIRouter()


@router.get("/videos", response_model=VideoListResponse)
def list_videos(
    skip: str | None = None,
    take: str | None = None,
    search: str | None = None,
    model_id: str | None = Query(default=None, alias="modelId"),
    sort: str | None = None,
    session: DbSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> VideoListResponse:
    """List one page of videos, most recently uploaded first.

    Args:
        skip: Offset into the filtered set (defaults to 0).
        take: Page size (defaults to the configured videos page size).
        search: Case-insensitive substring of the title.
        model_id: Only videos linked to this model.
        sort: Reorders the returned page only (recent, most-views, ...).
        session: Database session (injected).
        settings: App settings (injected).

    Returns:
        VideoListResponse envelope with data, total, skip and take.
    """
    page = parse_page(skip, take, settings.videos_page_size)
    video_filter = VideoFilter.from_params(search, model_id)

    with service_errors("fetch videos"):
        videos, total = catalog.list_videos(session, video_filter, page, sort)

    return VideoListResponse(
        data=[video_detail(v, settings.image_hosts) for v in videos],
        total=total,
        skip=page.skip,
        take=page.take,
    )


@router.post("/videos", response_model=VideoDetail, status_code=201)
def create_video(
    payload: VideoPayload,
    session: DbSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> VideoDetail:
    """Create a video linked to the models in modelIds.

    Raises:
        HTTPException: 400 if title or url is missing, a field is
            malformed, or a model id does not exist.
    """
    with service_errors("create video"):
        video = catalog.create_video(session, payload)

    return video_detail(video, settings.image_hosts)


@router.get("/videos/{video_id}", response_model=VideoDetail)
def get_video(
    video_id: str,
    session: DbSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> VideoDetail:
    """Get a video with its models.

    Raises:
        HTTPException: 404 if video not found.
    """
    with service_errors("fetch video"):
        video = catalog.get_video(session, video_id)

    if video is None:
        raise HTTPException(status_code=404, detail="Video not found")

    return video_detail(video, settings.image_hosts)


@router.put("/videos/{video_id}", response_model=VideoDetail)
def update_video(
    video_id: str,
    payload: VideoPayload,
    session: DbSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> VideoDetail:
    """Replace every field of a video, including its model links.

    Raises:
        HTTPException: 400 on validation failure, 404 if video not found.
    """
    with service_errors("update video"):
        video = catalog.update_video(session, video_id, payload)

    if video is None:
        raise HTTPException(status_code=404, detail="Video not found")

    return video_detail(video, settings.image_hosts)


@router.delete("/videos/{video_id}", response_model=DeleteResponse)
def delete_video(
    video_id: str,
    session: DbSession = Depends(get_db_session),
) -> DeleteResponse:
    """Delete a video. Linked models are kept.

    Raises:
        HTTPException: 404 if video not found.
    """
    with service_errors("delete video"):
        deleted = catalog.delete_video(session, video_id)

    if not deleted:
        raise HTTPException(status_code=404, detail="Video not found")

    return DeleteResponse(success=True)
