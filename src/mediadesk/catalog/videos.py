"""Video catalog operations.

Create and update both take the full field set. On update, leaving out
modelIds unlinks every model.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from mediadesk.catalog.errors import CatalogValidationError
from mediadesk.core.coerce import MAX_DB_INT, blank_to_none, parse_int
from mediadesk.db import repo
from mediadesk.db.repo import DbSession
from mediadesk.listing.filters import VideoFilter
from mediadesk.listing.paging import Page
from mediadesk.listing.sorting import sort_videos
from mediadesk.models.domain import VideoEntity, VideoInput
from mediadesk.models.types import VideoPayload

logger = logging.getLogger(__name__)


def build_video_input(payload: VideoPayload) -> VideoInput:
    """Validate a payload and coerce it into a VideoInput.

    Raises:
        CatalogValidationError: If title or url is missing or a field is malformed.
    """
    title = blank_to_none(payload.title)
    url = blank_to_none(payload.url)
    if title is None or url is None:
        raise CatalogValidationError("Title and URL are required")

    try:
        duration = parse_int(payload.duration, "duration")
        views = parse_int(payload.views, "views")
    except ValueError as e:
        raise CatalogValidationError(str(e)) from e

    if duration is not None and duration < 0:
        raise CatalogValidationError("Duration must not be negative")
    if views is None:
        views = 0
    if views < 0:
        raise CatalogValidationError("Views must not be negative")
    if views > MAX_DB_INT or (duration is not None and duration > MAX_DB_INT):
        raise CatalogValidationError(f"Views and duration must not exceed {MAX_DB_INT}")

    # Keep first occurrence order, drop duplicates and blanks
    model_ids = list(dict.fromkeys(m for m in payload.model_ids or [] if m and m.strip()))

    return VideoInput(
        title=title,
        url=url,
        description=blank_to_none(payload.description),
        preview_url=blank_to_none(payload.preview_url),
        thumbnail=blank_to_none(payload.thumbnail),
        duration=duration,
        views=views,
        model_ids=model_ids,
    )


def _check_model_ids(session: DbSession, data: VideoInput) -> None:
    missing = repo.find_missing_model_ids(session, data.model_ids)
    if missing:
        raise CatalogValidationError(f"Unknown model ids: {', '.join(missing)}")


def list_videos(
    session: DbSession, video_filter: VideoFilter, page: Page, sort: str | None = None
) -> tuple[list[VideoEntity], int]:
    """Fetch one page of videos, then apply the page-scoped sort."""
    videos, total = repo.list_videos(session, video_filter, page)
    return sort_videos(videos, sort), total


def get_video(session: DbSession, video_id: str) -> VideoEntity | None:
    return repo.get_video(session, video_id)


def create_video(session: DbSession, payload: VideoPayload) -> VideoEntity:
    """Validate and persist a new video linked to its models."""
    data = build_video_input(payload)
    try:
        _check_model_ids(session, data)
        video = repo.create_video(session, data)
        repo.commit(session)
    except SQLAlchemyError:
        repo.rollback(session)
        raise

    logger.info(f"Created video {video.id} linked to {len(video.models)} model(s)")
    return video


def update_video(session: DbSession, video_id: str, payload: VideoPayload) -> VideoEntity | None:
    """Replace a video's fields and links. Returns None if the video does not exist."""
    data = build_video_input(payload)
    if repo.get_video(session, video_id) is None:
        return None

    try:
        _check_model_ids(session, data)
        video = repo.replace_video(session, video_id, data)
        repo.commit(session)
    except SQLAlchemyError:
        repo.rollback(session)
        raise

    logger.info(f"Updated video {video_id}")
    return video


def delete_video(session: DbSession, video_id: str) -> bool:
    """Delete a video. Returns False if the video does not exist."""
    try:
        deleted = repo.delete_video(session, video_id)
        repo.commit(session)
    except SQLAlchemyError:
        repo.rollback(session)
        raise

    if deleted:
        logger.info(f"Deleted video {video_id}")
    return deleted
