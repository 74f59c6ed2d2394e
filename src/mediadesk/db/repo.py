"""Repository pattern for database operations.

Encapsulates all SQLAlchemy queries, keeping domain logic pure.
Returns domain models (not SQLAlchemy entities) to external callers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.orm import Session, selectinload

from mediadesk.db.schema import Model, Video
from mediadesk.listing.filters import (
    ModelFilter,
    VideoFilter,
    model_conditions,
    video_conditions,
)
from mediadesk.listing.paging import Page
from mediadesk.models.domain import ModelEntity, ModelInput, VideoEntity, VideoInput

if TYPE_CHECKING:
    from sqlalchemy.orm import Session as DbSession
else:
    DbSession = Session

# Re-export for external use
__all__ = ["DbSession"]


# ============================================================================
# Converters: SQLAlchemy -> Domain
# ============================================================================


def _model_to_entity(model: Model, *, with_videos: bool = True) -> ModelEntity:
    """Convert SQLAlchemy Model to domain entity."""
    return ModelEntity(
        id=model.id,
        name=model.name,
        ethnicity=model.ethnicity,
        gender=model.gender,
        image=model.image,
        bio=model.bio,
        date_of_birth=model.date_of_birth,
        measurements=model.measurements,
        created_at=model.created_at,
        updated_at=model.updated_at,
        videos=(
            [_video_to_entity(v, with_models=False) for v in model.videos] if with_videos else []
        ),
    )


def _video_to_entity(video: Video, *, with_models: bool = True) -> VideoEntity:
    """Convert SQLAlchemy Video to domain entity."""
    return VideoEntity(
        id=video.id,
        title=video.title,
        description=video.description,
        url=video.url,
        preview_url=video.preview_url,
        thumbnail=video.thumbnail,
        duration=video.duration,
        views=video.views,
        uploaded_at=video.uploaded_at,
        created_at=video.created_at,
        updated_at=video.updated_at,
        models=(
            [_model_to_entity(m, with_videos=False) for m in video.models] if with_models else []
        ),
    )


def _apply_model_input(model: Model, data: ModelInput) -> None:
    model.name = data.name
    model.ethnicity = data.ethnicity
    model.gender = data.gender
    model.image = data.image
    model.bio = data.bio
    model.date_of_birth = data.date_of_birth
    model.measurements = data.measurements


def _apply_video_input(session: DbSession, video: Video, data: VideoInput) -> None:
    video.title = data.title
    video.description = data.description
    video.url = data.url
    video.preview_url = data.preview_url
    video.thumbnail = data.thumbnail
    video.duration = data.duration
    video.views = data.views
    video.models = _load_models(session, data.model_ids)


def _load_models(session: DbSession, model_ids: list[str]) -> list[Model]:
    if not model_ids:
        return []
    return session.query(Model).filter(Model.id.in_(model_ids)).all()


# ============================================================================
# Model Repository
# ============================================================================


def list_models(
    session: DbSession, model_filter: ModelFilter, page: Page
) -> tuple[list[ModelEntity], int]:
    """Get one page of models matching a filter, newest first.

    Returns:
        Tuple of (page entities, total matching count). The count ignores
        skip/take and runs as a separate query.
    """
    query = session.query(Model).filter(*model_conditions(model_filter))
    total = query.count()
    models = (
        query.options(selectinload(Model.videos))
        .order_by(Model.created_at.desc(), Model.id.desc())
        .offset(page.skip)
        .limit(page.take)
        .all()
    )
    return [_model_to_entity(m) for m in models], total


def get_model(session: DbSession, model_id: str) -> ModelEntity | None:
    """Get model by ID with its videos."""
    model = session.get(Model, model_id)
    return _model_to_entity(model) if model else None


def create_model(session: DbSession, data: ModelInput) -> ModelEntity:
    """Create a new model and return it read back from the store."""
    model = Model()
    _apply_model_input(model, data)
    session.add(model)
    session.flush()
    session.refresh(model)
    return _model_to_entity(model)


def replace_model(session: DbSession, model_id: str, data: ModelInput) -> ModelEntity | None:
    """Replace every mutable field of a model. Video links are untouched."""
    model = session.get(Model, model_id)
    if model is None:
        return None
    _apply_model_input(model, data)
    session.flush()
    session.refresh(model)
    return _model_to_entity(model)


def delete_model(session: DbSession, model_id: str) -> bool:
    """Delete a model and its video links. Linked videos remain."""
    model = session.get(Model, model_id)
    if model is None:
        return False
    session.delete(model)
    session.flush()
    return True


def find_missing_model_ids(session: DbSession, model_ids: list[str]) -> list[str]:
    """Return the ids in model_ids that do not resolve to a model."""
    if not model_ids:
        return []
    found = {row[0] for row in session.query(Model.id).filter(Model.id.in_(model_ids)).all()}
    return [model_id for model_id in model_ids if model_id not in found]


# ============================================================================
# Video Repository
# ============================================================================


def list_videos(
    session: DbSession, video_filter: VideoFilter, page: Page
) -> tuple[list[VideoEntity], int]:
    """Get one page of videos matching a filter, most recently uploaded first."""
    query = session.query(Video).filter(*video_conditions(video_filter))
    total = query.count()
    videos = (
        query.options(selectinload(Video.models))
        .order_by(Video.uploaded_at.desc(), Video.created_at.desc(), Video.id.desc())
        .offset(page.skip)
        .limit(page.take)
        .all()
    )
    return [_video_to_entity(v) for v in videos], total


def get_video(session: DbSession, video_id: str) -> VideoEntity | None:
    """Get video by ID with its models."""
    video = session.get(Video, video_id)
    return _video_to_entity(video) if video else None


def create_video(session: DbSession, data: VideoInput) -> VideoEntity:
    """Create a new video linked to data.model_ids."""
    video = Video()
    _apply_video_input(session, video, data)
    session.add(video)
    session.flush()
    session.refresh(video)
    return _video_to_entity(video)


def replace_video(session: DbSession, video_id: str, data: VideoInput) -> VideoEntity | None:
    """Replace every mutable field of a video, including its model links."""
    video = session.get(Video, video_id)
    if video is None:
        return None
    _apply_video_input(session, video, data)
    session.flush()
    session.refresh(video)
    return _video_to_entity(video)


def delete_video(session: DbSession, video_id: str) -> bool:
    """Delete a video and its model links. Linked models remain."""
    video = session.get(Video, video_id)
    if video is None:
        return False
    session.delete(video)
    session.flush()
    return True


# ============================================================================
# Batch Operations
# ============================================================================


def commit(session: DbSession) -> None:
    """Commit current transaction."""
    session.commit()


def rollback(session: DbSession) -> None:
    """Roll back current transaction."""
    session.rollback()
