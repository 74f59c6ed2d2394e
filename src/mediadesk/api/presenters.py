"""Build API response models from domain entities."""

from __future__ import annotations

from collections.abc import Iterable

from mediadesk.core.images import is_allowed_image
from mediadesk.models.domain import ModelEntity, VideoEntity
from mediadesk.models.types import ModelDetail, ModelSummary, VideoDetail, VideoSummary


def _duration_text(seconds: int | None) -> str | None:
    return str(seconds) if seconds is not None else None


def model_summary(model: ModelEntity, image_hosts: Iterable[str]) -> ModelSummary:
    """Convert ModelEntity to ModelSummary."""
    return ModelSummary(
        id=model.id,
        name=model.name,
        ethnicity=model.ethnicity,
        gender=model.gender,
        image=model.image,
        image_allowed=is_allowed_image(model.image, image_hosts),
        bio=model.bio,
        date_of_birth=model.date_of_birth,
        measurements=model.measurements,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def video_summary(video: VideoEntity, image_hosts: Iterable[str]) -> VideoSummary:
    """Convert VideoEntity to VideoSummary."""
    return VideoSummary(
        id=video.id,
        title=video.title,
        description=video.description,
        url=video.url,
        preview_url=video.preview_url,
        thumbnail=video.thumbnail,
        thumbnail_allowed=is_allowed_image(video.thumbnail, image_hosts),
        duration=_duration_text(video.duration),
        views=video.views,
        uploaded_at=video.uploaded_at,
        created_at=video.created_at,
        updated_at=video.updated_at,
    )


def model_detail(model: ModelEntity, image_hosts: Iterable[str]) -> ModelDetail:
    """Convert ModelEntity to ModelDetail with its videos."""
    summary = model_summary(model, image_hosts)
    return ModelDetail(
        **summary.model_dump(),
        videos=[video_summary(v, image_hosts) for v in model.videos],
        video_count=len(model.videos),
    )


def video_detail(video: VideoEntity, image_hosts: Iterable[str]) -> VideoDetail:
    """Convert VideoEntity to VideoDetail with its models."""
    summary = video_summary(video, image_hosts)
    return VideoDetail(
        **summary.model_dump(),
        models=[model_summary(m, image_hosts) for m in video.models],
        model_count=len(video.models),
    )
