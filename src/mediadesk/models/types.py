"""Pydantic models for the Mediadesk API.

Request and response bodies use camelCase keys on the wire
(dateOfBirth, previewUrl, modelIds, createdAt, ...).
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model with camelCase aliases, accepting snake_case input too."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        protected_namespaces=(),
    )


# ============================================================================
# Request bodies
# ============================================================================


class ModelPayload(CamelModel):
    """Model create/update body.

    Fields are loosely typed: presence and coercion are checked by the
    catalog layer so missing names get a readable 400.
    """

    name: str | None = None
    ethnicity: str | None = None
    gender: str | None = None
    image: str | None = None
    bio: str | None = None
    date_of_birth: str | None = None
    measurements: str | None = None


class VideoPayload(CamelModel):
    """Video create/update body."""

    title: str | None = None
    description: str | None = None
    url: str | None = None
    preview_url: str | None = None
    thumbnail: str | None = None
    duration: int | float | str | None = None
    views: int | float | str | None = None
    model_ids: list[str] | None = None


# ============================================================================
# Response bodies
# ============================================================================


class ModelSummary(CamelModel):
    """Model fields without related videos."""

    id: str
    name: str
    ethnicity: str | None
    gender: Literal["MALE", "FEMALE", "NON_BINARY", "PREFER_NOT_TO_SAY"] | None
    image: str | None
    image_allowed: bool
    bio: str | None
    date_of_birth: date | None
    measurements: str | None
    created_at: datetime
    updated_at: datetime


class VideoSummary(CamelModel):
    """Video fields without related models.

    duration is seconds rendered as text for existing UI consumers.
    """

    id: str
    title: str
    description: str | None
    url: str
    preview_url: str | None
    thumbnail: str | None
    thumbnail_allowed: bool
    duration: str | None
    views: int
    uploaded_at: datetime
    created_at: datetime
    updated_at: datetime


class ModelDetail(ModelSummary):
    """Model with its linked videos."""

    videos: list[VideoSummary]
    video_count: int


class VideoDetail(VideoSummary):
    """Video with its linked models."""

    models: list[ModelSummary]
    model_count: int


class ModelListResponse(CamelModel):
    """Envelope for GET /api/models."""

    data: list[ModelDetail]
    total: int
    skip: int
    take: int


class VideoListResponse(CamelModel):
    """Envelope for GET /api/videos."""

    data: list[VideoDetail]
    total: int
    skip: int
    take: int


class DeleteResponse(BaseModel):
    """Acknowledgment for DELETE requests."""

    success: bool
