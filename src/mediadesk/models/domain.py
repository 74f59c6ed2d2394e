"""Domain models for Mediadesk.

Pure Python dataclasses representing catalog entities.
These models are independent of SQLAlchemy and used throughout
the application for clean separation from the database layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Literal

Gender = Literal["MALE", "FEMALE", "NON_BINARY", "PREFER_NOT_TO_SAY"]


# ============================================================================
# Model Domain
# ============================================================================


@dataclass
class ModelEntity:
    """Domain model for a catalog model.

    Related videos are loaded one level deep: each entry in `videos`
    has an empty `models` list.
    """

    id: str
    name: str
    created_at: datetime
    updated_at: datetime
    ethnicity: str | None = None
    gender: Gender | None = None
    image: str | None = None
    bio: str | None = None
    date_of_birth: date | None = None
    measurements: str | None = None
    videos: list[VideoEntity] = field(default_factory=list)


@dataclass
class ModelInput:
    """Full replacement field set for creating or updating a model."""

    name: str
    ethnicity: str | None = None
    gender: Gender | None = None
    image: str | None = None
    bio: str | None = None
    date_of_birth: date | None = None
    measurements: str | None = None


# ============================================================================
# Video Domain
# ============================================================================


@dataclass
class VideoEntity:
    """Domain model for a catalog video."""

    id: str
    title: str
    url: str
    views: int
    uploaded_at: datetime
    created_at: datetime
    updated_at: datetime
    description: str | None = None
    preview_url: str | None = None
    thumbnail: str | None = None
    duration: int | None = None
    models: list[ModelEntity] = field(default_factory=list)


@dataclass
class VideoInput:
    """Full replacement field set for creating or updating a video."""

    title: str
    url: str
    description: str | None = None
    preview_url: str | None = None
    thumbnail: str | None = None
    duration: int | None = None
    views: int = 0
    model_ids: list[str] = field(default_factory=list)
