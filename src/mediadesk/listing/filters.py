"""Filter composer for list queries.

Builds SQLAlchemy predicates from free-text search plus optional field
filters. All active predicates are combined with AND by the caller
passing them to Query.filter(*conditions).

Blank values mean "no constraint", never "match empty".
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import ColumnElement

from mediadesk.db.schema import Model, Video
from mediadesk.models.domain import ModelEntity, VideoEntity

LIKE_ESCAPE = "\\"


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so user text is matched literally."""
    return (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def _contains(column, search: str) -> ColumnElement[bool]:
    return column.ilike(f"%{escape_like(search)}%", escape=LIKE_ESCAPE)


@dataclass(frozen=True)
class ModelFilter:
    """Filters accepted by the models collection."""

    search: str = ""
    ethnicity: str | None = None

    @classmethod
    def from_params(cls, search: str | None, ethnicity: str | None) -> ModelFilter:
        return cls(search=search or "", ethnicity=_clean(ethnicity))


@dataclass(frozen=True)
class VideoFilter:
    """Filters accepted by the videos collection."""

    search: str = ""
    model_id: str | None = None

    @classmethod
    def from_params(cls, search: str | None, model_id: str | None) -> VideoFilter:
        return cls(search=search or "", model_id=_clean(model_id))


def model_conditions(model_filter: ModelFilter) -> list[ColumnElement[bool]]:
    """Build predicates over Model for a ModelFilter."""
    conditions: list[ColumnElement[bool]] = []
    if model_filter.search:
        conditions.append(_contains(Model.name, model_filter.search))
    if model_filter.ethnicity is not None:
        conditions.append(Model.ethnicity == model_filter.ethnicity)
    return conditions


def video_conditions(video_filter: VideoFilter) -> list[ColumnElement[bool]]:
    """Build predicates over Video for a VideoFilter.

    The model filter matches when at least one linked model has the id.
    """
    conditions: list[ColumnElement[bool]] = []
    if video_filter.search:
        conditions.append(_contains(Video.title, video_filter.search))
    if video_filter.model_id is not None:
        conditions.append(Video.models.any(Model.id == video_filter.model_id))
    return conditions


# ============================================================================
# In-memory equivalents
# ============================================================================


def matches_model(entity: ModelEntity, model_filter: ModelFilter) -> bool:
    """Return True if entity satisfies the filter (same rules as the store query)."""
    if model_filter.search.lower() not in entity.name.lower():
        return False
    if model_filter.ethnicity is not None and entity.ethnicity != model_filter.ethnicity:
        return False
    return True


def matches_video(entity: VideoEntity, video_filter: VideoFilter) -> bool:
    """Return True if entity satisfies the filter (same rules as the store query)."""
    if video_filter.search.lower() not in entity.title.lower():
        return False
    if video_filter.model_id is not None and not any(
        m.id == video_filter.model_id for m in entity.models
    ):
        return False
    return True
