"""Sort selector for list results.

Sorting is applied to the page the pager already fetched, never to the
whole filtered set. A sort key can reorder entities within a page but
cannot move an entity from page 2 onto page 1. Store-level ordering
(newest first) decides page membership.

All sorts are stable, so ties keep store order. Unknown keys leave the
page unchanged.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from mediadesk.models.domain import ModelEntity, VideoEntity

T = TypeVar("T")

SORT_NONE = "none"

# key -> (sort key function, descending)
MODEL_SORTS: dict[str, tuple[Callable[[ModelEntity], object], bool]] = {
    "a-z": (lambda m: m.name.lower(), False),
    "z-a": (lambda m: m.name.lower(), True),
    "most-videos": (lambda m: len(m.videos), True),
    "least-videos": (lambda m: len(m.videos), False),
    "newest": (lambda m: m.created_at, True),
    "oldest": (lambda m: m.created_at, False),
}

VIDEO_SORTS: dict[str, tuple[Callable[[VideoEntity], object], bool]] = {
    "recent": (lambda v: v.uploaded_at, True),
    "oldest": (lambda v: v.uploaded_at, False),
    "most-views": (lambda v: v.views, True),
    "least-views": (lambda v: v.views, False),
    "title-az": (lambda v: v.title.lower(), False),
    "title-za": (lambda v: v.title.lower(), True),
    "most-models": (lambda v: len(v.models), True),
    "least-models": (lambda v: len(v.models), False),
}


def _sort_page(
    items: list[T],
    key: str | None,
    table: dict[str, tuple[Callable[[T], object], bool]],
) -> list[T]:
    if not key or key == SORT_NONE or key not in table:
        return list(items)
    key_fn, descending = table[key]
    return sorted(items, key=key_fn, reverse=descending)


def sort_models(items: list[ModelEntity], key: str | None) -> list[ModelEntity]:
    """Reorder one page of models by a sort key."""
    return _sort_page(items, key, MODEL_SORTS)


def sort_videos(items: list[VideoEntity], key: str | None) -> list[VideoEntity]:
    """Reorder one page of videos by a sort key."""
    return _sort_page(items, key, VIDEO_SORTS)
