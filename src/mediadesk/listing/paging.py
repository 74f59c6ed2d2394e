"""Pager for list queries.

Turns raw skip/take query text into a bounded Page. Parsing never fails:
non-numeric or negative input falls back to the defaults, and values
larger than the store can hold are capped (an offset that large simply
yields an empty page).
"""

from __future__ import annotations

from dataclasses import dataclass

from mediadesk.core.coerce import MAX_DB_INT

DEFAULT_SKIP = 0


@dataclass(frozen=True)
class Page:
    """Offset/limit window over a filtered, store-ordered result set."""

    skip: int
    take: int


def _parse_int(raw: str | int | None) -> int | None:
    if raw is None:
        return None
    if isinstance(raw, int):
        return raw
    try:
        return int(raw.strip())
    except ValueError:
        return None


def parse_page(raw_skip: str | int | None, raw_take: str | int | None, default_take: int) -> Page:
    """Parse skip/take with fallback to defaults.

    Args:
        raw_skip: Offset as received (may be None, blank or non-numeric).
        raw_take: Page size as received.
        default_take: Page size used when raw_take is unusable.

    Returns:
        Page with skip >= 0 and take > 0.
    """
    skip = _parse_int(raw_skip)
    take = _parse_int(raw_take)

    if skip is None or skip < 0:
        skip = DEFAULT_SKIP
    if take is None or take <= 0:
        take = default_take

    return Page(skip=min(skip, MAX_DB_INT), take=min(take, MAX_DB_INT))


def expected_slice_length(total: int, page: Page) -> int:
    """Number of entities a page of `total` matches should hold."""
    return min(page.take, max(0, total - page.skip))
