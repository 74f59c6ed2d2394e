"""Remote image allow-list check used when rendering images."""

from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import urlsplit

ALLOWED_SCHEMES = ("http", "https")


def is_allowed_image(url: str | None, hosts: Iterable[str]) -> bool:
    """Return True if url is an http(s) URL on an approved host."""
    if not url:
        return False
    parts = urlsplit(url)
    if parts.scheme.lower() not in ALLOWED_SCHEMES or not parts.hostname:
        return False
    return parts.hostname.lower() in {h.lower() for h in hosts}
