"""Runtime configuration for Mediadesk.

All settings come from environment variables so the same build can run
against a local SQLite file in development and a mounted volume in a
container.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_DB_PATH = Path("data/mediadesk.db")

DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",  # Next.js dev server
    "http://127.0.0.1:3000",
)

# Remote hosts the UI may render images from
DEFAULT_IMAGE_HOSTS = (
    "cdni.pornpics.com",
    "nsnetworkmembers.newsensations.com",
)

DEFAULT_MODELS_PAGE_SIZE = 12
DEFAULT_VIDEOS_PAGE_SIZE = 10

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    db_path: Path = DEFAULT_DB_PATH
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS
    image_hosts: frozenset[str] = field(default_factory=lambda: frozenset(DEFAULT_IMAGE_HOSTS))
    models_page_size: int = DEFAULT_MODELS_PAGE_SIZE
    videos_page_size: int = DEFAULT_VIDEOS_PAGE_SIZE
    log_level: str = "INFO"


def _split_csv(raw: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
    if raw is None:
        return default
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def _positive_int(raw: str | None, default: int) -> int:
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Build Settings from environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        Settings with defaults applied for missing or malformed values.
    """
    env = os.environ if environ is None else environ

    return Settings(
        db_path=Path(env.get("MEDIADESK_DB_PATH", str(DEFAULT_DB_PATH))),
        cors_origins=_split_csv(env.get("MEDIADESK_CORS_ORIGINS"), DEFAULT_CORS_ORIGINS),
        image_hosts=frozenset(
            host.lower()
            for host in _split_csv(env.get("MEDIADESK_IMAGE_HOSTS"), DEFAULT_IMAGE_HOSTS)
        ),
        models_page_size=_positive_int(
            env.get("MEDIADESK_MODELS_PAGE_SIZE"), DEFAULT_MODELS_PAGE_SIZE
        ),
        videos_page_size=_positive_int(
            env.get("MEDIADESK_VIDEOS_PAGE_SIZE"), DEFAULT_VIDEOS_PAGE_SIZE
        ),
        log_level=env.get("MEDIADESK_LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the service."""
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
