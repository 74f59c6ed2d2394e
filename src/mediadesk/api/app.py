"""FastAPI application factory.

api layer:
- Parses query strings and bodies, calls catalog services
- Returns payloads for UI
- Forbidden: direct SQLAlchemy queries
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Generator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from mediadesk.api.errors import register_error_handlers
from mediadesk.config import Settings, configure_logging, load_settings
from mediadesk.db.repo import DbSession
from mediadesk.db.session import get_session, init_db

logger = logging.getLogger(__name__)


def get_settings(request: Request) -> Settings:
    """Dependency returning the settings the app was built with."""
    return request.app.state.settings


def get_db_session(request: Request) -> Generator[DbSession, None, None]:
    """Dependency to get database session.

    Yields:
        Database session that is automatically closed after request.
    """
    session = get_session(request.app.state.settings.db_path)
    try:
        yield session
    finally:
        session.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        settings: Optional settings. Defaults to load_settings().

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = load_settings()

    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        init_db(settings.db_path)
        logger.info(f"Database ready at {settings.db_path}")
        yield

    app = FastAPI(
        title="Mediadesk API",
        description="Catalog admin for models and videos",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Add CORS middleware for UI access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Include routes
    from mediadesk.api.routes import models, videos

    app.include_router(models.router, prefix="/api")
    app.include_router(videos.router, prefix="/api")

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
