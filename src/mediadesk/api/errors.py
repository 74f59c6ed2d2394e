"""Error mapping for the HTTP layer.

- CatalogValidationError / malformed body -> 400
- missing item -> 404 (raised directly by routes)
- SQLAlchemyError -> 500 with the cause as diagnostic text
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from mediadesk.catalog.errors import CatalogValidationError

logger = logging.getLogger(__name__)


class PersistenceFailure(Exception):
    """A store operation failed unexpectedly."""

    def __init__(self, action: str, cause: Exception):
        super().__init__(f"Failed to {action}: {cause}")
        self.action = action
        self.cause = cause


@contextmanager
def service_errors(action: str) -> Iterator[None]:
    """Translate catalog and store errors raised inside the block.

    Args:
        action: Human readable action, e.g. "create model".

    Raises:
        HTTPException: 400 for validation errors.
        PersistenceFailure: For any SQLAlchemy error.
    """
    try:
        yield
    except CatalogValidationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except SQLAlchemyError as e:
        logger.exception(f"Failed to {action}")
        raise PersistenceFailure(action, e) from e


async def _persistence_failure_handler(request: Request, exc: PersistenceFailure) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"detail": f"Failed to {exc.action}", "error": str(exc.cause)},
    )


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request", "errors": jsonable_encoder(exc.errors())},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install exception handlers on the app."""
    app.add_exception_handler(PersistenceFailure, _persistence_failure_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
