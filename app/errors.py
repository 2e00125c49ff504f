"""
Error Handling

Pipeline failures travel to the client as APIError; every error the
service produces is rendered as {"error": message}.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import Settings
from app.pipeline import Failure
from app.schemas import ErrorResponse

logger = logging.getLogger(__name__)


class APIError(Exception):
    """A client error with the HTTP status to answer with."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    @classmethod
    def from_failure(cls, failure: Failure) -> "APIError":
        return cls(failure.status, failure.message)


def _error(status_code: int, message: str, detail: Optional[str] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message, detail=detail).to_content(),
    )


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Attach the service's error renderers to ``app``."""

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
        return _error(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        if exc.status_code == 404:
            message = f"Path not found: {request.url.path}"
        elif exc.status_code == 405:
            message = f"{request.method} not allowed for {request.url.path}"
        else:
            message = str(exc.detail)
        return _error(exc.status_code, message)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all exception handler."""
        logger.exception(f"Unhandled exception: {exc}")
        return _error(
            500,
            "Internal Server Error",
            str(exc) if settings.debug else None,
        )
