from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from dog_bff.application.errors import AppError, StoreError

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR = "Internal Server Error"


def error_response(
    message: str, status_code: int, headers: dict[str, str] | None = None
) -> PlainTextResponse:
    """Single-line plain text body terminated by a newline."""
    response = PlainTextResponse(f"{message}\n", status_code=status_code, headers=headers)
    response.headers["X-Content-Type-Options"] = "nosniff"
    return response


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError) -> PlainTextResponse:  # noqa: WPS430
        logger.error(
            "Store error: %s",
            exc.message,
            exc_info=exc,
            extra={"path": request.url.path, "method": request.method},
        )
        return error_response(INTERNAL_SERVER_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR)

    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> PlainTextResponse:  # noqa: WPS430
        logger.info(
            "Application error handled: %s - %s (status: %d)",
            exc.code,
            exc.message,
            exc.status_code,
            extra={"path": request.url.path, "method": request.method},
        )
        return error_response(exc.message, exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:  # noqa: WPS430
        return error_response(str(exc.detail), exc.status_code, headers=exc.headers)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> PlainTextResponse:  # noqa: WPS430
        logger.exception("Unexpected server error", exc_info=exc)
        return error_response(INTERNAL_SERVER_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR)
