"""Translate domain and infrastructure failures into API responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from notification_service.domain.exceptions import NotificationNotFoundError
from notification_service.infrastructure.events import InvalidNotificationEventError
from notification_service.interfaces.api.schemas import ApiResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _error_response(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ApiResponse.fail(error).model_dump(),
    )


async def _not_found_handler(request: Request, exc: NotificationNotFoundError) -> JSONResponse:
    logger.info("%s %s: %s", request.method, request.url.path, exc)
    return _error_response(status.HTTP_404_NOT_FOUND, str(exc))


async def _invalid_event_handler(
    request: Request, exc: InvalidNotificationEventError
) -> JSONResponse:
    return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, str(exc))


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    summary = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', 'invalid')}"
        for error in exc.errors()
    )
    logger.info("Rejected %s %s: %s", request.method, request.url.path, summary)
    return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, summary or "Invalid request")


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Wire the error envelope for every failure kind into ``app``."""

    app.add_exception_handler(NotificationNotFoundError, _not_found_handler)
    app.add_exception_handler(InvalidNotificationEventError, _invalid_event_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)


__all__ = ["INTERNAL_ERROR_MESSAGE", "register_exception_handlers"]
