"""Translate toolkit errors into the server's JSON error envelope."""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.models import KVCoreError

logger = logging.getLogger(__name__)


def error_envelope(error: KVCoreError) -> dict:
    """
    Build ``{"error": message, "details"?: upstream body}``.

    ``details`` is omitted when there is no upstream body.
    """
    content = {"error": error.message}
    if error.response_body is not None:
        content["details"] = error.response_body
    return content


async def kvcore_error_handler(request: Request, exc: KVCoreError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.status_code} {exc.message}")
    return JSONResponse(
        status_code=exc.status_code or 500,
        content=jsonable_encoder(error_envelope(exc)),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code == 404:
        return JSONResponse(
            status_code=404,
            content={
                "error": "Not Found",
                "message": f"Cannot {request.method} {request.url.path}",
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "error": "Invalid request body",
            "details": jsonable_encoder(exc.errors()),
        },
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"[Server Error] {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


def register_error_handlers(app: FastAPI) -> None:
    """Attach every error handler to the app."""
    app.add_exception_handler(KVCoreError, kvcore_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
