"""Global exception handlers rendering `{"error": message}` bodies.

Every failure leaves the API as plain JSON with a single `error` key:
catalog errors use their own status, request validation failures become
400, and anything unexpected becomes 500.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from catalog.errors import CatalogError, StoreFailure

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


async def handle_catalog_error(request: Request, exc: CatalogError) -> JSONResponse:  # noqa: D401
    if isinstance(exc, StoreFailure):
        # Already logged with its traceback where the driver fault was caught
        logger.warning("store_failure path=%s error=%s", request.url.path, exc.message)
    else:
        logger.info(
            "catalog_error path=%s status=%s error=%s", request.url.path, exc.status_code, exc.message
        )
    return JSONResponse(exc.body(), status_code=exc.status_code)


async def handle_http_exception(request: Request, exc: HTTPException) -> JSONResponse:  # noqa: D401
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return JSONResponse({"error": detail}, status_code=exc.status_code, headers=getattr(exc, "headers", None))


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:  # noqa: D401
    errors = list(exc.errors())
    parts = []
    for err in errors:
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg', 'invalid')}" if loc else str(err.get("msg", "invalid")))
    message = "Invalid request: " + "; ".join(parts) if parts else "Invalid request"
    logger.info("validation_400 path=%s errors_cnt=%s", request.url.path, len(errors))
    return error_response(400, message)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:  # noqa: D401
    logger.error("unexpected_error path=%s", request.url.path, exc_info=True)
    return error_response(500, str(exc) or "Internal Server Error")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CatalogError, handle_catalog_error)
    app.add_exception_handler(HTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


__all__ = [
    "error_response",
    "handle_catalog_error",
    "handle_http_exception",
    "handle_request_validation_error",
    "handle_unexpected_error",
    "register_error_handlers",
]
