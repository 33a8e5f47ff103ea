"""
Request logging and error envelopes for the FoodBin API
"""

import time
import logging
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from app.exceptions import ConflictError, FoodBinError, NotFoundError, ServiceValidationError

logger = logging.getLogger("foodbin.middleware")


def envelope(error: dict) -> dict:
    """Wrap an error body as ``{"success": false, "error": ..., "timestamp": ...}``"""
    return {
        "success": False,
        "error": jsonable_encoder(error),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


def error_content(code: str, message, details=None) -> dict:
    error = {"code": code, "message": message}
    if details:
        error["details"] = details
    return envelope(error)


def service_error_content(exc: FoodBinError, category: str) -> dict:
    """
    Envelope for a service exception.

    ``code`` carries the category (CONFLICT, NOT_FOUND, ...); the exception's
    own machine-readable code, when set, moves to ``reason``.
    """
    error = exc.to_dict()
    reason: Optional[str] = error.pop("code", None)
    error["code"] = category
    if reason:
        error["reason"] = reason
    return envelope(error)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tags each request with an id and logs its outcome and duration"""

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid4())
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "%s %s failed after %.4fs [%s]",
                request.method,
                request.url.path,
                time.perf_counter() - started,
                request_id,
            )
            raise

        elapsed = time.perf_counter() - started
        logger.info(
            "%s %s -> %d in %.4fs [%s]",
            request.method,
            request.url.path,
            response.status_code,
            elapsed,
            request_id,
        )
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        return response


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors"""
    logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=422,
        content=error_content(
            "VALIDATION_ERROR", "Request validation failed", exc.errors()
        ),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning("HTTP %d on %s: %s", exc.status_code, request.url.path, exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_content(f"HTTP_{exc.status_code}", exc.detail),
    )


def _service_error_response(exc: FoodBinError, category: str) -> JSONResponse:
    return JSONResponse(
        status_code=exc.http_status, content=service_error_content(exc, category)
    )


async def service_validation_exception_handler(
    request: Request, exc: ServiceValidationError
):
    """Bad input the schema could not catch, e.g. best-before out of range"""
    logger.warning("Rejected input on %s: %s", request.url.path, exc)
    return _service_error_response(exc, "SERVICE_VALIDATION_ERROR")


async def not_found_exception_handler(request: Request, exc: NotFoundError):
    """Empty bin or search miss"""
    logger.info("Nothing found on %s: %s", request.url.path, exc)
    return _service_error_response(exc, "NOT_FOUND")


async def conflict_exception_handler(request: Request, exc: ConflictError):
    """Full bin"""
    logger.warning("Refused on %s: %s", request.url.path, exc)
    return _service_error_response(exc, "CONFLICT")


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception("Unexpected error on %s", request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_content("INTERNAL_SERVER_ERROR", "An unexpected error occurred"),
    )
