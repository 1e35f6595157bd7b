"""Error envelope shared by every endpoint.

All failures render as ``{"error": {"code", "message", "request_id", "details"}}``
so clients only ever parse one shape.
"""
from typing import Any, Dict, Optional

import structlog
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..services.loyalty import LoyaltyRedemptionError


logger = structlog.get_logger(__name__)


class APIError(Exception):
    """Raised by endpoints to refuse a request with a stable error code"""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


def loyalty_api_error(exc: LoyaltyRedemptionError) -> APIError:
    return APIError(
        code="LOYALTY_REDEMPTION_INVALID",
        message=str(exc),
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        details={"points": exc.points, "limit": exc.limit},
    )


def error_envelope(
    request: Request,
    code: str,
    message: str,
    status_code: int,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    request_id = getattr(request.state, "request_id", "unknown")
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "request_id": request_id,
                "details": jsonable_encoder(details or {}),
            }
        },
    )


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    # Refusals are expected outcomes; only server-side codes are errors.
    log = logger.error if exc.status_code >= 500 else logger.warning
    log("api_error", code=exc.code, message=exc.message, path=request.url.path)
    return error_envelope(request, exc.code, exc.message, exc.status_code, exc.details)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = jsonable_encoder(exc.errors())
    logger.warning("validation_error", errors=errors, path=request.url.path)
    return error_envelope(
        request,
        "VALIDATION_ERROR",
        "Request validation failed",
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        {"errors": errors},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.warning("http_exception", status_code=exc.status_code, path=request.url.path)
    return error_envelope(request, "HTTP_ERROR", str(exc.detail), exc.status_code)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_exception", exc_info=exc, path=request.url.path)
    return error_envelope(
        request,
        "INTERNAL_ERROR",
        "An internal error occurred",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
