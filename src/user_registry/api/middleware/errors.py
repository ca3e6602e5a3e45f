"""
Error handling for the HTTP boundary.

- :class:`ExceptionNormalizationMiddleware` is the outermost pipeline stage.
  Any exception escaping the inner stages is logged with its traceback and
  replaced by a fixed ``500 {"error": "Internal server error."}``.
- :data:`ERROR_CODE_TO_STATUS` maps operation error codes to HTTP status.
- :func:`request_validation_handler` turns FastAPI request-shape errors into
  the same ``400`` the operations return for invalid user data.
"""

from __future__ import annotations

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from user_registry.core.logging import get_logger
from user_registry.core.models import INVALID_USER_MESSAGE

logger = get_logger(__name__)

INTERNAL_ERROR_BODY: dict[str, str] = {"error": "Internal server error."}
INVALID_REQUEST_MESSAGE = "Invalid request."

# ── Error code → HTTP status mapping ─────────────────────────────────────

ERROR_CODE_TO_STATUS: dict[str, int] = {
    "VALIDATION_FAILED": 400,
    "NOT_FOUND": 404,
    "INTERNAL": 500,
}


def status_for_error_code(code: str) -> int:
    """Resolve an ops error code to HTTP status, defaulting to 500."""
    return ERROR_CODE_TO_STATUS.get(code, 500)


def internal_error_response() -> JSONResponse:
    """The opaque 500 response; carries no detail about the failure."""
    return JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY)


class ExceptionNormalizationMiddleware(BaseHTTPMiddleware):
    """Convert any uncaught exception into the uniform 500 JSON response."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception(
                "unhandled_exception",
                method=request.method,
                path=request.url.path,
            )
            return internal_error_response()


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Map a malformed request to 400.

    Body problems share the message used for invalid user data; anything
    else (a non-integer path id, for instance) gets a generic one.
    """
    errors = exc.errors()
    in_body = any(err.get("loc", ("",))[0] == "body" for err in errors)
    logger.info(
        "request_invalid",
        method=request.method,
        path=request.url.path,
        error_count=len(errors),
    )
    return JSONResponse(
        status_code=400,
        content=INVALID_USER_MESSAGE if in_body else INVALID_REQUEST_MESSAGE,
    )
