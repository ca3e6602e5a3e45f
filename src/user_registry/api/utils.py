"""
Shared API router utilities.

- ``handle_error()`` converts a failed ``OperationResult`` to a response.
"""

from __future__ import annotations

from fastapi.responses import JSONResponse
from starlette.responses import Response

from user_registry.api.middleware.errors import status_for_error_code
from user_registry.ops.result import OperationResult


def handle_error(result: OperationResult) -> Response:
    """Convert a failed ``OperationResult`` into an HTTP response.

    ``404`` carries no body, ``400`` carries the message as a JSON string,
    and anything else is rendered as ``{"error": message}``.
    """
    code = result.error.code if result.error else "INTERNAL"
    message = result.error.message if result.error else "Operation failed"
    status = status_for_error_code(code)

    if status == 404:
        return Response(status_code=404)
    if status == 400:
        return JSONResponse(status_code=400, content=message)
    return JSONResponse(status_code=status, content={"error": message})
