"""
Diagnostics router.

``GET /exception-test/{num}`` returns ``1 / num`` as an integer.  With
``num == 0`` the division fails and the exception is left to propagate, so
the response is the exception normalization stage's 500.
"""

from __future__ import annotations

from fastapi import APIRouter, Path

from user_registry.ops.diagnostics import reciprocal

router = APIRouter()


@router.get("/exception-test/{num}", response_model=int)
def exception_test(num: int = Path(..., description="Divisor")):
    return reciprocal(num)
