"""
Operation result envelope.

Every operation returns an :class:`OperationResult` instead of raising for
expected failures.  Routers branch on ``success``; the operations log
``elapsed_ms`` and, on failure, the error ``details``.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from user_registry.core.errors import ErrorCategory, RegistryError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class OperationError:
    """Why an operation failed.

    Attributes:
        code: Machine-readable code (``NOT_FOUND``, ``VALIDATION_FAILED``).
        message: Text rendered to the client.
        category: Coarse :class:`ErrorCategory`.
        details: Context taken from the originating error (``field``,
            ``value``, ``user_id``).
    """

    code: str
    message: str
    category: ErrorCategory | None = None
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class OperationResult(Generic[T]):
    """Success or failure of one operation, plus how long it took."""

    success: bool
    data: T | None = None
    error: OperationError | None = None
    elapsed_ms: float = 0.0

    @classmethod
    def ok(cls, data: T, *, elapsed_ms: float = 0.0) -> OperationResult[T]:
        return cls(success=True, data=data, elapsed_ms=elapsed_ms)

    @classmethod
    def fail(
        cls,
        code: str,
        message: str,
        *,
        category: ErrorCategory | None = None,
        details: dict[str, Any] | None = None,
        elapsed_ms: float = 0.0,
    ) -> OperationResult[T]:
        return cls(
            success=False,
            error=OperationError(
                code=code,
                message=message,
                category=category,
                details=details or {},
            ),
            elapsed_ms=elapsed_ms,
        )

    @classmethod
    def from_error(cls, exc: RegistryError, *, elapsed_ms: float = 0.0) -> OperationResult[T]:
        """Failed result whose ``details`` are the error's extra fields."""
        details = exc.to_dict()
        for key in ("error_type", "code", "message", "category"):
            details.pop(key, None)
        return cls.fail(
            exc.code,
            exc.message,
            category=exc.category,
            details=details,
            elapsed_ms=elapsed_ms,
        )


class _Timer:
    __slots__ = ("_start",)

    def __init__(self) -> None:
        self._start = time.perf_counter()

    @property
    def elapsed_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 3)


def start_timer() -> _Timer:
    """Start a stopwatch; read ``timer.elapsed_ms`` when done."""
    return _Timer()
