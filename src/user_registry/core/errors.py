"""
Error hierarchy for user-registry.

Every expected failure in the service is a :class:`RegistryError` subclass
carrying a machine-readable ``code`` and an :class:`ErrorCategory`.  The
operations layer converts these into failed ``OperationResult`` values, and
the API maps the ``code`` onto an HTTP status.  Anything that is *not* a
``RegistryError`` is an unhandled fault and is left to the exception
normalization middleware.

Manifesto:
    Expected failures are values, unexpected failures are exceptions.
    A small closed set of codes keeps the HTTP mapping in one table.

Architecture:
    ::

        RegistryError  (INTERNAL / "INTERNAL")
        ├── ValidationError      (VALIDATION / "VALIDATION_FAILED")
        └── UserNotFoundError    (NOT_FOUND  / "NOT_FOUND")

Examples:
    >>> err = UserNotFoundError(7)
    >>> err.code
    'NOT_FOUND'
    >>> err.to_dict()["user_id"]
    7

Tags:
    errors, exceptions, error-hierarchy, user-registry
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Coarse classification used for logging and result routing."""

    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL = "INTERNAL"


class RegistryError(Exception):
    """Base exception for all user-registry errors.

    Subclasses set ``default_category`` and ``code`` as class attributes.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL
    code: str = "INTERNAL"

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, code={self.code})"


class ValidationError(RegistryError):
    """
    Candidate user data failed validation.

    Never admitted to the store; the caller must fix the input.
    """

    default_category = ErrorCategory.VALIDATION
    code = "VALIDATION_FAILED"

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        if self.value is not None:
            result["value"] = repr(self.value)
        return result


class UserNotFoundError(RegistryError):
    """No user with the requested id exists."""

    default_category = ErrorCategory.NOT_FOUND
    code = "NOT_FOUND"

    def __init__(self, user_id: int, message: str | None = None, **kwargs: Any):
        super().__init__(message or f"User {user_id} not found", **kwargs)
        self.user_id = user_id

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["user_id"] = self.user_id
        return result
