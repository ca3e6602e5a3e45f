"""Core primitives: the User model, the in-memory store, errors, settings and logging.

Manifesto:
    Nothing in ``core`` knows about HTTP.  The store and model can be
    driven from the API, the CLI or a test with the same guarantees.

Tags:
    user-registry, core, domain, store
"""

from user_registry.core.errors import (
    ErrorCategory,
    RegistryError,
    UserNotFoundError,
    ValidationError,
)
from user_registry.core.models import User, validate_user_fields
from user_registry.core.store import UserStore

__all__ = [
    "ErrorCategory",
    "RegistryError",
    "User",
    "UserNotFoundError",
    "UserStore",
    "ValidationError",
    "validate_user_fields",
]
