"""
Request-scoped context for operations.

Every operation function receives an :class:`OperationContext` as its first
argument: the store to work on and a request id for log correlation.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from user_registry.core.store import UserStore


@dataclass
class OperationContext:
    """Context passed to every operation function.

    Attributes:
        store: The application's :class:`UserStore`.
        request_id: ``X-Request-ID`` of the HTTP request, or a fresh UUID.
    """

    store: UserStore
    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
