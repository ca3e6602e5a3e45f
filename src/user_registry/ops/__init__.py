"""
Operations layer.

Plain functions that take an :class:`OperationContext` plus a typed request
and return an :class:`OperationResult`.  Expected failures (bad input,
unknown id) come back as failed results; only genuinely unexpected faults
are raised.

Manifesto:
    Routers stay thin and the same operations can be called from the
    API, the CLI or a test without an HTTP round-trip.

Tags:
    user-registry, ops, operations, result-envelope
"""

from user_registry.ops.context import OperationContext
from user_registry.ops.result import OperationError, OperationResult

__all__ = [
    "OperationContext",
    "OperationError",
    "OperationResult",
]
