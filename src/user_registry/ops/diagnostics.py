"""
Diagnostic operations used to exercise the error pipeline.
"""

from __future__ import annotations


def reciprocal(num: int) -> int:
    """Integer ``1 / num``, truncated toward zero.

    ``num == 0`` raises :class:`ZeroDivisionError` on purpose; callers let it
    propagate so the unhandled-fault path can be observed end to end.
    """
    return int(1 / num)
