"""Shared fixtures for user_registry.ops tests."""

from __future__ import annotations

import pytest

from user_registry.ops.context import OperationContext


@pytest.fixture
def ctx(store) -> OperationContext:
    return OperationContext(store=store, request_id="req-test")
