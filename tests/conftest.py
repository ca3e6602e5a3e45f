"""
Shared pytest fixtures for user-registry tests.

This module provides:
- A fresh ``UserStore`` per test
- Settings, app and ``TestClient`` fixtures wired to that store
- Valid ``Authorization`` headers
- structlog reset after each test so log-capture tests stay isolated
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog
from fastapi import FastAPI
from fastapi.testclient import TestClient

from user_registry.api.app import create_app
from user_registry.api.settings import UserRegistryAPISettings
from user_registry.core.store import UserStore

TOKEN = "TestToken"


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


@pytest.fixture
def store() -> UserStore:
    return UserStore()


@pytest.fixture
def settings() -> UserRegistryAPISettings:
    return UserRegistryAPISettings(auth_token=TOKEN)


@pytest.fixture
def app(settings: UserRegistryAPISettings, store: UserStore) -> FastAPI:
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {TOKEN}"}
