"""Tests for bearer-token authentication.

Uses the real FastAPI test client to exercise the middleware stack.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from user_registry.api.middleware.auth import BearerTokenMiddleware, token_matches


def _make_app(token: str = "TestToken") -> tuple[FastAPI, list[str]]:
    """Create a minimal FastAPI app with auth middleware and a call log."""
    calls: list[str] = []
    app = FastAPI()
    app.add_middleware(BearerTokenMiddleware, token=token)

    @app.get("/ping")
    def _ping():
        calls.append("ping")
        return {"status": "ok"}

    return app, calls


class TestTokenMatches:
    @pytest.mark.parametrize("header,expected", [
        ("Bearer TestToken", True),
        ("TestToken", True),
        ("TestBearer Token", True),
        ("Bearer Bearer TestToken", True),
        ("bearer TestToken", False),
        ("BEARER TestToken", False),
        ("Bearer testtoken", False),
        ("Bearer TestToken ", False),
        ("Basic TestToken", False),
        ("", False),
    ])
    def test_literal_replace_then_equality(self, header, expected):
        assert token_matches(header, "TestToken") is expected


class TestBearerTokenMiddleware:
    def test_missing_header(self):
        app, calls = _make_app()
        resp = TestClient(app).get("/ping")
        assert resp.status_code == 401
        assert resp.text == "Unauthorized"
        assert resp.headers["content-type"].startswith("text/plain")
        assert calls == []

    def test_wrong_token(self):
        app, calls = _make_app()
        resp = TestClient(app).get("/ping", headers={"Authorization": "Bearer nope"})
        assert resp.status_code == 401
        assert resp.text == "Unauthorized"
        assert calls == []

    def test_valid_token(self):
        app, calls = _make_app()
        resp = TestClient(app).get("/ping", headers={"Authorization": "Bearer TestToken"})
        assert resp.status_code == 200
        assert calls == ["ping"]

    def test_configured_token(self):
        app, _ = _make_app(token="other")
        client = TestClient(app)
        assert client.get("/ping", headers={"Authorization": "Bearer other"}).status_code == 200
        assert client.get("/ping", headers={"Authorization": "Bearer TestToken"}).status_code == 401


class TestAuthInFullApp:
    @pytest.mark.parametrize("headers", [
        {},
        {"Authorization": "Bearer wrong"},
        {"Authorization": "bearer TestToken"},
    ])
    def test_rejected_requests_never_mutate_store(self, client, store, headers):
        store.add("Alice", 30)

        responses = [
            client.post("/users", json={"userName": "Bob", "userAge": 25}, headers=headers),
            client.put("/users/1", json={"userName": "Eve", "userAge": 40}, headers=headers),
            client.delete("/users/1", headers=headers),
            client.get("/users", headers=headers),
            client.get("/exception-test/0", headers=headers),
        ]

        assert [r.status_code for r in responses] == [401] * 5
        assert all(r.text == "Unauthorized" for r in responses)
        assert [(u.id, u.user_name, u.user_age) for u in store.list()] == [(1, "Alice", 30)]

    def test_unknown_route_still_requires_auth(self, client):
        assert client.get("/nowhere").status_code == 401

    def test_unknown_route_with_auth_is_404(self, client, auth_headers):
        assert client.get("/nowhere", headers=auth_headers).status_code == 404

    def test_rejection_is_logged(self, client):
        from structlog.testing import capture_logs

        with capture_logs() as captured:
            client.get("/users")
        rejected = [e for e in captured if e["event"] == "auth_rejected"]
        assert rejected == [
            {"event": "auth_rejected", "path": "/users", "reason": "missing_header", "log_level": "warning"}
        ]
