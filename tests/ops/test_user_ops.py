"""
Tests for user CRUD operations.

Operations never raise for expected failures: validation and unknown ids
come back as failed ``OperationResult`` values.
"""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from user_registry.core.errors import ErrorCategory
from user_registry.ops.requests import (
    CreateUserRequest,
    DeleteUserRequest,
    GetUserRequest,
    UpdateUserRequest,
)
from user_registry.ops.users import (
    create_user,
    delete_user,
    get_user,
    list_users,
    update_user,
)


class TestCreateUser:
    def test_success(self, ctx):
        result = create_user(ctx, CreateUserRequest(user_name="Alice", user_age=30))
        assert result.success
        assert result.data.id == 1
        assert result.data.user_name == "Alice"
        assert result.elapsed_ms >= 0

    def test_roundtrip_through_get(self, ctx):
        created = create_user(ctx, CreateUserRequest(user_name="Bob", user_age=25)).data
        fetched = get_user(ctx, GetUserRequest(user_id=created.id))
        assert fetched.success
        assert fetched.data == created

    @pytest.mark.parametrize("name,age", [("", 30), ("  ", 30), (None, 30), ("Alice", 0), ("Alice", -5)])
    def test_validation_failure(self, ctx, store, name, age):
        result = create_user(ctx, CreateUserRequest(user_name=name, user_age=age))
        assert not result.success
        assert result.data is None
        assert result.error.code == "VALIDATION_FAILED"
        assert result.error.message == "Invalid user data."
        assert result.error.category is ErrorCategory.VALIDATION
        assert len(store) == 0

    def test_logs_creation(self, ctx):
        with capture_logs() as captured:
            create_user(ctx, CreateUserRequest(user_name="Alice", user_age=30))
        events = [e for e in captured if e["event"] == "user_created"]
        assert events and events[0]["user_id"] == 1
        assert events[0]["request_id"] == "req-test"
        assert events[0]["elapsed_ms"] >= 0

    def test_logs_rejection_details(self, ctx):
        with capture_logs() as captured:
            result = create_user(ctx, CreateUserRequest(user_name="Alice", user_age=0))
        events = [e for e in captured if e["event"] == "user_rejected"]
        assert events[0]["code"] == "VALIDATION_FAILED"
        assert events[0]["details"] == {"field": "userAge", "value": "0"}
        assert events[0]["elapsed_ms"] == result.elapsed_ms


class TestListUsers:
    def test_empty(self, ctx):
        result = list_users(ctx)
        assert result.success
        assert result.data == []

    def test_in_order(self, ctx):
        create_user(ctx, CreateUserRequest(user_name="Alice", user_age=30))
        create_user(ctx, CreateUserRequest(user_name="Bob", user_age=25))
        assert [u.user_name for u in list_users(ctx).data] == ["Alice", "Bob"]


class TestGetUser:
    def test_not_found(self, ctx):
        result = get_user(ctx, GetUserRequest(user_id=1))
        assert not result.success
        assert result.error.code == "NOT_FOUND"
        assert result.error.details == {"user_id": 1}

    def test_logs_lookup_failure(self, ctx):
        with capture_logs() as captured:
            get_user(ctx, GetUserRequest(user_id=4))
        events = [e for e in captured if e["event"] == "user_lookup_failed"]
        assert events[0]["details"] == {"user_id": 4}
        assert events[0]["request_id"] == "req-test"


class TestUpdateUser:
    def test_success(self, ctx, store):
        create_user(ctx, CreateUserRequest(user_name="Alice", user_age=30))
        result = update_user(ctx, UpdateUserRequest(user_id=1, user_name="Alicia", user_age=31))
        assert result.success
        assert store.get(1).user_name == "Alicia"
        assert store.get(1).user_age == 31

    def test_not_found(self, ctx, store):
        result = update_user(ctx, UpdateUserRequest(user_id=7, user_name="X", user_age=3))
        assert result.error.code == "NOT_FOUND"
        assert len(store) == 0

    def test_validation_leaves_store_untouched(self, ctx, store):
        create_user(ctx, CreateUserRequest(user_name="Alice", user_age=30))
        result = update_user(ctx, UpdateUserRequest(user_id=1, user_name="Alicia", user_age=0))
        assert result.error.code == "VALIDATION_FAILED"
        assert store.get(1).user_name == "Alice"
        assert store.get(1).user_age == 30

    def test_validation_wins_over_missing_id(self, ctx):
        result = update_user(ctx, UpdateUserRequest(user_id=99, user_name="", user_age=30))
        assert result.error.code == "VALIDATION_FAILED"


class TestDeleteUser:
    def test_success_then_not_found(self, ctx, store):
        create_user(ctx, CreateUserRequest(user_name="Alice", user_age=30))
        first = delete_user(ctx, DeleteUserRequest(user_id=1))
        second = delete_user(ctx, DeleteUserRequest(user_id=1))
        assert first.success
        assert first.data is None
        assert second.error.code == "NOT_FOUND"
        assert len(store) == 0

    def test_not_found_keeps_others(self, ctx, store):
        create_user(ctx, CreateUserRequest(user_name="Alice", user_age=30))
        result = delete_user(ctx, DeleteUserRequest(user_id=2))
        assert not result.success
        assert len(store) == 1
