"""
In-memory User store.

:class:`UserStore` is the only owner of User records for the lifetime of the
process.  Every public method takes the same ``threading.Lock``, so each
create / list / get / update / delete is one atomic transaction even though
FastAPI runs sync endpoints on a worker thread pool.

Records never leave the store by reference: reads return copies, and writes
take plain field values.  Nothing is persisted; a restart starts empty.

Id assignment:
    New ids are ``max(existing ids) + 1`` (``1`` on an empty store).  The
    store also remembers the highest id it has ever issued, so removing the
    newest record does not put its id back into circulation.

Examples:
    >>> store = UserStore()
    >>> store.add("Alice", 30).id
    1
    >>> store.add("Bob", 25).id
    2
    >>> store.remove(2).user_name
    'Bob'
    >>> store.add("Carol", 41).id
    3

Tags:
    store, in-memory, thread-safe, user-registry
"""

from __future__ import annotations

import threading
from dataclasses import replace

from user_registry.core.errors import UserNotFoundError
from user_registry.core.logging import get_logger
from user_registry.core.models import User, validate_user_fields

logger = get_logger(__name__)


class UserStore:
    """Ordered, lock-guarded collection of :class:`User` records."""

    def __init__(self) -> None:
        self._users: list[User] = []
        self._last_id = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def add(self, user_name: str, user_age: int) -> User:
        """Validate, assign the next id and append a new user."""
        validate_user_fields(user_name, user_age)
        with self._lock:
            current_max = max((u.id for u in self._users), default=0)
            new_id = max(current_max, self._last_id) + 1
            user = User(id=new_id, user_name=user_name, user_age=user_age)
            self._users.append(user)
            self._last_id = new_id
            logger.debug("user_stored", user_id=new_id, total=len(self._users))
            return replace(user)

    def list(self) -> list[User]:
        """Snapshot of every user in insertion order."""
        with self._lock:
            return [replace(u) for u in self._users]

    def get(self, user_id: int) -> User:
        """Return a copy of the user with *user_id*."""
        with self._lock:
            return replace(self._find(user_id))

    def update(self, user_id: int, user_name: str, user_age: int) -> User:
        """Overwrite name and age of an existing user; ``id`` never changes.

        Validation runs before the lookup, so bad input is reported even
        for an unknown id.
        """
        validate_user_fields(user_name, user_age)
        with self._lock:
            user = self._find(user_id)
            user.user_name = user_name
            user.user_age = user_age
            return replace(user)

    def remove(self, user_id: int) -> User:
        """Permanently remove a user and return the removed record."""
        with self._lock:
            user = self._find(user_id)
            self._users.remove(user)
            logger.debug("user_removed", user_id=user_id, total=len(self._users))
            return user

    def clear(self) -> None:
        """Drop every record.  Issued ids stay retired."""
        with self._lock:
            self._users.clear()

    def _find(self, user_id: int) -> User:
        # caller holds the lock
        for user in self._users:
            if user.id == user_id:
                return user
        raise UserNotFoundError(user_id)
