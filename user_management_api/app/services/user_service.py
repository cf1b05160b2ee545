"""
Business logic for users.

The ``UserService`` wraps the ``users`` table of the in‑memory
``DataStore`` and adds the user-specific queries (filtering by the
active flag, lookup by id).  Every operation has an ``*_async``
counterpart with identical semantics for use from async request
handlers.  Audit logging is left to the API layer so that a log entry
is only written once the operation is known to have succeeded.
"""

import logging
from typing import List, Optional

from user_management_api.app.core.db import DataStore, RecordNotFoundError
from user_management_api.app.models import User

logger = logging.getLogger(__name__)


class UserService:
    """Service for creating, querying, updating and deleting users."""

    def __init__(self, store: DataStore) -> None:
        self._store = store

    def filter_by_active(self, is_active: bool) -> List[User]:
        """Return users whose active flag equals ``is_active``.

        Order follows the store: seeded users first, then users in the
        order they were created.
        """
        return [user for user in self._store.users.query_all() if user.is_active == is_active]

    def get_all(self) -> List[User]:
        return list(self._store.users.query_all())

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._store.users.get(user_id)

    def add(self, user: User) -> User:
        """Create ``user`` and return the stored copy with its new id."""
        created = self._store.users.create(user)
        logger.info("Created user %s (%s)", created.id, created.email)
        return created

    def update(self, user: User) -> User:
        """Overwrite all fields of an existing user.

        Raises ``RecordNotFoundError`` if no user with ``user.id`` exists.
        """
        updated = self._store.users.update(user)
        logger.info("Updated user %s", updated.id)
        return updated

    def delete(self, user_id: int) -> bool:
        """Delete the user with ``user_id``.

        Missing users are ignored.  Returns ``True`` if a user was removed.
        The user's log entries are kept.
        """
        user = self.get_by_id(user_id)
        if user is None:
            logger.debug("Delete skipped, user %s not found", user_id)
            return False
        try:
            self._store.users.remove(user)
        except RecordNotFoundError:
            # Removed by a concurrent request since the lookup.
            return False
        logger.info("Deleted user %s", user_id)
        return True

    async def filter_by_active_async(self, is_active: bool) -> List[User]:
        return self.filter_by_active(is_active)

    async def get_all_async(self) -> List[User]:
        return self.get_all()

    async def get_by_id_async(self, user_id: int) -> Optional[User]:
        return self.get_by_id(user_id)

    async def add_async(self, user: User) -> User:
        created = await self._store.users.create_async(user)
        logger.info("Created user %s (%s)", created.id, created.email)
        return created

    async def update_async(self, user: User) -> User:
        updated = await self._store.users.update_async(user)
        logger.info("Updated user %s", updated.id)
        return updated

    async def delete_async(self, user_id: int) -> bool:
        user = await self.get_by_id_async(user_id)
        if user is None:
            logger.debug("Delete skipped, user %s not found", user_id)
            return False
        try:
            await self._store.users.remove_async(user)
        except RecordNotFoundError:
            return False
        logger.info("Deleted user %s", user_id)
        return True
