"""
Log service for recording and querying audit entries.

This module provides a centralized API for writing audit entries to
the ``logs`` table of the ``DataStore`` and retrieving them with an
optional user filter and pagination.  Request handlers call
``LogService.log`` after a user has been created, viewed, updated or
deleted.  Entries are never modified or removed, and they outlive the
users they refer to.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from user_management_api.app.core.db import DataStore
from user_management_api.app.models import LogEntry, utc_now

logger = logging.getLogger(__name__)


def _newest_first(entries: Iterable[LogEntry]) -> List[LogEntry]:
    # Entries written within the same clock tick keep creation order.
    return sorted(entries, key=lambda entry: (entry.created_at_utc, entry.id or 0), reverse=True)


def _page(entries: List[LogEntry], skip: int, take: int) -> List[LogEntry]:
    if skip < 0 or take < 0:
        raise ValueError("skip and take must not be negative")
    return entries[skip:skip + take]


class LogService:
    """Service class for writing and retrieving audit entries."""

    def __init__(self, store: DataStore) -> None:
        self._store = store

    def get_all(self, skip: int = 0, take: int = 50) -> List[LogEntry]:
        """Return entries newest first, skipping ``skip`` and returning at most ``take``.

        Ordering and paging happen in memory over the full table.
        """
        return _page(_newest_first(self._store.logs.query_all()), skip, take)

    def get_by_user(self, user_id: int, skip: int = 0, take: int = 100) -> List[LogEntry]:
        """Return entries for ``user_id`` with the same ordering and paging as ``get_all``."""
        entries = (entry for entry in self._store.logs.query_all() if entry.user_id == user_id)
        return _page(_newest_first(entries), skip, take)

    def get_by_id(self, log_id: int) -> Optional[LogEntry]:
        return self._store.logs.get(log_id)

    def get_page(self, skip: int, take: int, user_id: Optional[int] = None) -> Tuple[List[LogEntry], int]:
        """Return one page of entries and the total it was cut from.

        Both come from the same snapshot of the table, so the total always
        matches the entries the page was taken from.  ``user_id`` narrows
        both to a single user.
        """
        entries = list(self._store.logs.query_all())
        if user_id is not None:
            entries = [entry for entry in entries if entry.user_id == user_id]
        return _page(_newest_first(entries), skip, take), len(entries)

    def count(self, user_id: Optional[int] = None) -> int:
        if user_id is None:
            return self._store.logs.count()
        return sum(1 for entry in self._store.logs.query_all() if entry.user_id == user_id)

    def log(
        self,
        action: str,
        description: Optional[str] = None,
        user_id: Optional[int] = None,
    ) -> LogEntry:
        """Insert a new audit entry stamped with the current UTC time.

        Parameters
        ----------
        action : str
            Short label of the action, e.g. ``"Created"`` or ``"Deleted"``.
        description : Optional[str]
            Human-readable text, typically naming the affected user.
        user_id : Optional[int]
            ID of the affected user.  Not checked against the users table.
        """
        entry = self._store.logs.create(self._new_entry(action, description, user_id))
        logger.debug("Logged %s for user %s", action, user_id)
        return entry

    async def get_all_async(self, skip: int = 0, take: int = 50) -> List[LogEntry]:
        return self.get_all(skip, take)

    async def get_by_user_async(self, user_id: int, skip: int = 0, take: int = 100) -> List[LogEntry]:
        return self.get_by_user(user_id, skip, take)

    async def get_by_id_async(self, log_id: int) -> Optional[LogEntry]:
        return self.get_by_id(log_id)

    async def get_page_async(
        self, skip: int, take: int, user_id: Optional[int] = None
    ) -> Tuple[List[LogEntry], int]:
        return self.get_page(skip, take, user_id)

    async def count_async(self, user_id: Optional[int] = None) -> int:
        return self.count(user_id)

    async def log_async(
        self,
        action: str,
        description: Optional[str] = None,
        user_id: Optional[int] = None,
    ) -> LogEntry:
        entry = await self._store.logs.create_async(self._new_entry(action, description, user_id))
        logger.debug("Logged %s for user %s", action, user_id)
        return entry

    @staticmethod
    def _new_entry(action: str, description: Optional[str], user_id: Optional[int]) -> LogEntry:
        return LogEntry(
            action=action,
            description=description,
            user_id=user_id,
            created_at_utc=utc_now(),
        )
