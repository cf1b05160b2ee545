"""
In-memory storage with a small repository interface.

This module provides the process-wide ``DataStore`` (``get_store``),
the startup hook that creates and seeds it (``init_db``) and the
``RecordTable`` type used for every entity.  Each entity type gets its
own table exposing ``query_all``, ``create``, ``update`` and
``remove`` plus ``*_async`` variants for the async request handlers.
To move to a real database you would replace ``RecordTable`` with an
implementation of the same methods and keep the services untouched.

Data is volatile: nothing survives a process restart.
"""

from __future__ import annotations

import asyncio
import copy
import logging
import threading
from typing import Dict, Generic, Iterator, List, Optional, TypeVar

from ..models import LogEntry, User
from .config import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StorageError(Exception):
    """Base class for errors raised by the store."""


class RecordNotFoundError(StorageError, LookupError):
    """Raised when an update or remove targets an id that is not stored."""

    def __init__(self, table: str, record_id: Optional[int]) -> None:
        super().__init__(f"{table} record {record_id} not found")
        self.table = table
        self.record_id = record_id


class DuplicateRecordError(StorageError):
    """Raised when a record is created with an id that is already taken."""

    def __init__(self, table: str, record_id: int) -> None:
        super().__init__(f"{table} record {record_id} already exists")
        self.table = table
        self.record_id = record_id


class RecordTable(Generic[T]):
    """Keyed collection of records of one type.

    Records must carry an integer ``id`` attribute; ``None`` or ``0``
    means "not yet assigned".  The table stores its own copies and hands
    out copies, so callers can never mutate stored state by accident.
    All access to the underlying dict goes through ``_lock``.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._records: Dict[int, T] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return self.count()

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def query_all(self) -> Iterator[T]:
        """Lazily iterate over copies of all records in insertion order.

        The table is snapshotted when iteration starts, not when this
        method is called, so writes made in between are visible while
        writes made during iteration are not.
        """
        with self._lock:
            snapshot = list(self._records.values())
        for record in snapshot:
            yield copy.copy(record)

    def get(self, record_id: int) -> Optional[T]:
        with self._lock:
            record = self._records.get(record_id)
            return copy.copy(record) if record is not None else None

    def create(self, record: T) -> T:
        """Insert ``record`` and return the stored copy.

        A missing id is assigned from the table's sequence and also set
        on the caller's instance.  Explicit ids are kept and move the
        sequence past them.
        """
        with self._lock:
            record_id = getattr(record, "id", None)
            if not record_id:
                record_id = self._next_id
                record.id = record_id
            elif record_id in self._records:
                raise DuplicateRecordError(self.name, record_id)
            self._next_id = max(self._next_id, record_id + 1)
            self._records[record_id] = copy.copy(record)
            return copy.copy(record)

    def update(self, record: T) -> T:
        """Overwrite the stored record with the same id."""
        with self._lock:
            record_id = getattr(record, "id", None)
            if record_id not in self._records:
                raise RecordNotFoundError(self.name, record_id)
            self._records[record_id] = copy.copy(record)
            return copy.copy(record)

    def remove(self, record: T) -> None:
        """Delete the stored record with the same id as ``record``."""
        with self._lock:
            record_id = getattr(record, "id", None)
            if record_id not in self._records:
                raise RecordNotFoundError(self.name, record_id)
            del self._records[record_id]

    async def create_async(self, record: T) -> T:
        return await asyncio.to_thread(self.create, record)

    async def update_async(self, record: T) -> T:
        return await asyncio.to_thread(self.update, record)

    async def remove_async(self, record: T) -> None:
        await asyncio.to_thread(self.remove, record)


# Sample users available from the first request.  No log entries are
# seeded.
SEED_USERS: List[User] = [
    User(id=1, forename="Peter", surname="Loew", email="ploew@example.com", is_active=True),
    User(id=2, forename="Benjamin Franklin", surname="Gates", email="bfgates@example.com", is_active=True),
    User(id=3, forename="Castor", surname="Troy", email="ctroy@example.com", is_active=False),
    User(id=4, forename="Memphis", surname="Raines", email="mraines@example.com", is_active=True),
    User(id=5, forename="Stanley", surname="Goodspeed", email="sgodspeed@example.com", is_active=True),
    User(id=6, forename="H.I.", surname="McDunnough", email="himcdunnough@example.com", is_active=True),
    User(id=7, forename="Cameron", surname="Poe", email="cpoe@example.com", is_active=False),
    User(id=8, forename="Edward", surname="Malus", email="emalus@example.com", is_active=False),
    User(id=9, forename="Damon", surname="Macready", email="dmacready@example.com", is_active=False),
    User(id=10, forename="Johnny", surname="Blaze", email="jblaze@example.com", is_active=True),
    User(id=11, forename="Robin", surname="Feld", email="rfeld@example.com", is_active=True),
]


class DataStore:
    """All tables of the application behind one persistence boundary."""

    def __init__(self) -> None:
        self.users: RecordTable[User] = RecordTable("users")
        self.logs: RecordTable[LogEntry] = RecordTable("logs")

    @classmethod
    def seeded(cls) -> "DataStore":
        store = cls()
        for user in SEED_USERS:
            store.users.create(copy.copy(user))
        return store


_store: Optional[DataStore] = None
_store_lock = threading.Lock()


def _build_store(seed: bool) -> DataStore:
    store = DataStore.seeded() if seed else DataStore()
    logger.info("Initialised in-memory store with %d users", store.users.count())
    return store


def init_db(seed: Optional[bool] = None) -> DataStore:
    """Create a fresh process-wide store, seeding it unless disabled.

    Called on application startup.  Any previously held data is
    discarded.
    """
    global _store
    store = _build_store(settings.seed_data if seed is None else seed)
    with _store_lock:
        _store = store
    return store


def get_store() -> DataStore:
    """Return the process-wide store, creating it on first use.

    Used as a FastAPI dependency by the API handlers.
    """
    global _store
    with _store_lock:
        if _store is None:
            _store = _build_store(settings.seed_data)
        return _store
