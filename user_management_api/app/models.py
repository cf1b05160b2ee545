"""Records held by the in-memory store."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class User:
    """A user account.

    ``id`` is ``None`` until the record has been created in the store.
    """

    forename: str
    surname: str
    email: str
    is_active: bool = False
    date_of_birth: Optional[date] = None
    id: Optional[int] = None

    @property
    def full_name(self) -> str:
        return f"{self.forename} {self.surname}"


@dataclass
class LogEntry:
    """An append-only audit record, optionally tied to a user id."""

    action: str
    description: Optional[str] = None
    user_id: Optional[int] = None
    created_at_utc: datetime = field(default_factory=utc_now)
    id: Optional[int] = None


__all__ = ["User", "LogEntry", "utc_now"]
