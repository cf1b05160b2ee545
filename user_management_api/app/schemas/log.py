"""
Pydantic schemas for audit log entries.

Entries are created by the server only, so there is no create schema;
clients read single entries or pages of entries.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class LogEntryRead(BaseModel):
    """Schema for reading a log entry."""

    id: int
    user_id: Optional[int] = Field(None, description="User the action applied to, if any")
    action: str = Field(..., examples=["Created"])
    description: Optional[str] = None
    created_at_utc: datetime

    model_config = {
        "from_attributes": True,
    }


class LogPage(BaseModel):
    """One page of log entries, newest first."""

    items: List[LogEntryRead]
    page: int
    page_size: int
    total: int
    user_id: Optional[int] = None
