"""
Audit log endpoints for API v1.

Provides read access to the audit entries written by the user
endpoints.  Entries are listed newest first with page-based
pagination, either for all users or for a single user id.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from user_management_api.app.api.deps import get_log_service
from user_management_api.app.models import LogEntry
from user_management_api.app.schemas.log import LogEntryRead, LogPage
from user_management_api.app.services.log_service import LogService

router = APIRouter()


def build_log_page(
    entries: List[LogEntry],
    page: int,
    page_size: int,
    total: int,
    user_id: Optional[int] = None,
) -> LogPage:
    return LogPage(
        items=[LogEntryRead.model_validate(entry) for entry in entries],
        page=page,
        page_size=page_size,
        total=total,
        user_id=user_id,
    )


@router.get("/", response_model=LogPage)
async def list_logs(
    page: int = Query(1, ge=1, description="1-based page number"),
    page_size: int = Query(25, ge=1, le=500, description="Entries per page"),
    logs: LogService = Depends(get_log_service),
) -> LogPage:
    """Return one page of audit entries, newest first."""
    entries, total = await logs.get_page_async((page - 1) * page_size, page_size)
    return build_log_page(entries, page, page_size, total)


@router.get("/user/{user_id}", response_model=LogPage)
async def list_logs_for_user(
    user_id: int,
    page: int = Query(1, ge=1, description="1-based page number"),
    page_size: int = Query(25, ge=1, le=500, description="Entries per page"),
    logs: LogService = Depends(get_log_service),
) -> LogPage:
    """Return one page of audit entries for ``user_id``, newest first."""
    entries, total = await logs.get_page_async((page - 1) * page_size, page_size, user_id)
    return build_log_page(entries, page, page_size, total, user_id)


@router.get("/{log_id}", response_model=LogEntryRead)
async def get_log(log_id: int, logs: LogService = Depends(get_log_service)) -> LogEntryRead:
    """Retrieve a single audit entry.  Returns HTTP 404 if it does not exist."""
    entry = await logs.get_by_id_async(log_id)
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Log entry not found")
    return LogEntryRead.model_validate(entry)
