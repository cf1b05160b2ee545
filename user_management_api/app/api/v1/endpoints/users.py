"""
User endpoints for API v1.

List, filter, add, view, edit and delete users.  Every successful
add, view, edit or delete writes exactly one audit entry for the
affected user; a request for an unknown user returns 404 and writes
nothing.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from user_management_api.app.api.deps import get_log_service, get_user_service
from user_management_api.app.api.v1.endpoints.logs import build_log_page
from user_management_api.app.core.db import RecordNotFoundError
from user_management_api.app.models import User
from user_management_api.app.schemas.log import LogPage
from user_management_api.app.schemas.user import UserCreate, UserRead, UserUpdate
from user_management_api.app.services.log_service import LogService
from user_management_api.app.services.user_service import UserService

router = APIRouter()

ACTION_CREATED = "Created"
ACTION_VIEWED = "Viewed"
ACTION_UPDATED = "Updated"
ACTION_DELETED = "Deleted"


def _to_read(users: List[User]) -> List[UserRead]:
    return [UserRead.model_validate(user) for user in users]


async def _get_user_or_404(users: UserService, user_id: int) -> User:
    user = await users.get_by_id_async(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.get("/", response_model=List[UserRead])
async def list_users(
    is_active: Optional[bool] = Query(None, description="Only return users with this active flag"),
    users: UserService = Depends(get_user_service),
) -> List[UserRead]:
    """Return all users, optionally filtered by the active flag."""
    if is_active is None:
        return _to_read(await users.get_all_async())
    return _to_read(await users.filter_by_active_async(is_active))


@router.get("/active", response_model=List[UserRead])
async def list_active_users(users: UserService = Depends(get_user_service)) -> List[UserRead]:
    return _to_read(await users.filter_by_active_async(True))


@router.get("/inactive", response_model=List[UserRead])
async def list_inactive_users(users: UserService = Depends(get_user_service)) -> List[UserRead]:
    return _to_read(await users.filter_by_active_async(False))


@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def add_user(
    user_in: UserCreate,
    users: UserService = Depends(get_user_service),
    logs: LogService = Depends(get_log_service),
) -> UserRead:
    """Add a new user and record a ``Created`` audit entry."""
    user = await users.add_async(user_in.to_user())
    await logs.log_async(ACTION_CREATED, f"User created: {user.full_name}", user.id)
    return UserRead.model_validate(user)


@router.get("/{user_id}", response_model=UserRead)
async def view_user(
    user_id: int,
    users: UserService = Depends(get_user_service),
    logs: LogService = Depends(get_log_service),
) -> UserRead:
    """Return one user and record a ``Viewed`` audit entry."""
    user = await _get_user_or_404(users, user_id)
    await logs.log_async(ACTION_VIEWED, f"Viewed user {user.full_name}", user.id)
    return UserRead.model_validate(user)


@router.put("/{user_id}", response_model=UserRead)
async def edit_user(
    user_id: int,
    user_in: UserUpdate,
    users: UserService = Depends(get_user_service),
    logs: LogService = Depends(get_log_service),
) -> UserRead:
    """Replace the user's fields and record an ``Updated`` audit entry."""
    user = await _get_user_or_404(users, user_id)
    try:
        user = await users.update_async(user_in.apply_to(user))
    except RecordNotFoundError:
        # Deleted by another request after the lookup above.
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    await logs.log_async(ACTION_UPDATED, f"User updated: {user.full_name}", user.id)
    return UserRead.model_validate(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    users: UserService = Depends(get_user_service),
    logs: LogService = Depends(get_log_service),
) -> None:
    """Delete the user and record a ``Deleted`` audit entry.

    The user's earlier audit entries are kept.
    """
    user = await _get_user_or_404(users, user_id)
    if not await users.delete_async(user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    await logs.log_async(ACTION_DELETED, f"User deleted: {user.full_name}", user.id)
    return None


@router.get("/{user_id}/logs", response_model=LogPage)
async def list_user_logs(
    user_id: int,
    page: int = Query(1, ge=1),
    page_size: int = Query(25, ge=1, le=500),
    logs: LogService = Depends(get_log_service),
) -> LogPage:
    """Return the audit entries for one user, newest first.

    Works for deleted users too, since their entries are retained.
    """
    entries, total = await logs.get_page_async((page - 1) * page_size, page_size, user_id)
    return build_log_page(entries, page, page_size, total, user_id)
