"""
Service information endpoint.

Returns the application name and version so that clients and health
checks can confirm which build is running.  The handler is mounted at
the application root rather than under ``/api/v1``.
"""

from typing import Dict

from fastapi import APIRouter

from user_management_api.app.core.config import settings

router = APIRouter()


@router.get("/", response_model=Dict[str, str])
async def get_info() -> Dict[str, str]:
    return {
        "name": settings.project_name,
        "version": settings.api_version,
        "users": "/api/v1/users/",
        "logs": "/api/v1/logs/",
    }
