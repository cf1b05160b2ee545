"""
FastAPI dependencies shared by the v1 endpoints.

Services are cheap wrappers around the process-wide store, so a new
instance is built per request.  Tests override ``get_store`` to run
against an isolated store.
"""

from fastapi import Depends

from user_management_api.app.core.db import DataStore, get_store
from user_management_api.app.services.log_service import LogService
from user_management_api.app.services.user_service import UserService


def get_user_service(store: DataStore = Depends(get_store)) -> UserService:
    return UserService(store)


def get_log_service(store: DataStore = Depends(get_store)) -> LogService:
    return LogService(store)
