from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from user_management_api.app.core.db import DataStore
from user_management_api.app.main import create_app
from user_management_api.app.services.log_service import LogService
from user_management_api.app.services.user_service import UserService


@pytest.fixture()
def store() -> DataStore:
    return DataStore.seeded()


@pytest.fixture()
def user_service(store: DataStore) -> UserService:
    return UserService(store)


@pytest.fixture()
def log_service(store: DataStore) -> LogService:
    return LogService(store)


@pytest.fixture()
def client(store: DataStore):
    app = create_app(store=store)
    with TestClient(app) as test_client:
        yield test_client
