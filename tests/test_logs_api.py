from __future__ import annotations

from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient

from user_management_api.app.core.db import DataStore
from user_management_api.app.models import LogEntry
from user_management_api.app.services.log_service import LogService


def _fill(store: DataStore, count: int) -> None:
    base = datetime(2024, 5, 1, tzinfo=timezone.utc)
    for index in range(count):
        store.logs.create(
            LogEntry(
                action="Viewed",
                description=f"entry {index}",
                user_id=1 if index % 2 else 2,
                created_at_utc=base + timedelta(minutes=index),
            )
        )


def test_list_logs_empty(client: TestClient) -> None:
    response = client.get("/api/v1/logs/")

    assert response.status_code == 200
    assert response.json() == {"items": [], "page": 1, "page_size": 25, "total": 0, "user_id": None}


def test_list_logs_pages_newest_first(client: TestClient, store: DataStore) -> None:
    _fill(store, 30)

    first = client.get("/api/v1/logs/").json()
    second = client.get("/api/v1/logs/", params={"page": 2}).json()

    assert first["total"] == 30
    assert len(first["items"]) == 25
    assert first["items"][0]["description"] == "entry 29"
    assert [item["description"] for item in second["items"]] == [f"entry {i}" for i in range(4, -1, -1)]


def test_list_logs_rejects_bad_page(client: TestClient) -> None:
    assert client.get("/api/v1/logs/", params={"page": 0}).status_code == 422
    assert client.get("/api/v1/logs/", params={"page_size": 0}).status_code == 422


def test_logs_for_user(client: TestClient, store: DataStore) -> None:
    _fill(store, 10)

    body = client.get("/api/v1/logs/user/1", params={"page_size": 3}).json()

    assert body["user_id"] == 1
    assert body["total"] == 5
    assert [item["description"] for item in body["items"]] == ["entry 9", "entry 7", "entry 5"]


def test_get_log_entry(client: TestClient, store: DataStore) -> None:
    client.post(
        "/api/v1/users/",
        json={"forename": "Ada", "surname": "Lovelace", "email": "ada@example.com"},
    )
    entry_id = next(store.logs.query_all()).id

    response = client.get(f"/api/v1/logs/{entry_id}")

    assert response.status_code == 200
    body = response.json()
    assert body["action"] == "Created"
    assert body["user_id"] == 12
    assert body["description"] == "User created: Ada Lovelace"
    assert datetime.fromisoformat(body["created_at_utc"].replace("Z", "+00:00")).tzinfo is not None


def test_get_unknown_log_entry_is_404(client: TestClient) -> None:
    response = client.get("/api/v1/logs/42")

    assert response.status_code == 404
    assert response.json()["detail"] == "Log entry not found"


def test_long_entries_written_by_the_service_still_list(client: TestClient, store: DataStore) -> None:
    logs = LogService(store)
    logs.log("A" * 101, "fine", 1)
    logs.log("Viewed", "d" * 1001, 1)

    for path in ("/api/v1/logs/", "/api/v1/logs/user/1", "/api/v1/users/1/logs"):
        response = client.get(path)
        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 2
        assert {len(item["action"]) for item in body["items"]} == {101, 6}

    entry_id = next(store.logs.query_all()).id
    assert client.get(f"/api/v1/logs/{entry_id}").json()["action"] == "A" * 101
