from __future__ import annotations

import asyncio
from datetime import date

import pytest

from user_management_api.app.core.db import DataStore, RecordNotFoundError
from user_management_api.app.models import User
from user_management_api.app.services.log_service import LogService
from user_management_api.app.services.user_service import UserService


def test_add_then_get_by_id_returns_same_fields(user_service: UserService) -> None:
    user = User(
        forename="Ada",
        surname="Lovelace",
        email="ada@example.com",
        is_active=True,
        date_of_birth=date(1815, 12, 10),
    )

    created = user_service.add(user)
    fetched = user_service.get_by_id(created.id)

    assert fetched == created
    assert (fetched.forename, fetched.surname, fetched.email, fetched.is_active, fetched.date_of_birth) == (
        "Ada",
        "Lovelace",
        "ada@example.com",
        True,
        date(1815, 12, 10),
    )


def test_add_assigns_new_id_and_grows_user_list(user_service: UserService) -> None:
    before = user_service.get_all()

    created = user_service.add(User(forename="Ada", surname="Lovelace", email="ada@example.com", is_active=True))

    after = user_service.get_all()
    assert created.id not in range(1, 12)
    assert len(after) == len(before) + 1


def test_get_by_id_returns_none_for_unknown_user(user_service: UserService) -> None:
    assert user_service.get_by_id(999) is None


def test_active_and_inactive_partition_all_users(user_service: UserService) -> None:
    user_service.add(User(forename="New", surname="Person", email="new@example.com", is_active=False))

    active = user_service.filter_by_active(True)
    inactive = user_service.filter_by_active(False)
    everyone = user_service.get_all()

    combined = [user.id for user in active] + [user.id for user in inactive]
    assert sorted(combined) == sorted(user.id for user in everyone)
    assert len(set(combined)) == len(combined)
    assert all(user.is_active for user in active)
    assert not any(user.is_active for user in inactive)


def test_filter_keeps_store_order(user_service: UserService) -> None:
    assert [user.id for user in user_service.filter_by_active(False)] == [3, 7, 8, 9]


def test_update_overwrites_user(user_service: UserService) -> None:
    user = user_service.get_by_id(1)
    user.email = "peter.loew@example.com"
    user.is_active = False

    user_service.update(user)

    stored = user_service.get_by_id(1)
    assert stored.email == "peter.loew@example.com"
    assert stored.is_active is False


def test_update_of_unknown_user_raises(user_service: UserService) -> None:
    with pytest.raises(RecordNotFoundError):
        user_service.update(User(id=500, forename="No", surname="One", email="no@example.com"))


def test_delete_of_unknown_user_is_a_no_op(store: DataStore, user_service: UserService) -> None:
    before = user_service.get_all()

    assert user_service.delete(999) is False

    assert user_service.get_all() == before
    assert store.logs.count() == 0


def test_delete_keeps_the_users_log_entries(user_service: UserService, log_service: LogService) -> None:
    log_service.log("Viewed", "Viewed user Peter Loew", 1)

    assert user_service.delete(1) is True

    assert user_service.get_by_id(1) is None
    assert [entry.action for entry in log_service.get_by_user(1)] == ["Viewed"]


def test_castor_troy_scenario(user_service: UserService, log_service: LogService) -> None:
    inactive_ids = [user.id for user in user_service.filter_by_active(False)]
    assert 3 in inactive_ids
    assert 1 not in inactive_ids

    user_service.delete(3)
    assert user_service.get_by_id(3) is None

    log_service.log("Deleted", "User deleted: Castor Troy", 3)
    entries = log_service.get_by_user(3, 0, 10)
    assert len(entries) == 1
    assert entries[0].action == "Deleted"


def test_async_variants_match_blocking_ones(user_service: UserService) -> None:
    async def scenario() -> None:
        created = await user_service.add_async(
            User(forename="Ada", surname="Lovelace", email="ada@example.com", is_active=True)
        )
        assert await user_service.get_by_id_async(created.id) == created
        assert len(await user_service.get_all_async()) == 12
        assert [u.id for u in await user_service.filter_by_active_async(False)] == [
            u.id for u in user_service.filter_by_active(False)
        ]

        created.surname = "King"
        await user_service.update_async(created)
        assert (await user_service.get_by_id_async(created.id)).surname == "King"

        assert await user_service.delete_async(created.id) is True
        assert await user_service.delete_async(created.id) is False
        assert await user_service.get_by_id_async(created.id) is None

    asyncio.run(scenario())
