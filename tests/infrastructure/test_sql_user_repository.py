"""SQL User Repository: gateway contract against SQLite.

Invariants:
    - ids assigned by the database, ascending, never reused
    - duplicate non-null email -> UniqueViolationError("email"), session still usable
    - other integrity failures -> plain GatewayError
"""

import pytest
from sqlalchemy.exc import IntegrityError

from user_api.core.domain_types import NewUser, UserId, UserRecord
from user_api.core.errors import GatewayError, UniqueViolationError
from user_api.infrastructure.sql_user_repository import (
    SqlUserRepository, _translate_integrity_error,
)


@pytest.fixture
def repo(test_db):
    return SqlUserRepository(test_db)


async def test_create_assigns_id_and_returns_record(repo):
    user = await repo.create(NewUser(name="Ann", email="a@example.com"))
    assert isinstance(user, UserRecord)
    assert user.id >= 1
    assert await repo.get(UserId(user.id)) == user


async def test_list_all_is_ascending(repo):
    for name in ("C", "A", "B"):
        await repo.create(NewUser(name=name))
    users = await repo.list_all()
    assert [u.id for u in users] == sorted(u.id for u in users)
    assert [u.name for u in users] == ["C", "A", "B"]


async def test_duplicate_email_raises_unique_violation(repo):
    await repo.create(NewUser(name="Ann", email="dup@example.com"))
    with pytest.raises(UniqueViolationError) as exc_info:
        await repo.create(NewUser(name="Bo", email="dup@example.com"))
    assert exc_info.value.field == "email"

    # session rolled back and reusable
    assert len(await repo.list_all()) == 1


async def test_null_emails_do_not_collide(repo):
    await repo.create(NewUser(name="Ann"))
    await repo.create(NewUser(name="Bo"))
    assert len(await repo.list_all()) == 2


async def test_update_applies_only_given_columns(repo):
    user = await repo.create(NewUser(name="Ann", email="a@example.com"))
    updated = await repo.update(UserId(user.id), {"name": "Anna"})
    assert updated == UserRecord(user.id, "Anna", "a@example.com")


async def test_update_missing_returns_none(repo):
    assert await repo.update(UserId(404), {"name": "Z"}) is None


async def test_update_to_taken_email_raises_unique_violation(repo):
    await repo.create(NewUser(name="Ann", email="a@example.com"))
    bo = await repo.create(NewUser(name="Bo", email="b@example.com"))
    with pytest.raises(UniqueViolationError):
        await repo.update(UserId(bo.id), {"email": "a@example.com"})


async def test_delete_removes_row(repo):
    user = await repo.create(NewUser(name="Ann"))
    assert await repo.delete(UserId(user.id)) is True
    assert await repo.get(UserId(user.id)) is None
    assert await repo.delete(UserId(user.id)) is False


async def test_ids_not_reused_after_deleting_last_row(repo):
    first = await repo.create(NewUser(name="Ann"))
    await repo.delete(UserId(first.id))
    second = await repo.create(NewUser(name="Bo"))
    assert second.id > first.id


@pytest.mark.parametrize("driver_message", [
    "UNIQUE constraint failed: users.email",
    'duplicate key value violates unique constraint "users_email_key"',
])
def test_translate_recognizes_email_conflicts(driver_message):
    exc = IntegrityError("INSERT ...", {}, Exception(driver_message))
    translated = _translate_integrity_error(exc)
    assert isinstance(translated, UniqueViolationError)
    assert translated.field == "email"
    assert translated.message == driver_message


def test_translate_other_integrity_errors_to_gateway_error():
    exc = IntegrityError("INSERT ...", {}, Exception("NOT NULL constraint failed: users.name"))
    translated = _translate_integrity_error(exc)
    assert type(translated) is GatewayError
    assert "NOT NULL" in translated.message


@pytest.mark.parametrize("user_id", [2 ** 31, 10 ** 20, -(2 ** 31) - 1])
async def test_ids_outside_column_range_are_absent(repo, user_id):
    await repo.create(NewUser(name="Ann"))
    assert await repo.get(UserId(user_id)) is None
    assert await repo.update(UserId(user_id), {"name": "Z"}) is None
    assert await repo.delete(UserId(user_id)) is False
    assert len(await repo.list_all()) == 1
