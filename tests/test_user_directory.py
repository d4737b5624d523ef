"""
Tests for the user directory service.
"""

import pytest

from zipweather.exceptions import AlreadyRegistered, UserNotFound
from zipweather.services.user_directory import UserDirectory


@pytest.mark.asyncio
async def test_register_creates_active_user(db):
    directory = UserDirectory(db)

    user = await directory.register("new@example.com")

    assert user.id is not None
    assert user.email == "new@example.com"
    assert user.is_active is True


@pytest.mark.asyncio
async def test_register_twice_fails(db):
    directory = UserDirectory(db)
    await directory.register("twice@example.com")

    with pytest.raises(AlreadyRegistered):
        await directory.register("twice@example.com")


@pytest.mark.asyncio
async def test_find_by_email_miss_returns_none(db):
    assert await UserDirectory(db).find_by_email("ghost@example.com") is None


@pytest.mark.asyncio
async def test_deactivate_then_activate(db):
    directory = UserDirectory(db)
    await directory.register("flip@example.com")

    await directory.deactivate("flip@example.com")
    db.expire_all()
    assert (await directory.find_by_email("flip@example.com")).is_active is False

    await directory.activate("flip@example.com")
    db.expire_all()
    assert (await directory.find_by_email("flip@example.com")).is_active is True


@pytest.mark.asyncio
async def test_activate_is_idempotent(db):
    directory = UserDirectory(db)
    await directory.register("idem@example.com")

    await directory.activate("idem@example.com")
    await directory.activate("idem@example.com")

    db.expire_all()
    assert (await directory.find_by_email("idem@example.com")).is_active is True


@pytest.mark.asyncio
@pytest.mark.parametrize("operation", ["activate", "deactivate"])
async def test_status_change_for_unknown_user(db, operation):
    directory = UserDirectory(db)

    with pytest.raises(UserNotFound):
        await getattr(directory, operation)("ghost@example.com")
