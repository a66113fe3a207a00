import pytest

from repup.core.errors import InvalidInputError, RecordNotFoundError
from repup.models import User
from repup.schemas.user import UserRead


async def test_create_then_update_same_identity(users):
    first = User(email="a@example.com", name="Ann", oauth_provider="google", oauth_id="g-1")
    stored = await users.create_or_update(first)
    assert first.id == stored.id >= 1

    again = User(email="ann@example.com", name="Ann B", oauth_provider="google", oauth_id="g-1")
    updated = await users.create_or_update(again)
    assert again.id == stored.id
    assert updated.email == "ann@example.com"

    fetched = await users.get_by_oauth("google", "g-1")
    assert (fetched.id, fetched.name) == (stored.id, "Ann B")


async def test_same_oauth_id_other_provider_is_another_user(users):
    google = await users.create_or_update(User(email="x@example.com", oauth_provider="google", oauth_id="42"))
    github = await users.create_or_update(User(email="x@example.com", oauth_provider="github", oauth_id="42"))
    assert google.id != github.id
    assert (await users.get_by_id(github.id)).oauth_provider == "github"


async def test_lookups_of_unknown_users(users):
    with pytest.raises(RecordNotFoundError):
        await users.get_by_id(3)
    with pytest.raises(RecordNotFoundError):
        await users.get_by_oauth("google", "nobody")


async def test_requires_oauth_identity(users):
    with pytest.raises(InvalidInputError):
        await users.create_or_update(User(email="a@example.com", oauth_provider="google", oauth_id=""))


async def test_oauth_id_not_serialized(users):
    stored = await users.create_or_update(User(email="s@example.com", oauth_provider="google", oauth_id="secret"))
    assert "oauth_id" not in UserRead.model_validate(stored).model_dump()
