"""Unit tests for InMemoryUserRepository."""

import pytest

from domain.shared.errors import DomainError, ErrorKind
from domain.user.core.entities.user import User
from infrastructure.persistence.in_memory import InMemoryUserRepository


@pytest.mark.asyncio
async def test_add_and_find(user_repository: InMemoryUserRepository) -> None:
    user = User.create("ann", "ann@example.com", "hash")
    await user_repository.add(user)

    assert await user_repository.find_by_username("ann") == user
    assert await user_repository.exists("ann") is True


@pytest.mark.asyncio
async def test_lookup_is_case_sensitive(user_repository: InMemoryUserRepository) -> None:
    await user_repository.add(User.create("ann", "ann@example.com", "hash"))

    assert await user_repository.find_by_username("Ann") is None
    assert await user_repository.exists("ANN") is False


@pytest.mark.asyncio
async def test_missing(user_repository: InMemoryUserRepository) -> None:
    assert await user_repository.find_by_username("ghost") is None


@pytest.mark.asyncio
async def test_duplicate_username_conflict(user_repository: InMemoryUserRepository) -> None:
    await user_repository.add(User.create("ann", "ann@example.com", "hash"))

    with pytest.raises(DomainError) as exc_info:
        await user_repository.add(User.create("ann", "other@example.com", "hash"))

    assert exc_info.value.kind is ErrorKind.CONFLICT
    assert exc_info.value.details == {"username": "The username is taken"}
    assert user_repository.count() == 1
