"""Unit tests for the repository factory."""

import pytest

from infrastructure.persistence.factory import create_repositories
from infrastructure.persistence.in_memory import (
    InMemoryPostRepository,
    InMemoryUserRepository,
)


def test_default_is_inmemory(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("REPOSITORY_BACKEND", raising=False)

    repositories = create_repositories()

    assert repositories.backend == "inmemory"
    assert isinstance(repositories.users, InMemoryUserRepository)
    assert isinstance(repositories.posts, InMemoryPostRepository)
    assert repositories.client is None


def test_explicit_backend_overrides_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REPOSITORY_BACKEND", "mongodb")

    assert create_repositories("inmemory").backend == "inmemory"


def test_unknown_backend() -> None:
    with pytest.raises(ValueError, match="Invalid REPOSITORY_BACKEND"):
        create_repositories("postgres")


def test_mongodb_without_uri(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MONGODB_URI", raising=False)

    with pytest.raises(ValueError, match="MONGODB_URI"):
        create_repositories("mongodb")


@pytest.mark.asyncio
async def test_inmemory_lifecycle_is_noop() -> None:
    repositories = create_repositories("inmemory")

    await repositories.ensure_indexes()
    repositories.close()
