"""Shared test fixtures.

Unit and integration tests both get in-memory repositories, a fast bcrypt
hasher, a JWT provider with a fixed secret and a fresh event bus. The
``client`` fixture runs the real FastAPI app (lifespan included) over
httpx's ASGI transport.
"""

from __future__ import annotations

from typing import Any, AsyncIterator, Dict, Optional, cast

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from domain.user.auth.claims import AuthClaim
from graphql_api.context import GraphQLContext, create_context
from infrastructure.auth.jwt_provider import JwtTokenProvider
from infrastructure.auth.password_hasher import BcryptPasswordHasher
from infrastructure.events.in_memory_bus import InMemoryEventBus
from infrastructure.persistence.in_memory import (
    InMemoryPostRepository,
    InMemoryUserRepository,
)

TEST_SECRET = "test-secret-key"


class MockInfo:
    """Mock GraphQL Info object exposing only ``context``."""

    def __init__(self, context: Any):
        self.context = context


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def post_repository() -> InMemoryPostRepository:
    return InMemoryPostRepository()


@pytest.fixture
def event_bus() -> InMemoryEventBus:
    """Fixture providing clean InMemoryEventBus."""
    return InMemoryEventBus()


@pytest.fixture
def token_provider() -> JwtTokenProvider:
    return JwtTokenProvider(secret=TEST_SECRET, ttl_seconds=3600)


@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    """bcrypt at its minimum cost so tests stay fast."""
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def ann() -> AuthClaim:
    return AuthClaim(id="user-ann", username="ann", email="ann@example.com")


@pytest.fixture
def bob() -> AuthClaim:
    return AuthClaim(id="user-bob", username="bob", email="bob@example.com")


@pytest.fixture
def graphql_context(
    user_repository: InMemoryUserRepository,
    post_repository: InMemoryPostRepository,
    event_bus: InMemoryEventBus,
    token_provider: JwtTokenProvider,
    password_hasher: BcryptPasswordHasher,
) -> GraphQLContext:
    """Context without a connection (no Authorization header)."""
    return create_context(
        user_repository=user_repository,
        post_repository=post_repository,
        event_bus=event_bus,
        token_provider=token_provider,
        password_hasher=password_hasher,
    )


@pytest.fixture
def make_info(
    user_repository: InMemoryUserRepository,
    post_repository: InMemoryPostRepository,
    event_bus: InMemoryEventBus,
    token_provider: JwtTokenProvider,
    password_hasher: BcryptPasswordHasher,
) -> Any:
    """Factory for MockInfo with a dict context, optionally authenticated.

    ``make_info(claim)`` signs a token for ``claim``; ``make_info(header=...)``
    passes a raw Authorization header through.
    """

    def _make(claim: Optional[AuthClaim] = None, header: Optional[str] = None) -> MockInfo:
        if claim is not None:
            header = f"Bearer {token_provider.issue_token(claim)}"
        context: Dict[str, Any] = {
            "user_repository": user_repository,
            "post_repository": post_repository,
            "event_bus": event_bus,
            "token_provider": token_provider,
            "password_hasher": password_hasher,
            "authorization": header,
        }
        return MockInfo(context)

    return _make


@pytest_asyncio.fixture
async def client(monkeypatch: pytest.MonkeyPatch) -> AsyncIterator[AsyncClient]:
    """Async HTTP client for GraphQL/REST tests.

    ASGITransport does not drive the lifespan, so it is entered here.
    """
    monkeypatch.setenv("SECRET_KEY", TEST_SECRET)
    monkeypatch.setenv("REPOSITORY_BACKEND", "inmemory")
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")

    from app import app, lifespan

    async with lifespan(app):
        transport = ASGITransport(app=cast(Any, app))
        async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
            yield ac
