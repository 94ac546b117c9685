"""Unit tests for RegisterUserCommand."""

import pytest

from application.user.commands import RegisterUserCommand
from domain.shared.errors import DomainError, ErrorKind
from domain.user.core.entities.user import User
from infrastructure.auth.jwt_provider import JwtTokenProvider
from infrastructure.auth.password_hasher import BcryptPasswordHasher
from infrastructure.persistence.in_memory import InMemoryUserRepository


@pytest.fixture
def command(
    user_repository: InMemoryUserRepository,
    password_hasher: BcryptPasswordHasher,
    token_provider: JwtTokenProvider,
) -> RegisterUserCommand:
    return RegisterUserCommand(
        repository=user_repository,
        password_hasher=password_hasher,
        token_provider=token_provider,
    )


@pytest.mark.asyncio
async def test_register_creates_user_and_token(
    command: RegisterUserCommand,
    user_repository: InMemoryUserRepository,
    password_hasher: BcryptPasswordHasher,
    token_provider: JwtTokenProvider,
) -> None:
    session = await command.execute("ann", "ann@example.com", "secret", "secret")

    stored = await user_repository.find_by_username("ann")
    assert stored is not None
    assert stored.id == session.user.id
    assert stored.email == "ann@example.com"
    assert stored.password != "secret"
    assert await password_hasher.verify("secret", stored.password)

    claim = token_provider.verify_token(session.token)
    assert claim.id == stored.id
    assert claim.username == "ann"
    assert claim.email == "ann@example.com"


@pytest.mark.asyncio
async def test_password_mismatch(
    command: RegisterUserCommand, user_repository: InMemoryUserRepository
) -> None:
    with pytest.raises(DomainError) as exc_info:
        await command.execute("ann", "ann@example.com", "secret", "other")

    assert exc_info.value.kind is ErrorKind.VALIDATION_FAILED
    assert exc_info.value.details == {"confirmPassword": "Passwords must match"}
    assert user_repository.count() == 0


@pytest.mark.asyncio
async def test_invalid_fields_reported_together(command: RegisterUserCommand) -> None:
    with pytest.raises(DomainError) as exc_info:
        await command.execute("", "nope", "", "")

    assert set(exc_info.value.details) == {"username", "email", "password"}


@pytest.mark.asyncio
async def test_duplicate_username(
    command: RegisterUserCommand, user_repository: InMemoryUserRepository
) -> None:
    await user_repository.add(User.create("ann", "first@example.com", "hash"))

    with pytest.raises(DomainError) as exc_info:
        await command.execute("ann", "second@example.com", "secret", "secret")

    assert exc_info.value.kind is ErrorKind.CONFLICT
    assert exc_info.value.details == {"username": "The username is taken"}
    assert user_repository.count() == 1
    stored = await user_repository.find_by_username("ann")
    assert stored is not None
    assert stored.email == "first@example.com"
