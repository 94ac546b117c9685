"""Register user command."""

from dataclasses import dataclass
import logging

from application.user.session import UserSession, open_session
from domain.shared.errors import DomainError
from domain.user.auth.ports.auth_provider import IPasswordHasher, ITokenProvider
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.validation import validate_register_input

logger = logging.getLogger(__name__)


@dataclass
class RegisterUserCommand:
    """Command to create an account and log it in.

    Flow: validate fields → username pre-check → hash password → insert
    (the repository rejects a duplicate that slipped past the pre-check)
    → issue token.

    Examples:
        >>> command = RegisterUserCommand(repository, hasher, tokens)
        >>> session = await command.execute("ann", "ann@example.com", "pw", "pw")
        >>> session.user.username
        'ann'
    """

    repository: IUserRepository
    password_hasher: IPasswordHasher
    token_provider: ITokenProvider

    async def execute(
        self,
        username: str,
        email: str,
        password: str,
        confirm_password: str,
    ) -> UserSession:
        """Execute registration.

        Raises:
            DomainError: VALIDATION_FAILED with per-field details, or
                CONFLICT if the username is taken
        """
        result = validate_register_input(username, email, password, confirm_password)
        if not result.valid:
            raise DomainError.validation_failed("Errors", result.errors)

        if await self.repository.exists(username):
            raise DomainError.conflict(
                "Username is taken", {"username": "The username is taken"}
            )

        password_hash = await self.password_hasher.hash(password)
        user = User.create(username=username, email=email, password_hash=password_hash)
        await self.repository.add(user)

        logger.info("User registered", extra={"user_id": user.id, "username": username})

        return open_session(user, self.token_provider)
