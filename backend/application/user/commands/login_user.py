"""Login user command."""

from dataclasses import dataclass
import logging

from application.user.session import UserSession, open_session
from domain.shared.errors import DomainError
from domain.user.auth.ports.auth_provider import IPasswordHasher, ITokenProvider
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.validation import validate_login_input

logger = logging.getLogger(__name__)


@dataclass
class LoginUserCommand:
    """Command to check credentials and issue a token."""

    repository: IUserRepository
    password_hasher: IPasswordHasher
    token_provider: ITokenProvider

    async def execute(self, username: str, password: str) -> UserSession:
        """Execute login.

        Raises:
            DomainError: VALIDATION_FAILED for blank fields, unknown user
                (``general: "User not found"``) or wrong password
                (``general: "Wrong credentials"``)
        """
        result = validate_login_input(username, password)
        if not result.valid:
            raise DomainError.validation_failed("Errors", result.errors)

        user = await self.repository.find_by_username(username)
        if user is None:
            logger.info("Login for unknown user", extra={"username": username})
            raise DomainError.validation_failed("User not found", {"general": "User not found"})

        if not await self.password_hasher.verify(password, user.password):
            logger.info("Login with wrong credentials", extra={"username": username})
            raise DomainError.validation_failed(
                "Wrong credentials", {"general": "Wrong credentials"}
            )

        return open_session(user, self.token_provider)
