"""User domain GraphQL mutations."""

from typing import Any

import strawberry
from strawberry.types import Info

from application.user.commands import LoginUserCommand, RegisterUserCommand
from graphql_api.types import RegisterInput, UserType, map_session_to_graphql


@strawberry.type
class UserMutations:
    """User domain mutations.

    Both operations are public and return the user with a new token.

    Examples:
        mutation {
          register(registerInput: {
            username: "ann"
            email: "ann@example.com"
            password: "secret"
            confirmPassword: "secret"
          }) { id username token }
        }
    """

    @strawberry.mutation
    async def register(self, info: Info[Any, Any], register_input: RegisterInput) -> UserType:
        """Create an account and log it in.

        Raises:
            DomainError: VALIDATION_FAILED (per-field details) or CONFLICT
                if the username is taken
        """
        command = RegisterUserCommand(
            repository=_dependency(info, "user_repository"),
            password_hasher=_dependency(info, "password_hasher"),
            token_provider=_dependency(info, "token_provider"),
        )
        session = await command.execute(
            username=register_input.username,
            email=register_input.email,
            password=register_input.password,
            confirm_password=register_input.confirm_password,
        )
        return map_session_to_graphql(session)

    @strawberry.mutation
    async def login(self, info: Info[Any, Any], username: str, password: str) -> UserType:
        """Check credentials and issue a token.

        Raises:
            DomainError: VALIDATION_FAILED for blank fields, unknown user
                or wrong password
        """
        command = LoginUserCommand(
            repository=_dependency(info, "user_repository"),
            password_hasher=_dependency(info, "password_hasher"),
            token_provider=_dependency(info, "token_provider"),
        )
        session = await command.execute(username=username, password=password)
        return map_session_to_graphql(session)


def _dependency(info: Info[Any, Any], name: str) -> Any:
    value = info.context.get(name)
    if not value:
        raise RuntimeError(f"{name} not found in context")
    return value
