"""GraphQL context factory for dependency injection.

Provides all required dependencies for GraphQL resolvers:
- Repositories (users, posts)
- Event bus (PostCreated → newPost subscription)
- Token provider and password hasher (auth)
"""

from typing import Any, Optional

from starlette.requests import HTTPConnection
from strawberry.fastapi import BaseContext

from domain.post.core.ports.post_repository import IPostRepository
from domain.shared.ports.event_bus import IEventBus
from domain.user.auth.ports.auth_provider import IPasswordHasher, ITokenProvider
from domain.user.core.ports.user_repository import IUserRepository


class GraphQLContext(BaseContext):
    """GraphQL context with all dependencies.

    This context is injected into all GraphQL resolvers via the
    `info` parameter. Resolvers access dependencies using
    `info.context.get("service_name")`.

    Attributes:
        user_repository: Repository for user accounts
        post_repository: Repository for posts and their comments/likes
        event_bus: Process-wide event bus owned by the app lifespan
        token_provider: Issues and verifies bearer tokens
        password_hasher: One-way password hashing
        connection: HTTP request or websocket of the current operation
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        post_repository: IPostRepository,
        event_bus: IEventBus,
        token_provider: ITokenProvider,
        password_hasher: IPasswordHasher,
        connection: Optional[HTTPConnection] = None,
    ) -> None:
        """Initialize GraphQL context with all dependencies."""
        super().__init__()
        self.user_repository = user_repository
        self.post_repository = post_repository
        self.event_bus = event_bus
        self.token_provider = token_provider
        self.password_hasher = password_hasher
        self.connection = connection

    @property
    def authorization(self) -> Optional[str]:
        """Raw ``Authorization`` header (HTTP request or websocket handshake).

        Websocket clients that cannot set headers may send
        ``{"Authorization": "Bearer ..."}`` as connection params instead.
        """
        if self.connection is not None:
            header = self.connection.headers.get("authorization")
            if header:
                return header
        params = getattr(self, "connection_params", None)
        if isinstance(params, dict):
            value = params.get("Authorization") or params.get("authorization")
            if isinstance(value, str):
                return value
        return None

    def get(self, key: str) -> Any:
        """Get dependency by name (for resolver compatibility).

        Example:
            >>> repository = info.context.get("post_repository")
        """
        return getattr(self, key, None)


def create_context(
    user_repository: IUserRepository,
    post_repository: IPostRepository,
    event_bus: IEventBus,
    token_provider: ITokenProvider,
    password_hasher: IPasswordHasher,
    connection: Optional[HTTPConnection] = None,
) -> GraphQLContext:
    """Create GraphQL context with all dependencies.

    Example:
        >>> context = create_context(
        ...     user_repository=InMemoryUserRepository(),
        ...     post_repository=InMemoryPostRepository(),
        ...     event_bus=InMemoryEventBus(),
        ...     token_provider=JwtTokenProvider(secret="s"),
        ...     password_hasher=BcryptPasswordHasher(rounds=4),
        ... )
    """
    return GraphQLContext(
        user_repository=user_repository,
        post_repository=post_repository,
        event_bus=event_bus,
        token_provider=token_provider,
        password_hasher=password_hasher,
        connection=connection,
    )
