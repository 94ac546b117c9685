"""Repository Factory for Persistence Layer.

Environment-based repository selection.
Strategy:
- .env (runtime): REPOSITORY_BACKEND=mongodb (production persistence)
- tests: REPOSITORY_BACKEND=inmemory (fast, isolated)
- Default: inmemory

Usage:
    from infrastructure.persistence.factory import create_repositories

    repositories = create_repositories()
    await repositories.ensure_indexes()
    ...
    repositories.close()
"""

from dataclasses import dataclass
import logging
from typing import Any, Optional

from domain.post.core.ports.post_repository import IPostRepository
from domain.user.core.ports.user_repository import IUserRepository
from infrastructure.config import get_repository_backend
from infrastructure.persistence.in_memory import (
    InMemoryPostRepository,
    InMemoryUserRepository,
)

logger = logging.getLogger(__name__)


@dataclass
class Repositories:
    """Repositories sharing one storage backend.

    ``client`` is the Motor client when backed by MongoDB, None otherwise.
    """

    users: IUserRepository
    posts: IPostRepository
    backend: str
    client: Optional[Any] = None

    async def ensure_indexes(self) -> None:
        """Create storage indexes (no-op for in-memory)."""
        for repository in (self.users, self.posts):
            ensure = getattr(repository, "ensure_indexes", None)
            if ensure is not None:
                await ensure()

    def close(self) -> None:
        """Release the database connection pool, if any."""
        if self.client is not None:
            self.client.close()
            logger.info("repositories.closed", extra={"backend": self.backend})


def create_repositories(backend: Optional[str] = None) -> Repositories:
    """Create repositories based on REPOSITORY_BACKEND env var.

    Values:
        - "inmemory": In-memory repositories (default, fast, transient)
        - "mongodb": MongoDB repositories (persistent, requires MONGODB_URI)

    Raises:
        ValueError: If the backend is unknown, or mongodb is selected
            without MONGODB_URI

    Example:
        # In .env (production):
        REPOSITORY_BACKEND=mongodb
        MONGODB_URI=mongodb://localhost:27017
    """
    mode = (backend or get_repository_backend()).lower()

    if mode == "mongodb":
        # Imported lazily so in-memory runs never need a driver connection.
        from infrastructure.persistence.mongodb import (
            MongoPostRepository,
            MongoUserRepository,
            create_mongo_client,
        )

        client = create_mongo_client()
        return Repositories(
            users=MongoUserRepository(client),
            posts=MongoPostRepository(client),
            backend=mode,
            client=client,
        )

    if mode == "inmemory":
        return Repositories(
            users=InMemoryUserRepository(),
            posts=InMemoryPostRepository(),
            backend=mode,
        )

    raise ValueError(
        f"Invalid REPOSITORY_BACKEND value: {mode}. Expected 'inmemory' or 'mongodb'"
    )
