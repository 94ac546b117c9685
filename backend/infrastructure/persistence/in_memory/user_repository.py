"""In-memory User Repository for testing."""

from copy import deepcopy
from typing import Dict, Optional

from domain.shared.errors import DomainError
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository


class InMemoryUserRepository(IUserRepository):
    """In-memory implementation of User repository for testing.

    Stores users in memory keyed by username, which also enforces
    username uniqueness on insert.

    Examples:
        >>> repo = InMemoryUserRepository()
        >>> await repo.add(User.create("ann", "ann@example.com", "hash"))
        >>> found = await repo.find_by_username("ann")
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._users: Dict[str, User] = {}

    async def add(self, user: User) -> None:
        """Insert user.

        Raises:
            DomainError: CONFLICT if username is taken
        """
        if user.username in self._users:
            raise DomainError.conflict(
                "Username is taken", {"username": "The username is taken"}
            )
        self._users[user.username] = deepcopy(user)

    async def find_by_username(self, username: str) -> Optional[User]:
        user = self._users.get(username)
        return deepcopy(user) if user else None

    async def exists(self, username: str) -> bool:
        return username in self._users

    def clear(self) -> None:
        """Clear all users from memory.

        Useful for test cleanup.
        """
        self._users.clear()

    def count(self) -> int:
        """Get total number of users in memory."""
        return len(self._users)
