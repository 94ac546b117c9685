"""User repository port (interface)."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.user.core.entities.user import User


class IUserRepository(ABC):
    """Repository interface for User.

    Examples:
        >>> class MongoUserRepository(IUserRepository):
        ...     async def add(self, user: User) -> None:
        ...         # Insert into MongoDB
        ...         pass
    """

    @abstractmethod
    async def add(self, user: User) -> None:
        """Insert a new user.

        Raises:
            DomainError: CONFLICT if the username is already taken

        Note:
            Implementations must enforce username uniqueness themselves,
            not rely on a prior ``find_by_username`` from the caller.
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find user by exact (case-sensitive) username.

        Examples:
            >>> user = await repository.find_by_username("ann")
            >>> if user:
            ...     print(user.email)
        """
        pass

    @abstractmethod
    async def exists(self, username: str) -> bool:
        """Check if a username is already registered."""
        pass
