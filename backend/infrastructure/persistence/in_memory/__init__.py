"""In-memory persistence implementations."""

from infrastructure.persistence.in_memory.post_repository import (
    InMemoryPostRepository,
)
from infrastructure.persistence.in_memory.user_repository import (
    InMemoryUserRepository,
)

__all__ = [
    "InMemoryPostRepository",
    "InMemoryUserRepository",
]
