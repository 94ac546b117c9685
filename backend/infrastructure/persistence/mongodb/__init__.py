"""MongoDB repository implementations."""

from .base import MongoBaseRepository, create_mongo_client
from .post_repository import MongoPostRepository
from .user_repository import MongoUserRepository

__all__ = [
    "MongoBaseRepository",
    "MongoPostRepository",
    "MongoUserRepository",
    "create_mongo_client",
]
