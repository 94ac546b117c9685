"""MongoDB User Repository implementation."""

from typing import Any, Dict, Optional

from pymongo.errors import DuplicateKeyError

from domain.shared.errors import DomainError
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository
from infrastructure.persistence.mongodb.base import MongoBaseRepository


class MongoUserRepository(MongoBaseRepository[User], IUserRepository):
    """MongoDB implementation of User repository.

    Document Schema:
    {
        "_id": "uuid-string",
        "username": "string",       # unique index
        "email": "string",
        "password": "bcrypt hash",
        "created_at": "ISO 8601"
    }

    The unique index on ``username`` makes the insert itself reject a
    duplicate, so two concurrent registrations cannot both succeed.
    """

    @property
    def collection_name(self) -> str:
        return "users"

    async def ensure_indexes(self) -> None:
        await self.collection.create_index("username", unique=True)

    def to_document(self, entity: User) -> Dict[str, Any]:
        return {
            "_id": entity.id,
            "username": entity.username,
            "email": entity.email,
            "password": entity.password,
            "created_at": self.datetime_to_iso(entity.created_at),
        }

    def from_document(self, doc: Dict[str, Any]) -> User:
        try:
            return User(
                id=doc["_id"],
                username=doc["username"],
                email=doc["email"],
                password=doc["password"],
                created_at=self.iso_to_datetime(doc["created_at"]),
            )
        except KeyError as e:
            raise ValueError(f"Missing required field in MongoDB document: {e}")

    async def add(self, user: User) -> None:
        try:
            await self._insert_one(self.to_document(user))
        except DuplicateKeyError as e:
            raise DomainError.conflict(
                "Username is taken", {"username": "The username is taken"}
            ) from e

    async def find_by_username(self, username: str) -> Optional[User]:
        doc = await self._find_one({"username": username})
        return self.from_document(doc) if doc else None

    async def exists(self, username: str) -> bool:
        return await self._exists({"username": username})
