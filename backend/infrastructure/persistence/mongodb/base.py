"""Base MongoDB repository with reusable patterns.

Provides common functionality for all MongoDB repositories:
- Collection handle from a shared Motor client
- Document mapping (domain ↔ MongoDB)
- Error logging around every driver call

All concrete MongoDB repositories inherit from MongoBaseRepository.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
import logging
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo import ReturnDocument

from infrastructure.config import get_mongodb_database, get_mongodb_uri

TEntity = TypeVar("TEntity")

logger = logging.getLogger(__name__)


def create_mongo_client(uri: Optional[str] = None) -> AsyncIOMotorClient:
    """Create a Motor client from MONGODB_URI.

    Raises:
        ValueError: If no URI is configured
    """
    uri = uri or get_mongodb_uri()
    if not uri:
        raise ValueError(
            "MONGODB_URI not configured. "
            "Set MONGODB_URI (and optionally MONGODB_USER, MONGODB_PASSWORD)."
        )
    return AsyncIOMotorClient(uri, tz_aware=True)


class MongoBaseRepository(ABC, Generic[TEntity]):
    """
    Abstract base class for MongoDB repositories.

    The Motor client is shared and owned by the caller (the application
    lifespan closes it); repositories only hold a collection handle.

    Subclasses must implement:
    - collection_name: Name of MongoDB collection
    - to_document(): Convert domain entity to MongoDB document
    - from_document(): Convert MongoDB document to domain entity

    Example:
        class MongoPostRepository(MongoBaseRepository[Post]):
            @property
            def collection_name(self) -> str:
                return "posts"
    """

    def __init__(self, client: AsyncIOMotorClient, database_name: Optional[str] = None):
        self._client = client
        self._db = client[database_name or get_mongodb_database()]
        self._collection = self._db[self.collection_name]

        logger.info(
            f"Initialized {self.__class__.__name__} " f"for collection '{self.collection_name}'"
        )

    # ============================================================
    # Abstract Properties/Methods (must be implemented)
    # ============================================================

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """MongoDB collection name."""
        pass

    @abstractmethod
    def to_document(self, entity: TEntity) -> Dict[str, Any]:
        """Convert domain entity to MongoDB document."""
        pass

    @abstractmethod
    def from_document(self, doc: Dict[str, Any]) -> TEntity:
        """
        Convert MongoDB document to domain entity.

        Raises:
            ValueError: If document is invalid or missing required fields
        """
        pass

    async def ensure_indexes(self) -> None:
        """Create the indexes this collection relies on (idempotent)."""
        pass

    # ============================================================
    # Protected Utility Methods (for subclasses)
    # ============================================================

    @property
    def collection(self) -> AsyncIOMotorCollection:
        """Get MongoDB collection handle."""
        return self._collection

    @staticmethod
    def datetime_to_iso(dt: datetime) -> str:
        """
        Convert datetime to ISO string for MongoDB storage.

        Raises:
            ValueError: If datetime is naive
        """
        if dt.tzinfo is None:
            raise ValueError("Datetime must be timezone-aware")
        return dt.isoformat()

    @staticmethod
    def iso_to_datetime(iso_str: str) -> datetime:
        """Convert ISO string to timezone-aware datetime (naive values are UTC)."""
        dt = datetime.fromisoformat(iso_str)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt

    async def _find_one(self, filter_dict: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Find single document with error handling.

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            return await self._collection.find_one(filter_dict)
        except Exception as e:
            logger.error(
                f"Error in find_one: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    async def _find_many(
        self,
        filter_dict: Dict[str, Any],
        sort: Optional[List[Tuple[str, int]]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Find multiple documents with error handling.

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            cursor = self._collection.find(filter_dict)
            if sort:
                cursor = cursor.sort(sort)
            return await cursor.to_list(length=None)
        except Exception as e:
            logger.error(
                f"Error in find_many: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    async def _insert_one(self, document: Dict[str, Any]) -> None:
        """
        Insert single document with error handling.

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            await self._collection.insert_one(document)
        except Exception as e:
            logger.error(f"Error in insert_one: collection={self.collection_name}, " f"error={e}")
            raise

    async def _find_one_and_update(
        self,
        filter_dict: Dict[str, Any],
        update_dict: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """
        Atomically update one document and return it after the update.

        Returns:
            Updated document, or None if nothing matched the filter

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            return await self._collection.find_one_and_update(
                filter_dict, update_dict, return_document=ReturnDocument.AFTER
            )
        except Exception as e:
            logger.error(
                f"Error in find_one_and_update: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    async def _delete_one(self, filter_dict: Dict[str, Any]) -> int:
        """
        Delete single document with error handling.

        Returns:
            Number of documents deleted (0 or 1)

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            result = await self._collection.delete_one(filter_dict)
            return result.deleted_count
        except Exception as e:
            logger.error(
                f"Error in delete_one: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise

    async def _exists(self, filter_dict: Dict[str, Any]) -> bool:
        """
        Check whether any document matches, with error handling.

        Raises:
            Exception: If MongoDB operation fails (logged and re-raised)
        """
        try:
            count = await self._collection.count_documents(filter_dict, limit=1)
            return bool(count > 0)
        except Exception as e:
            logger.error(
                f"Error in exists: collection={self.collection_name}, "
                f"filter={filter_dict}, error={e}"
            )
            raise
