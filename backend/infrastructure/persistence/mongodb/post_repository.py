"""MongoDB implementation of post repository.

Comments and likes are embedded arrays; every change to them is a single
atomic update operator on the post document, never a read-modify-write
of the whole document.
"""

import logging
from typing import Any, Dict, List, Optional

from pymongo import DESCENDING

from domain.post.core.entities.post import Comment, Like, Post
from domain.post.core.ports.post_repository import IPostRepository
from infrastructure.persistence.mongodb.base import MongoBaseRepository

logger = logging.getLogger(__name__)

# Bound on push/pull attempts when concurrent toggles keep flipping the state.
MAX_TOGGLE_ATTEMPTS = 3


class MongoPostRepository(MongoBaseRepository[Post], IPostRepository):
    """
    MongoDB implementation of post repository.

    Document Schema:
    {
        "_id": "uuid-string",
        "body": "string",
        "username": "string",
        "user_id": "uuid-string",
        "created_at": "2025-11-12T10:00:00+00:00",
        "comments": [
            {"id": "uuid-string", "body": "...", "username": "...", "created_at": "..."}
        ],
        "likes": [
            {"id": "uuid-string", "username": "...", "created_at": "..."}
        ]
    }

    Indexes:
    - created_at (desc): for getPosts ordering
    """

    @property
    def collection_name(self) -> str:
        return "posts"

    async def ensure_indexes(self) -> None:
        await self.collection.create_index([("created_at", DESCENDING)])

    # ============================================================
    # Document Mapping (Domain ↔ MongoDB)
    # ============================================================

    def to_document(self, entity: Post) -> Dict[str, Any]:
        post = entity
        return {
            "_id": post.id,
            "body": post.body,
            "username": post.username,
            "user_id": post.user_id,
            "created_at": self.datetime_to_iso(post.created_at),
            "comments": [self._comment_to_dict(c) for c in post.comments],
            "likes": [self._like_to_dict(like) for like in post.likes],
        }

    def from_document(self, doc: Dict[str, Any]) -> Post:
        try:
            return Post(
                id=doc["_id"],
                body=doc["body"],
                username=doc["username"],
                user_id=doc.get("user_id"),
                created_at=self.iso_to_datetime(doc["created_at"]),
                comments=[self._dict_to_comment(c) for c in doc.get("comments", [])],
                likes=[self._dict_to_like(like) for like in doc.get("likes", [])],
            )
        except KeyError as e:
            raise ValueError(f"Missing required field in MongoDB document: {e}")

    def _comment_to_dict(self, comment: Comment) -> Dict[str, Any]:
        return {
            "id": comment.id,
            "body": comment.body,
            "username": comment.username,
            "created_at": self.datetime_to_iso(comment.created_at),
        }

    def _dict_to_comment(self, data: Dict[str, Any]) -> Comment:
        return Comment(
            id=data["id"],
            body=data["body"],
            username=data["username"],
            created_at=self.iso_to_datetime(data["created_at"]),
        )

    def _like_to_dict(self, like: Like) -> Dict[str, Any]:
        return {
            "id": like.id,
            "username": like.username,
            "created_at": self.datetime_to_iso(like.created_at),
        }

    def _dict_to_like(self, data: Dict[str, Any]) -> Like:
        return Like(
            id=data["id"],
            username=data["username"],
            created_at=self.iso_to_datetime(data["created_at"]),
        )

    def _maybe_post(self, doc: Optional[Dict[str, Any]]) -> Optional[Post]:
        return self.from_document(doc) if doc else None

    # ============================================================
    # Repository Operations
    # ============================================================

    async def add(self, post: Post) -> None:
        await self._insert_one(self.to_document(post))

    async def get_by_id(self, post_id: str) -> Optional[Post]:
        return self._maybe_post(await self._find_one({"_id": post_id}))

    async def list_all(self) -> List[Post]:
        docs = await self._find_many({}, sort=[("created_at", DESCENDING)])
        return [self.from_document(doc) for doc in docs]

    async def delete(self, post_id: str, username: str) -> bool:
        deleted = await self._delete_one({"_id": post_id, "username": username})
        return deleted == 1

    async def push_comment(self, post_id: str, comment: Comment) -> Optional[Post]:
        doc = await self._find_one_and_update(
            {"_id": post_id},
            {
                "$push": {
                    "comments": {
                        "$each": [self._comment_to_dict(comment)],
                        "$position": 0,
                    }
                }
            },
        )
        return self._maybe_post(doc)

    async def pull_comment(
        self, post_id: str, comment_id: str, username: str
    ) -> Optional[Post]:
        doc = await self._find_one_and_update(
            {"_id": post_id},
            {"$pull": {"comments": {"id": comment_id, "username": username}}},
        )
        return self._maybe_post(doc)

    async def toggle_like(self, post_id: str, like: Like) -> Optional[Post]:
        username = like.username
        for _ in range(MAX_TOGGLE_ATTEMPTS):
            # Like: only matches while the user has not liked the post yet.
            doc = await self._find_one_and_update(
                {"_id": post_id, "likes.username": {"$ne": username}},
                {"$push": {"likes": self._like_to_dict(like)}},
            )
            if doc:
                return self.from_document(doc)

            # Unlike: only matches while the like is still there.
            doc = await self._find_one_and_update(
                {"_id": post_id, "likes.username": username},
                {"$pull": {"likes": {"username": username}}},
            )
            if doc:
                return self.from_document(doc)

            if not await self._exists({"_id": post_id}):
                return None

            logger.warning(
                "Like toggle raced with a concurrent toggle, retrying",
                extra={"post_id": post_id, "username": username},
            )

        # Still flipping after every attempt: report the current state.
        return await self.get_by_id(post_id)
