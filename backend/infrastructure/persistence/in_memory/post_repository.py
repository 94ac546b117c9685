"""In-memory post repository implementation.

Provides an in-memory implementation of IPostRepository port for testing
and local runs. Uses a dictionary for storage with no external dependencies.
"""

from copy import deepcopy
from typing import Dict, List, Optional

from domain.post.core.entities.post import Comment, Like, Post
from domain.post.core.ports.post_repository import IPostRepository


class InMemoryPostRepository(IPostRepository):
    """
    In-memory implementation of IPostRepository port.

    Atomicity: no method awaits while touching storage, so each operation
    runs to completion before any other coroutine can observe the post.
    Persistence: Data lost on process restart (in-memory only)

    Example:
        >>> repository = InMemoryPostRepository()
        >>> post = Post.create("hello", username="ann")
        >>> await repository.add(post)
        >>> await repository.toggle_like(post.id, Like.create("bob"))
    """

    def __init__(self) -> None:
        """Initialize repository with empty storage."""
        self._storage: Dict[str, Post] = {}

    async def add(self, post: Post) -> None:
        # Store deep copy to prevent external modifications
        self._storage[post.id] = deepcopy(post)

    async def get_by_id(self, post_id: str) -> Optional[Post]:
        post = self._storage.get(post_id)
        return deepcopy(post) if post else None

    async def list_all(self) -> List[Post]:
        posts = sorted(self._storage.values(), key=lambda p: p.created_at, reverse=True)
        return [deepcopy(p) for p in posts]

    async def delete(self, post_id: str, username: str) -> bool:
        post = self._storage.get(post_id)
        if post is None or not post.is_owned_by(username):
            return False
        del self._storage[post_id]
        return True

    async def push_comment(self, post_id: str, comment: Comment) -> Optional[Post]:
        post = self._storage.get(post_id)
        if post is None:
            return None
        post.add_comment(deepcopy(comment))
        return deepcopy(post)

    async def pull_comment(
        self, post_id: str, comment_id: str, username: str
    ) -> Optional[Post]:
        post = self._storage.get(post_id)
        if post is None:
            return None
        post.remove_comment(comment_id, username=username)
        return deepcopy(post)

    async def toggle_like(self, post_id: str, like: Like) -> Optional[Post]:
        post = self._storage.get(post_id)
        if post is None:
            return None
        post.toggle_like(like.username, like=deepcopy(like))
        return deepcopy(post)

    def clear(self) -> None:
        """Clear all posts (useful for test cleanup)."""
        self._storage.clear()

    def count(self) -> int:
        """Get total number of stored posts."""
        return len(self._storage)
