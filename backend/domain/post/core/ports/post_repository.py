"""Post repository port (interface)."""

from abc import ABC, abstractmethod
from typing import List, Optional

from domain.post.core.entities.post import Comment, Like, Post


class IPostRepository(ABC):
    """Repository interface for the Post aggregate.

    Embedded collections are changed through dedicated operations that
    implementations must apply atomically on a single document, so that
    concurrent mutations on the same post never lose each other's writes.

    Every method returning a Post returns a detached copy: mutating it has
    no effect on storage.
    """

    @abstractmethod
    async def add(self, post: Post) -> None:
        """Persist a new post."""
        pass

    @abstractmethod
    async def get_by_id(self, post_id: str) -> Optional[Post]:
        """Find post by id.

        Returns:
            Post if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[Post]:
        """Return every post, most recent first."""
        pass

    @abstractmethod
    async def delete(self, post_id: str, username: str) -> bool:
        """Delete post if it exists and is owned by ``username``.

        Returns:
            True if a post was deleted
        """
        pass

    @abstractmethod
    async def push_comment(self, post_id: str, comment: Comment) -> Optional[Post]:
        """Insert comment at index 0 of the post's comments.

        Returns:
            Updated post, or None if the post does not exist
        """
        pass

    @abstractmethod
    async def pull_comment(
        self, post_id: str, comment_id: str, username: str
    ) -> Optional[Post]:
        """Remove comment ``comment_id`` if it was written by ``username``.

        Returns:
            Updated post (unchanged if no comment matched), or None if the
            post does not exist
        """
        pass

    @abstractmethod
    async def toggle_like(self, post_id: str, like: Like) -> Optional[Post]:
        """Remove the like of ``like.username`` if present, else append ``like``.

        Returns:
            Updated post, or None if the post does not exist
        """
        pass
