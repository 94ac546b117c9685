"""Post aggregate root with embedded comments and likes."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional
import uuid


def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Comment:
    """Comment embedded in a post."""

    id: str
    body: str
    username: str
    created_at: datetime

    @staticmethod
    def create(body: str, username: str) -> "Comment":
        return Comment(id=_new_id(), body=body, username=username, created_at=_now())


@dataclass
class Like:
    """Like embedded in a post. Identity within a post is the username."""

    id: str
    username: str
    created_at: datetime

    @staticmethod
    def create(username: str) -> "Like":
        return Like(id=_new_id(), username=username, created_at=_now())


@dataclass
class Post:
    """
    Aggregate Root: a post with its comments and likes.

    Invariants:
    - comments are ordered most recent first (new ones go to index 0)
    - at most one Like per username

    Identity: server-assigned UUID string
    Ownership: ``username`` (and ``user_id``) of the creator

    Examples:
        >>> post = Post.create("hello", username="ann", user_id="u-1")
        >>> post.toggle_like("bob")
        True
        >>> post.like_count
        1
        >>> post.toggle_like("bob")
        False
        >>> post.like_count
        0
    """

    id: str
    body: str
    username: str
    created_at: datetime
    user_id: Optional[str] = None
    comments: List[Comment] = field(default_factory=list)
    likes: List[Like] = field(default_factory=list)

    @staticmethod
    def create(body: str, username: str, user_id: Optional[str] = None) -> "Post":
        """Factory for a new post owned by ``username``."""
        return Post(
            id=_new_id(),
            body=body,
            username=username,
            user_id=user_id,
            created_at=_now(),
        )

    @property
    def comment_count(self) -> int:
        return len(self.comments)

    @property
    def like_count(self) -> int:
        return len(self.likes)

    def is_owned_by(self, username: str) -> bool:
        return self.username == username

    # Comments

    def add_comment(self, comment: Comment) -> None:
        """Insert comment at the head of the list."""
        self.comments.insert(0, comment)

    def find_comment(self, comment_id: str) -> Optional[Comment]:
        for comment in self.comments:
            if comment.id == comment_id:
                return comment
        return None

    def remove_comment(self, comment_id: str, username: Optional[str] = None) -> bool:
        """
        Remove a comment by id.

        Args:
            comment_id: Comment to remove
            username: When given, only a comment written by this user matches

        Returns:
            True if a comment was removed
        """
        for index, comment in enumerate(self.comments):
            if comment.id != comment_id:
                continue
            if username is not None and comment.username != username:
                return False
            del self.comments[index]
            return True
        return False

    # Likes

    def has_like(self, username: str) -> bool:
        return any(like.username == username for like in self.likes)

    def toggle_like(self, username: str, like: Optional[Like] = None) -> bool:
        """
        Add or remove the like of ``username``.

        Returns:
            True if the post is now liked by the user, False if unliked
        """
        for index, existing in enumerate(self.likes):
            if existing.username == username:
                del self.likes[index]
                return False
        self.likes.append(like or Like.create(username))
        return True
