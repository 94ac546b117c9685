"""PostCreated domain event."""

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from domain.post.core.entities.post import Post
from domain.shared.events.base import DomainEvent


@dataclass(frozen=True)
class PostCreated(DomainEvent):
    """Domain event: a post has been created.

    Carries the full post so subscribers can forward it without a lookup.

    Examples:
        >>> event = PostCreated.create(post)
        >>> event.post.id == post.id
        True
    """

    post: Post

    @classmethod
    def create(cls, post: Post) -> "PostCreated":
        """Create new PostCreated event with generated id and timestamp."""
        return cls(
            event_id=uuid4(),
            occurred_at=datetime.now(timezone.utc),
            post=post,
        )
