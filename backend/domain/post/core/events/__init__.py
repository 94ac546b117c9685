"""Post domain events."""

from domain.post.core.events.post_created import PostCreated

__all__ = ["PostCreated"]
