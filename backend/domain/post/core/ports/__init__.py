"""Post domain ports."""

from domain.post.core.ports.post_repository import IPostRepository

__all__ = ["IPostRepository"]
