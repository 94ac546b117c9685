"""Like post command and handler (toggle)."""

from dataclasses import dataclass
import logging

from domain.post.core.entities.post import Like, Post
from domain.post.core.ports.post_repository import IPostRepository
from domain.shared.errors import DomainError
from domain.user.auth.claims import AuthClaim

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LikePostCommand:
    """
    Command: Toggle the caller's like on a post.

    Attributes:
        actor: Authenticated caller
        post_id: Target post
    """

    actor: AuthClaim
    post_id: str


class LikePostCommandHandler:
    """Handler for LikePostCommand."""

    def __init__(self, repository: IPostRepository):
        self._repository = repository

    async def handle(self, command: LikePostCommand) -> Post:
        """
        Add the caller's like, or remove it if already present.

        Example:
            >>> post = await handler.handle(LikePostCommand(actor=ann, post_id=pid))
            >>> post.like_count
            1
            >>> post = await handler.handle(LikePostCommand(actor=ann, post_id=pid))
            >>> post.like_count
            0

        Raises:
            DomainError: NOT_FOUND if the post doesn't exist
        """
        username = command.actor.username
        post = await self._repository.toggle_like(command.post_id, Like.create(username))

        if post is None:
            raise DomainError.not_found("Post not found")

        logger.info(
            "Post like toggled",
            extra={
                "post_id": command.post_id,
                "username": username,
                "liked": post.has_like(username),
            },
        )
        return post
