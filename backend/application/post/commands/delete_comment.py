"""Delete comment command and handler."""

from dataclasses import dataclass
import logging

from domain.post.core.entities.post import Post
from domain.post.core.ports.post_repository import IPostRepository
from domain.shared.errors import DomainError
from domain.user.auth.claims import AuthClaim

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteCommentCommand:
    """
    Command: Remove a comment from a post.

    Attributes:
        actor: Authenticated caller, must be the comment's author
        post_id: Post holding the comment
        comment_id: Comment to remove
    """

    actor: AuthClaim
    post_id: str
    comment_id: str


class DeleteCommentCommandHandler:
    """Handler for DeleteCommentCommand."""

    def __init__(self, repository: IPostRepository):
        self._repository = repository

    async def handle(self, command: DeleteCommentCommand) -> Post:
        """
        Execute delete command.

        Returns:
            Updated post

        Raises:
            DomainError: NOT_FOUND if post or comment is missing,
                AUTHORIZATION_DENIED if caller didn't write the comment
        """
        username = command.actor.username

        post = await self._repository.get_by_id(command.post_id)
        if post is None:
            raise DomainError.not_found("Post not found")

        comment = post.find_comment(command.comment_id)
        if comment is None:
            raise DomainError.not_found("Comment not found")

        if comment.username != username:
            logger.warning(
                "Comment deletion denied",
                extra={
                    "post_id": command.post_id,
                    "comment_id": command.comment_id,
                    "username": username,
                },
            )
            raise DomainError.authorization_denied()

        updated = await self._repository.pull_comment(
            command.post_id, command.comment_id, username
        )
        if updated is None:
            raise DomainError.not_found("Post not found")

        logger.info(
            "Comment deleted",
            extra={
                "post_id": command.post_id,
                "comment_id": command.comment_id,
                "username": username,
            },
        )
        return updated
