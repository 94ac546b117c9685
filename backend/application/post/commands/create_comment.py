"""Create comment command and handler."""

from dataclasses import dataclass
import logging

from domain.post.core.entities.post import Comment, Post
from domain.post.core.ports.post_repository import IPostRepository
from domain.shared.errors import DomainError
from domain.user.auth.claims import AuthClaim

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateCommentCommand:
    """
    Command: Add a comment to a post.

    Attributes:
        actor: Authenticated caller, becomes the author
        post_id: Target post
        body: Comment text
    """

    actor: AuthClaim
    post_id: str
    body: str


class CreateCommentCommandHandler:
    """Handler for CreateCommentCommand."""

    def __init__(self, repository: IPostRepository):
        self._repository = repository

    async def handle(self, command: CreateCommentCommand) -> Post:
        """
        Insert the comment at the head of the post's comment list.

        Returns:
            Updated post

        Raises:
            DomainError: VALIDATION_FAILED if body is blank, NOT_FOUND if
                the post doesn't exist
        """
        if command.body.strip() == "":
            raise DomainError.validation_failed(
                "Empty comment", {"body": "Comment must not be empty"}
            )

        comment = Comment.create(body=command.body, username=command.actor.username)
        post = await self._repository.push_comment(command.post_id, comment)

        if post is None:
            raise DomainError.not_found("Post not found")

        logger.info(
            "Comment created",
            extra={
                "post_id": command.post_id,
                "comment_id": comment.id,
                "username": comment.username,
            },
        )
        return post
