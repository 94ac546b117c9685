"""Delete post command and handler.

Only the author of a post may delete it.
"""

from dataclasses import dataclass
import logging

from domain.post.core.ports.post_repository import IPostRepository
from domain.shared.errors import DomainError
from domain.user.auth.claims import AuthClaim

logger = logging.getLogger(__name__)

DELETED_MESSAGE = "Post deleted successfully"


@dataclass(frozen=True)
class DeletePostCommand:
    """
    Command: Delete post.

    Attributes:
        actor: Authenticated caller
        post_id: Post to delete
    """

    actor: AuthClaim
    post_id: str


class DeletePostCommandHandler:
    """Handler for DeletePostCommand."""

    def __init__(self, repository: IPostRepository):
        self._repository = repository

    async def handle(self, command: DeletePostCommand) -> str:
        """
        Execute delete command.

        Flow:
        1. Verify post exists
        2. Verify caller owns it
        3. Delete (conditioned on id and owner)

        Returns:
            Confirmation message

        Raises:
            DomainError: NOT_FOUND if the post is missing (or vanished
                before the delete), AUTHORIZATION_DENIED if caller isn't the owner
        """
        username = command.actor.username

        post = await self._repository.get_by_id(command.post_id)
        if post is None:
            raise DomainError.not_found("Post not found")

        if not post.is_owned_by(username):
            logger.warning(
                "Post deletion denied",
                extra={"post_id": command.post_id, "username": username},
            )
            raise DomainError.authorization_denied()

        deleted = await self._repository.delete(command.post_id, username)
        if not deleted:
            raise DomainError.not_found("Post not found")

        logger.info(
            "Post deleted",
            extra={"post_id": command.post_id, "username": username},
        )
        return DELETED_MESSAGE
