"""Create post command and handler."""

from dataclasses import dataclass
import logging

from domain.post.core.entities.post import Post
from domain.post.core.events.post_created import PostCreated
from domain.post.core.ports.post_repository import IPostRepository
from domain.shared.errors import DomainError
from domain.shared.ports.event_bus import IEventBus
from domain.user.auth.claims import AuthClaim

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreatePostCommand:
    """
    Command: Create a post.

    Attributes:
        actor: Authenticated caller, becomes the owner
        body: Post text
    """

    actor: AuthClaim
    body: str


class CreatePostCommandHandler:
    """Handler for CreatePostCommand."""

    def __init__(self, repository: IPostRepository, event_bus: IEventBus):
        """
        Initialize handler.

        Args:
            repository: Post repository port
            event_bus: Event bus port (PostCreated feeds the newPost subscription)
        """
        self._repository = repository
        self._event_bus = event_bus

    async def handle(self, command: CreatePostCommand) -> Post:
        """
        Execute create command.

        Flow:
        1. Reject blank body
        2. Persist post owned by the caller
        3. Publish PostCreated (failures are logged, the post stays created)

        Raises:
            DomainError: VALIDATION_FAILED if body is blank
        """
        if command.body.strip() == "":
            raise DomainError.validation_failed(
                "Post body must not be empty", {"body": "Post body must not be empty"}
            )

        post = Post.create(
            body=command.body,
            username=command.actor.username,
            user_id=command.actor.id,
        )
        await self._repository.add(post)

        logger.info(
            "Post created",
            extra={"post_id": post.id, "username": post.username},
        )

        try:
            await self._event_bus.publish(PostCreated.create(post))
        except Exception as e:
            logger.warning(
                "PostCreated publish failed",
                extra={"post_id": post.id, "error": str(e)},
            )

        return post
