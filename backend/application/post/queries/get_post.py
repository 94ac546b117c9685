"""Get post query - retrieve single post by ID."""

from dataclasses import dataclass
import logging

from domain.post.core.entities.post import Post
from domain.post.core.ports.post_repository import IPostRepository
from domain.shared.errors import DomainError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GetPostQuery:
    """
    Query: Get single post by ID.

    Attributes:
        post_id: Post ID to retrieve
    """

    post_id: str


class GetPostQueryHandler:
    """Handler for GetPostQuery."""

    def __init__(self, repository: IPostRepository):
        """
        Initialize handler.

        Args:
            repository: Post repository port
        """
        self._repository = repository

    async def handle(self, query: GetPostQuery) -> Post:
        """
        Execute query.

        Raises:
            DomainError: NOT_FOUND if no post has this id
        """
        post = await self._repository.get_by_id(query.post_id)

        if post is None:
            logger.debug("Post not found", extra={"post_id": query.post_id})
            raise DomainError.not_found("Post not found")

        logger.debug(
            "Post retrieved",
            extra={
                "post_id": query.post_id,
                "comment_count": post.comment_count,
                "like_count": post.like_count,
            },
        )
        return post
