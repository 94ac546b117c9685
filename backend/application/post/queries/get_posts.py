"""Get posts query - the whole feed, newest first."""

from dataclasses import dataclass
import logging
from typing import List

from domain.post.core.entities.post import Post
from domain.post.core.ports.post_repository import IPostRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GetPostsQuery:
    """Query: All posts ordered by creation time, descending."""


class GetPostsQueryHandler:
    """Handler for GetPostsQuery."""

    def __init__(self, repository: IPostRepository):
        self._repository = repository

    async def handle(self, query: GetPostsQuery) -> List[Post]:
        posts = await self._repository.list_all()
        logger.debug("Posts retrieved", extra={"count": len(posts)})
        return posts
