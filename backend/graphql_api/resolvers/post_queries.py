"""Query resolvers for posts."""

from typing import Any, List

import strawberry
from strawberry.types import Info

from application.post.queries import (
    GetPostQuery,
    GetPostQueryHandler,
    GetPostsQuery,
    GetPostsQueryHandler,
)
from graphql_api.types import PostType, map_post_to_graphql


@strawberry.type
class PostQueries:
    """Public read operations, no token required."""

    @strawberry.field
    async def get_posts(self, info: Info[Any, Any]) -> List[PostType]:
        """All posts, newest first.

        Example:
            query { getPosts { id body username likeCount commentCount } }
        """
        repository = info.context.get("post_repository")
        if not repository:
            raise RuntimeError("post_repository not found in context")

        handler = GetPostsQueryHandler(repository)
        posts = await handler.handle(GetPostsQuery())
        return [map_post_to_graphql(post) for post in posts]

    @strawberry.field
    async def get_post(self, info: Info[Any, Any], post_id: strawberry.ID) -> PostType:
        """Single post by id.

        Raises:
            DomainError: NOT_FOUND if no post has this id
        """
        repository = info.context.get("post_repository")
        if not repository:
            raise RuntimeError("post_repository not found in context")

        handler = GetPostQueryHandler(repository)
        post = await handler.handle(GetPostQuery(post_id=str(post_id)))
        return map_post_to_graphql(post)
