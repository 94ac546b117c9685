"""Mutation resolvers for posts, comments and likes.

Every mutation here requires ``Authorization: Bearer <token>``:
- createPost / deletePost
- createComment / deleteComment
- likePost (toggle)
"""

from typing import Any

import strawberry
from strawberry.types import Info

from application.post.commands import (
    CreateCommentCommand,
    CreateCommentCommandHandler,
    CreatePostCommand,
    CreatePostCommandHandler,
    DeleteCommentCommand,
    DeleteCommentCommandHandler,
    DeletePostCommand,
    DeletePostCommandHandler,
    LikePostCommand,
    LikePostCommandHandler,
)
from graphql_api.resolvers.auth import require_auth
from graphql_api.types import PostType, map_post_to_graphql


def _post_repository(info: Info[Any, Any]) -> Any:
    repository = info.context.get("post_repository")
    if not repository:
        raise RuntimeError("post_repository not found in context")
    return repository


@strawberry.type
class PostMutations:
    """Post domain mutations."""

    @strawberry.mutation
    async def create_post(self, info: Info[Any, Any], body: str) -> PostType:
        """Create a post owned by the caller and notify ``newPost`` subscribers.

        Example:
            mutation { createPost(body: "hello") { id username createdAt } }
        """
        actor = require_auth(info)
        event_bus = info.context.get("event_bus")
        if not event_bus:
            raise RuntimeError("event_bus not found in context")

        handler = CreatePostCommandHandler(repository=_post_repository(info), event_bus=event_bus)
        post = await handler.handle(CreatePostCommand(actor=actor, body=body))
        return map_post_to_graphql(post)

    @strawberry.mutation
    async def delete_post(self, info: Info[Any, Any], post_id: strawberry.ID) -> str:
        """Delete one of the caller's posts.

        Returns:
            "Post deleted successfully"
        """
        actor = require_auth(info)
        handler = DeletePostCommandHandler(_post_repository(info))
        return await handler.handle(DeletePostCommand(actor=actor, post_id=str(post_id)))

    @strawberry.mutation
    async def create_comment(
        self, info: Info[Any, Any], post_id: strawberry.ID, body: str
    ) -> PostType:
        actor = require_auth(info)
        handler = CreateCommentCommandHandler(_post_repository(info))
        post = await handler.handle(
            CreateCommentCommand(actor=actor, post_id=str(post_id), body=body)
        )
        return map_post_to_graphql(post)

    @strawberry.mutation
    async def delete_comment(
        self,
        info: Info[Any, Any],
        post_id: strawberry.ID,
        comment_id: strawberry.ID,
    ) -> PostType:
        actor = require_auth(info)
        handler = DeleteCommentCommandHandler(_post_repository(info))
        post = await handler.handle(
            DeleteCommentCommand(actor=actor, post_id=str(post_id), comment_id=str(comment_id))
        )
        return map_post_to_graphql(post)

    @strawberry.mutation
    async def like_post(self, info: Info[Any, Any], post_id: strawberry.ID) -> PostType:
        """Toggle the caller's like on a post."""
        actor = require_auth(info)
        handler = LikePostCommandHandler(_post_repository(info))
        post = await handler.handle(LikePostCommand(actor=actor, post_id=str(post_id)))
        return map_post_to_graphql(post)
