"""GraphQL types for posts and users."""

from datetime import datetime
from typing import List

import strawberry

from application.user.session import UserSession
from domain.post.core.entities.post import Comment, Like, Post


@strawberry.type(name="Comment")
class CommentType:
    id: strawberry.ID
    body: str
    username: str
    created_at: datetime


@strawberry.type(name="Like")
class LikeType:
    id: strawberry.ID
    username: str
    created_at: datetime


@strawberry.type(name="Post")
class PostType:
    """Post with its comments (most recent first) and likes.

    Examples:
        query {
          getPosts {
            id body username createdAt
            comments { id body username }
            likeCount commentCount
          }
        }
    """

    id: strawberry.ID
    body: str
    username: str
    created_at: datetime
    comments: List[CommentType]
    likes: List[LikeType]
    comment_count: int
    like_count: int


@strawberry.type(name="User")
class UserType:
    """Registered user plus a freshly issued bearer token."""

    id: strawberry.ID
    email: str
    username: str
    token: str
    created_at: datetime


@strawberry.input
class RegisterInput:
    username: str
    email: str
    password: str
    confirm_password: str


def map_comment_to_graphql(comment: Comment) -> CommentType:
    return CommentType(
        id=strawberry.ID(comment.id),
        body=comment.body,
        username=comment.username,
        created_at=comment.created_at,
    )


def map_like_to_graphql(like: Like) -> LikeType:
    return LikeType(
        id=strawberry.ID(like.id),
        username=like.username,
        created_at=like.created_at,
    )


def map_post_to_graphql(post: Post) -> PostType:
    """Map domain Post entity to GraphQL Post type."""
    return PostType(
        id=strawberry.ID(post.id),
        body=post.body,
        username=post.username,
        created_at=post.created_at,
        comments=[map_comment_to_graphql(c) for c in post.comments],
        likes=[map_like_to_graphql(like) for like in post.likes],
        comment_count=post.comment_count,
        like_count=post.like_count,
    )


def map_session_to_graphql(session: UserSession) -> UserType:
    user = session.user
    return UserType(
        id=strawberry.ID(user.id),
        email=user.email,
        username=user.username,
        token=session.token,
        created_at=user.created_at,
    )
