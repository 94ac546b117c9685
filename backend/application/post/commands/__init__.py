"""Post commands."""

from .create_comment import CreateCommentCommand, CreateCommentCommandHandler
from .create_post import CreatePostCommand, CreatePostCommandHandler
from .delete_comment import DeleteCommentCommand, DeleteCommentCommandHandler
from .delete_post import DeletePostCommand, DeletePostCommandHandler
from .like_post import LikePostCommand, LikePostCommandHandler

__all__ = [
    "CreateCommentCommand",
    "CreateCommentCommandHandler",
    "CreatePostCommand",
    "CreatePostCommandHandler",
    "DeleteCommentCommand",
    "DeleteCommentCommandHandler",
    "DeletePostCommand",
    "DeletePostCommandHandler",
    "LikePostCommand",
    "LikePostCommandHandler",
]
