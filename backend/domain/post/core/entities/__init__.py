"""Post aggregate and its embedded sub-documents."""

from domain.post.core.entities.post import Comment, Like, Post

__all__ = ["Comment", "Like", "Post"]
