"""Post queries."""

from .get_post import GetPostQuery, GetPostQueryHandler
from .get_posts import GetPostsQuery, GetPostsQueryHandler

__all__ = [
    "GetPostQuery",
    "GetPostQueryHandler",
    "GetPostsQuery",
    "GetPostsQueryHandler",
]
