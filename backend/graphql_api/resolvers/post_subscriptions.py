"""Subscription resolvers for posts."""

from contextlib import aclosing
from typing import Any, AsyncGenerator

import strawberry
from strawberry.types import Info

from domain.post.core.events.post_created import PostCreated
from graphql_api.types import PostType, map_post_to_graphql


@strawberry.type
class PostSubscriptions:
    @strawberry.subscription
    async def new_post(self, info: Info[Any, Any]) -> AsyncGenerator[PostType, None]:
        """Every post created after the subscriber connected.

        Example:
            subscription { newPost { id body username } }
        """
        event_bus = info.context.get("event_bus")
        if not event_bus:
            raise RuntimeError("event_bus not found in context")

        # Closing the subscription must unsubscribe from the bus right away.
        async with aclosing(event_bus.stream(PostCreated)) as events:
            async for event in events:
                yield map_post_to_graphql(event.post)
