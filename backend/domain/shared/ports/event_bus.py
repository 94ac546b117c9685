"""Event bus port (interface).

Defines contract for event publishing and subscription.
The domain defines the port, infrastructure provides the implementation.
"""

from typing import AsyncIterator, Awaitable, Callable, Protocol, Type, TypeVar

from domain.shared.events.base import DomainEvent

TEvent = TypeVar("TEvent", bound=DomainEvent)

# Event handler type: async function that takes an event and returns None
EventHandler = Callable[[TEvent], Awaitable[None]]


class IEventBus(Protocol):
    """
    Interface for event publishing and subscription.

    Example usage (application layer):
        >>> async def on_post_created(event: PostCreated) -> None:
        ...     print(f"Post {event.post.id} created")
        ...
        >>> event_bus.subscribe(PostCreated, on_post_created)
        >>> await event_bus.publish(PostCreated.create(post))
    """

    def subscribe(
        self,
        event_type: Type[TEvent],
        handler: EventHandler[TEvent],
    ) -> None:
        """Subscribe a handler to an event type."""
        ...

    async def publish(self, event: TEvent) -> None:
        """
        Publish an event to all subscribed handlers.

        Note:
            - Handlers are called in subscription order
            - If a handler fails, other handlers still execute
        """
        ...

    def unsubscribe(
        self,
        event_type: Type[TEvent],
        handler: EventHandler[TEvent],
    ) -> bool:
        """Unsubscribe a handler. Returns True if it was registered."""
        ...

    def stream(self, event_type: Type[TEvent]) -> AsyncIterator[TEvent]:
        """
        Iterate over events of a type published after the call.

        The iteration ends when the bus is closed. Used by GraphQL
        subscriptions.
        """
        ...

    async def close(self) -> None:
        """Terminate all open streams and drop every subscription."""
        ...
