"""In-memory event bus implementation.

Provides an in-memory implementation of IEventBus port. One instance is
owned by the application lifespan and handed to resolvers through the
GraphQL context; it is closed on shutdown.
"""

import asyncio
import logging
from typing import (
    Any,
    AsyncIterator,
    Awaitable,
    Callable,
    Dict,
    List,
    Set,
    Type,
    TypeVar,
)

from domain.shared.events.base import DomainEvent

logger = logging.getLogger(__name__)

TEvent = TypeVar("TEvent", bound=DomainEvent)

# Pushed into open stream queues when the bus closes.
_CLOSED = object()


def _handler_name(handler: Callable[..., Any]) -> str:
    return getattr(handler, "__name__", repr(handler))


class InMemoryEventBus:
    """
    In-memory implementation of IEventBus port.

    Thread safety: NOT thread-safe, meant for a single event loop
    Persistence: Handlers lost on process restart (in-memory only)
    Error handling: Failed handlers log errors but don't prevent other handlers

    Example:
        >>> bus = InMemoryEventBus()
        >>>
        >>> async def log_event(event: PostCreated) -> None:
        ...     print(f"Post created: {event.post.id}")
        >>>
        >>> bus.subscribe(PostCreated, log_event)
        >>> await bus.publish(PostCreated.create(post))
    """

    def __init__(self) -> None:
        """Initialize event bus with empty handler registry."""
        self._handlers: Dict[Type[DomainEvent], List[Callable[[Any], Awaitable[None]]]] = {}
        self._streams: Set["asyncio.Queue[Any]"] = set()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(
        self,
        event_type: Type[TEvent],
        handler: Callable[[TEvent], Awaitable[None]],
    ) -> None:
        """
        Subscribe a handler to an event type.

        Note:
            - Same handler can be subscribed multiple times (will be called multiple times)
            - Handlers are called in subscription order
        """
        if event_type not in self._handlers:
            self._handlers[event_type] = []

        self._handlers[event_type].append(handler)

        logger.debug(
            "Handler subscribed",
            extra={
                "event_type": event_type.__name__,
                "handler": _handler_name(handler),
            },
        )

    async def publish(self, event: TEvent) -> None:
        """
        Publish an event to all subscribed handlers.

        Note:
            - Handlers are called in subscription order
            - If a handler fails, it logs an error but other handlers still execute
        """
        event_type = type(event)
        handlers = list(self._handlers.get(event_type, []))

        if not handlers:
            logger.debug(
                "No handlers for event",
                extra={"event_type": event_type.__name__},
            )
            return

        logger.info(
            "Publishing event",
            extra={
                "event_type": event_type.__name__,
                "event_id": str(event.event_id),
                "handler_count": len(handlers),
            },
        )

        for handler in handlers:
            try:
                await handler(event)
            except Exception as e:
                logger.error(
                    "Event handler failed",
                    extra={
                        "event_type": event_type.__name__,
                        "event_id": str(event.event_id),
                        "handler": _handler_name(handler),
                        "error": str(e),
                    },
                    exc_info=True,
                )

    def unsubscribe(
        self,
        event_type: Type[TEvent],
        handler: Callable[[TEvent], Awaitable[None]],
    ) -> bool:
        """
        Unsubscribe a handler from an event type.

        Returns:
            True if handler was found and removed, False otherwise

        Note:
            - If handler was subscribed multiple times, only first occurrence is removed
        """
        if event_type not in self._handlers:
            return False

        handlers = self._handlers[event_type]
        try:
            handlers.remove(handler)
        except ValueError:
            return False

        logger.debug(
            "Handler unsubscribed",
            extra={
                "event_type": event_type.__name__,
                "handler": _handler_name(handler),
            },
        )
        return True

    async def stream(self, event_type: Type[TEvent]) -> AsyncIterator[TEvent]:
        """
        Yield every event of ``event_type`` published while iterating.

        The subscription is registered on the first ``__anext__`` and removed
        when the consumer stops iterating. Iteration ends when the bus closes.
        """
        if self._closed:
            return

        queue: "asyncio.Queue[Any]" = asyncio.Queue()

        async def enqueue(event: TEvent) -> None:
            queue.put_nowait(event)

        self.subscribe(event_type, enqueue)
        self._streams.add(queue)
        try:
            while True:
                item = await queue.get()
                if item is _CLOSED:
                    return
                yield item
        finally:
            self.unsubscribe(event_type, enqueue)
            self._streams.discard(queue)

    async def close(self) -> None:
        """End every open stream and drop all subscriptions."""
        self._closed = True
        for queue in list(self._streams):
            queue.put_nowait(_CLOSED)
        self._handlers.clear()
        logger.info("Event bus closed", extra={"open_streams": len(self._streams)})

    def clear(self) -> None:
        """
        Clear all event subscriptions.

        Note: Utility method for testing - removes all handlers
        """
        self._handlers.clear()
        logger.debug("All event handlers cleared")

    def get_handler_count(self, event_type: Type[TEvent]) -> int:
        """
        Get number of handlers for an event type.

        Note: Utility method for testing/debugging
        """
        return len(self._handlers.get(event_type, []))
