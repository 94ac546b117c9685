"""Unit tests for CreatePostCommandHandler."""

from typing import List
from unittest.mock import AsyncMock, MagicMock

import pytest

from application.post.commands import CreatePostCommand, CreatePostCommandHandler
from domain.post.core.events.post_created import PostCreated
from domain.shared.errors import DomainError, ErrorKind
from domain.user.auth.claims import AuthClaim
from infrastructure.events.in_memory_bus import InMemoryEventBus
from infrastructure.persistence.in_memory import InMemoryPostRepository


@pytest.fixture
def handler(
    post_repository: InMemoryPostRepository, event_bus: InMemoryEventBus
) -> CreatePostCommandHandler:
    return CreatePostCommandHandler(repository=post_repository, event_bus=event_bus)


@pytest.mark.asyncio
async def test_create_post_owned_by_caller(
    handler: CreatePostCommandHandler,
    post_repository: InMemoryPostRepository,
    ann: AuthClaim,
) -> None:
    post = await handler.handle(CreatePostCommand(actor=ann, body="hello"))

    assert post.username == "ann"
    assert post.user_id == ann.id
    assert post.body == "hello"
    assert await post_repository.get_by_id(post.id) == post


@pytest.mark.asyncio
async def test_blank_body_rejected(
    handler: CreatePostCommandHandler,
    post_repository: InMemoryPostRepository,
    ann: AuthClaim,
) -> None:
    with pytest.raises(DomainError) as exc_info:
        await handler.handle(CreatePostCommand(actor=ann, body="   "))

    assert exc_info.value.kind is ErrorKind.VALIDATION_FAILED
    assert exc_info.value.details == {"body": "Post body must not be empty"}
    assert post_repository.count() == 0


@pytest.mark.asyncio
async def test_publishes_post_created(
    handler: CreatePostCommandHandler, event_bus: InMemoryEventBus, ann: AuthClaim
) -> None:
    received: List[PostCreated] = []

    async def on_created(event: PostCreated) -> None:
        received.append(event)

    event_bus.subscribe(PostCreated, on_created)

    post = await handler.handle(CreatePostCommand(actor=ann, body="hello"))

    assert len(received) == 1
    assert received[0].post.id == post.id


@pytest.mark.asyncio
async def test_publish_failure_does_not_fail_creation(
    post_repository: InMemoryPostRepository, ann: AuthClaim
) -> None:
    event_bus = MagicMock()
    event_bus.publish = AsyncMock(side_effect=RuntimeError("bus down"))
    handler = CreatePostCommandHandler(repository=post_repository, event_bus=event_bus)

    post = await handler.handle(CreatePostCommand(actor=ann, body="hello"))

    assert await post_repository.get_by_id(post.id) is not None
    event_bus.publish.assert_awaited_once()
