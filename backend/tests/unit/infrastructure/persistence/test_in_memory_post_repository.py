"""Unit tests for InMemoryPostRepository."""

import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from domain.post.core.entities.post import Comment, Like, Post
from infrastructure.persistence.in_memory import InMemoryPostRepository


@pytest.fixture
def post() -> Post:
    return Post.create("hello", username="ann", user_id="user-ann")


@pytest.mark.asyncio
async def test_add_and_get(post_repository: InMemoryPostRepository, post: Post) -> None:
    await post_repository.add(post)

    found = await post_repository.get_by_id(post.id)

    assert found == post
    assert found is not post
    assert post_repository.count() == 1


@pytest.mark.asyncio
async def test_get_missing(post_repository: InMemoryPostRepository) -> None:
    assert await post_repository.get_by_id("missing") is None


@pytest.mark.asyncio
async def test_returned_copies_do_not_alias_storage(
    post_repository: InMemoryPostRepository, post: Post
) -> None:
    await post_repository.add(post)
    post.body = "changed by caller"

    found = await post_repository.get_by_id(post.id)
    assert found is not None
    found.toggle_like("bob")

    stored = await post_repository.get_by_id(post.id)
    assert stored is not None
    assert stored.body == "hello"
    assert stored.like_count == 0


@pytest.mark.asyncio
async def test_list_all_newest_first(post_repository: InMemoryPostRepository) -> None:
    now = datetime.now(timezone.utc)
    old = Post(id="old", body="old", username="ann", created_at=now - timedelta(hours=1))
    new = Post(id="new", body="new", username="ann", created_at=now)
    await post_repository.add(old)
    await post_repository.add(new)

    posts = await post_repository.list_all()

    assert [p.id for p in posts] == ["new", "old"]


@pytest.mark.asyncio
async def test_delete_requires_owner(
    post_repository: InMemoryPostRepository, post: Post
) -> None:
    await post_repository.add(post)

    assert await post_repository.delete(post.id, "bob") is False
    assert await post_repository.get_by_id(post.id) is not None

    assert await post_repository.delete(post.id, "ann") is True
    assert await post_repository.get_by_id(post.id) is None


@pytest.mark.asyncio
async def test_delete_missing(post_repository: InMemoryPostRepository) -> None:
    assert await post_repository.delete("missing", "ann") is False


@pytest.mark.asyncio
async def test_push_comment_goes_first(
    post_repository: InMemoryPostRepository, post: Post
) -> None:
    await post_repository.add(post)

    await post_repository.push_comment(post.id, Comment.create("first", "bob"))
    updated = await post_repository.push_comment(post.id, Comment.create("second", "carl"))

    assert updated is not None
    assert [c.body for c in updated.comments] == ["second", "first"]


@pytest.mark.asyncio
async def test_push_comment_missing_post(post_repository: InMemoryPostRepository) -> None:
    assert await post_repository.push_comment("missing", Comment.create("x", "bob")) is None


@pytest.mark.asyncio
async def test_pull_comment_matches_author_only(
    post_repository: InMemoryPostRepository, post: Post
) -> None:
    await post_repository.add(post)
    comment = Comment.create("hi", "bob")
    await post_repository.push_comment(post.id, comment)

    untouched = await post_repository.pull_comment(post.id, comment.id, "ann")
    assert untouched is not None
    assert untouched.comment_count == 1

    updated = await post_repository.pull_comment(post.id, comment.id, "bob")
    assert updated is not None
    assert updated.comment_count == 0


@pytest.mark.asyncio
async def test_toggle_like(post_repository: InMemoryPostRepository, post: Post) -> None:
    await post_repository.add(post)

    liked = await post_repository.toggle_like(post.id, Like.create("bob"))
    assert liked is not None
    assert liked.like_count == 1

    unliked = await post_repository.toggle_like(post.id, Like.create("bob"))
    assert unliked is not None
    assert unliked.like_count == 0


@pytest.mark.asyncio
async def test_toggle_like_missing_post(post_repository: InMemoryPostRepository) -> None:
    assert await post_repository.toggle_like("missing", Like.create("bob")) is None


@pytest.mark.asyncio
async def test_concurrent_comments_are_all_kept(
    post_repository: InMemoryPostRepository, post: Post
) -> None:
    await post_repository.add(post)

    await asyncio.gather(
        *(
            post_repository.push_comment(post.id, Comment.create(f"c{i}", f"user{i}"))
            for i in range(20)
        )
    )

    stored = await post_repository.get_by_id(post.id)
    assert stored is not None
    assert stored.comment_count == 20


@pytest.mark.asyncio
async def test_concurrent_likes_by_distinct_users(
    post_repository: InMemoryPostRepository, post: Post
) -> None:
    await post_repository.add(post)

    await asyncio.gather(
        *(post_repository.toggle_like(post.id, Like.create(f"user{i}")) for i in range(10))
    )

    stored = await post_repository.get_by_id(post.id)
    assert stored is not None
    assert stored.like_count == 10


def test_clear(post_repository: InMemoryPostRepository) -> None:
    post_repository.clear()
    assert post_repository.count() == 0
