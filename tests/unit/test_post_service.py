"""Unit tests for PostService (not-found mapping, author checks, pass-through)."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from app.application.dtos.post import PostCreate, PostResult, PostUpdate
from app.application.services.post_service import PostService
from app.domain.exceptions import AuthorizationException, ResourceNotFoundException

NOW = datetime(2025, 1, 15, 12, 0, 0, tzinfo=UTC)
POST = PostResult(
    id=3, title="Hello", body="World", author_id=1, created_at=NOW, updated_at=NOW
)


@pytest.fixture
def post_repo() -> AsyncMock:
    return AsyncMock()


async def test_get_post_found(post_repo: AsyncMock) -> None:
    post_repo.get_by_id.return_value = POST
    assert await PostService(post_repo).get_post(3) == POST


async def test_get_post_missing_raises(post_repo: AsyncMock) -> None:
    post_repo.get_by_id.return_value = None
    with pytest.raises(ResourceNotFoundException) as exc_info:
        await PostService(post_repo).get_post(3)
    assert exc_info.value.details == {"resource_type": "post", "resource_id": 3}


async def test_create_post_passes_author(post_repo: AsyncMock) -> None:
    post_repo.create_post.return_value = POST
    data = PostCreate(title="Hello", body="World")

    assert await PostService(post_repo).create_post(data, author_id=1) == POST
    post_repo.create_post.assert_awaited_once_with(data, 1)




async def test_update_missing_post_raises(post_repo: AsyncMock) -> None:
    post_repo.get_by_id.return_value = None
    with pytest.raises(ResourceNotFoundException):
        await PostService(post_repo).update_post(
            PostUpdate(id=9, title="t", body="b"), account_id=1
        )
    post_repo.update_post.assert_not_awaited()


async def test_update_own_post(post_repo: AsyncMock) -> None:
    post_repo.get_by_id.return_value = POST
    post_repo.update_post.return_value = POST
    data = PostUpdate(id=3, title="New", body="Body")

    assert await PostService(post_repo).update_post(data, account_id=1) == POST
    post_repo.update_post.assert_awaited_once_with(data)


async def test_update_post_of_other_author_raises(post_repo: AsyncMock) -> None:
    post_repo.get_by_id.return_value = POST
    with pytest.raises(AuthorizationException) as exc_info:
        await PostService(post_repo).update_post(
            PostUpdate(id=3, title="t", body="b"), account_id=2
        )
    assert exc_info.value.details == {"resource": "post", "action": "update"}
    post_repo.update_post.assert_not_awaited()


async def test_delete_missing_post_raises(post_repo: AsyncMock) -> None:
    post_repo.get_by_id.return_value = None
    with pytest.raises(ResourceNotFoundException):
        await PostService(post_repo).delete_post(9, account_id=1)
    post_repo.delete_by_id.assert_not_awaited()


async def test_delete_own_post(post_repo: AsyncMock) -> None:
    post_repo.get_by_id.return_value = POST
    post_repo.delete_by_id.return_value = True
    await PostService(post_repo).delete_post(3, account_id=1)
    post_repo.delete_by_id.assert_awaited_once_with(3)


async def test_delete_post_of_other_author_raises(post_repo: AsyncMock) -> None:
    post_repo.get_by_id.return_value = POST
    with pytest.raises(AuthorizationException):
        await PostService(post_repo).delete_post(3, account_id=2)
    post_repo.delete_by_id.assert_not_awaited()

async def test_search_and_list_pass_through(post_repo: AsyncMock) -> None:
    post_repo.search_by_title.return_value = [POST]
    post_repo.list_posts.return_value = [POST]
    service = PostService(post_repo)

    assert await service.search_by_title("hel") == [POST]
    assert await service.list_posts() == [POST]
    post_repo.search_by_title.assert_awaited_once_with("hel")
    post_repo.list_posts.assert_awaited_once_with(skip=0, limit=100)
