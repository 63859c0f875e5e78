"""Post application service: CRUD and title search over IPostRepository."""

from __future__ import annotations

import logging

from app.application.dtos.post import PostCreate, PostResult, PostUpdate
from app.application.interfaces.repositories import IPostRepository
from app.domain.exceptions import AuthorizationException, ResourceNotFoundException

logger = logging.getLogger(__name__)


class PostService:
    """Read and write posts. Missing posts raise ResourceNotFoundException.

    Only the author of a post may update or delete it.
    """

    def __init__(self, post_repo: IPostRepository) -> None:
        self._post_repo = post_repo

    async def list_posts(self, skip: int = 0, limit: int = 100) -> list[PostResult]:
        return await self._post_repo.list_posts(skip=skip, limit=limit)

    async def get_post(self, post_id: int) -> PostResult:
        post = await self._post_repo.get_by_id(post_id)
        if post is None:
            raise ResourceNotFoundException("post", post_id)
        return post

    async def search_by_title(self, title: str) -> list[PostResult]:
        return await self._post_repo.search_by_title(title)

    async def create_post(self, data: PostCreate, author_id: int | None) -> PostResult:
        post = await self._post_repo.create_post(data, author_id)
        logger.info("Post created: id=%s author_id=%s", post.id, author_id)
        return post

    async def _get_owned_post(
        self, post_id: int, account_id: int, action: str
    ) -> PostResult:
        post = await self.get_post(post_id)
        if post.author_id != account_id:
            logger.warning(
                "Post %s denied: id=%s account_id=%s", action, post_id, account_id
            )
            raise AuthorizationException("post", action)
        return post

    async def update_post(self, data: PostUpdate, account_id: int) -> PostResult:
        """Replace title and body.

        Raises:
            ResourceNotFoundException: no post with data.id.
            AuthorizationException: account_id is not the post's author.
        """
        await self._get_owned_post(data.id, account_id, "update")
        post = await self._post_repo.update_post(data)
        if post is None:
            raise ResourceNotFoundException("post", data.id)
        return post

    async def delete_post(self, post_id: int, account_id: int) -> None:
        """Delete a post; same errors as update_post."""
        await self._get_owned_post(post_id, account_id, "delete")
        if not await self._post_repo.delete_by_id(post_id):
            raise ResourceNotFoundException("post", post_id)
        logger.info("Post deleted: id=%s", post_id)
