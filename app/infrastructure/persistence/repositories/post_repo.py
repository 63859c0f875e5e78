"""Post repository. Interface methods return application DTOs."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.post import PostCreate, PostResult, PostUpdate
from app.infrastructure.persistence.models.post import Post
from app.infrastructure.persistence.repositories.base import BaseRepository


def _post_to_result(p: Post) -> PostResult:
    return PostResult(
        id=p.id,
        title=p.title,
        body=p.body,
        author_id=p.author_id,
        created_at=p.created_at,
        updated_at=p.updated_at,
    )


class PostRepository(BaseRepository[Post]):
    """Post repository: CRUD and case-insensitive title search."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Post)

    async def get_by_id(self, post_id: int) -> PostResult | None:
        post = await self.get_model(post_id)
        return _post_to_result(post) if post else None

    async def list_posts(self, skip: int = 0, limit: int = 100) -> list[PostResult]:
        posts = await self.get_all_models(
            skip=skip, limit=limit, order_by=Post.id.desc()
        )
        return [_post_to_result(p) for p in posts]

    async def search_by_title(self, title: str) -> list[PostResult]:
        """Substring match ignoring case; LIKE wildcards in title are matched literally."""
        result = await self.db.execute(
            select(Post)
            .where(Post.title.icontains(title, autoescape=True))
            .order_by(Post.id.desc())
        )
        return [_post_to_result(p) for p in result.scalars().all()]

    async def create_post(self, data: PostCreate, author_id: int | None) -> PostResult:
        post = Post(title=data.title, body=data.body, author_id=author_id)
        created = await self.add(post)
        return _post_to_result(created)

    async def update_post(self, data: PostUpdate) -> PostResult | None:
        post = await self.get_model(data.id)
        if post is None:
            return None
        post.title = data.title
        post.body = data.body
        updated = await self.flush_update(post)
        return _post_to_result(updated)

    async def delete_by_id(self, post_id: int) -> bool:
        post = await self.get_model(post_id)
        if post is None:
            return False
        await self.delete(post)
        return True
