"""Base repository: generic CRUD over one ORM model."""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import Base


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_model, get_all_models, add, flush_update, delete.

    Methods return ORM instances; subclasses map them to application DTOs
    in their public (interface) methods.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_model(self, entity_id: int) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def get_all_models(
        self, skip: int = 0, limit: int = 100, order_by: Any = None
    ) -> list[ModelType]:
        """Return records with pagination, ordered by order_by (default: primary key)."""
        model: Any = self.model
        stmt = select(self.model).order_by(
            order_by if order_by is not None else model.id
        )
        result = await self.db.execute(stmt.offset(skip).limit(limit))
        return list(result.scalars().all())

    async def add(self, obj: ModelType) -> ModelType:
        """Persist a new record; server defaults and id are loaded back."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def flush_update(self, obj: ModelType) -> ModelType:
        """Flush changes on an attached record and reload server-side values."""
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def delete(self, obj: ModelType) -> None:
        """Delete the record."""
        await self.db.delete(obj)
        await self.db.flush()
