"""Generic repository shared by the per-model repositories."""
from typing import Generic, Type, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from assofinance.models.base import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseRepository(Generic[ModelT]):
    """Lookup, insert and delete by primary key for one model.

    Listing and partial updates are query-specific and live on the subclasses
    and services.
    """

    def __init__(self, db: AsyncSession, model: Type[ModelT]):
        self.db = db
        self.model = model

    async def get_by_id(self, id: UUID) -> ModelT | None:
        result = await self.db.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def create(self, obj: ModelT) -> ModelT:
        """Insert ``obj`` and commit; the returned instance carries server-set fields."""
        self.db.add(obj)
        await self.db.commit()
        await self.db.refresh(obj)
        return obj

    async def delete(self, id: UUID) -> bool:
        """Delete by id and commit. Returns False when nothing matched."""
        obj = await self.get_by_id(id)
        if obj is None:
            return False

        await self.db.delete(obj)
        await self.db.commit()
        return True
