"""Category repository."""
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from assofinance.models.categorization_rule import CategorizationRule
from assofinance.models.category import Category
from assofinance.models.transaction import Transaction
from assofinance.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    """Repository for Category model."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Category)

    async def get_all_by_name(self, category_type: str | None = None) -> list[Category]:
        """Get categories ordered by name, optionally restricted to one type."""
        query = select(Category).order_by(Category.name)
        if category_type:
            query = query.where(Category.type == category_type)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def delete_with_references(self, category_id: UUID) -> bool:
        """
        Delete a category.
        Transactions using it become uncategorized; rules targeting it are deleted.
        """
        category = await self.get_by_id(category_id)
        if not category:
            return False

        await self.db.execute(
            update(Transaction)
            .where(Transaction.category_id == category_id)
            .values(category_id=None)
        )
        await self.db.execute(
            delete(CategorizationRule).where(CategorizationRule.category_id == category_id)
        )
        await self.db.delete(category)
        await self.db.commit()
        return True
