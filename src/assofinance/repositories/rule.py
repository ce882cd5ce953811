"""Categorization rule repository."""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from assofinance.models.categorization_rule import CategorizationRule
from assofinance.models.category import Category
from assofinance.repositories.base import BaseRepository


class RuleRepository(BaseRepository[CategorizationRule]):
    """Repository for CategorizationRule model.

    Rules are returned ordered by priority (highest first) then id, which is
    also the engine's evaluation order.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(db, CategorizationRule)

    async def get_ordered(self, transaction_type: str | None = None) -> list[CategorizationRule]:
        """Get rules in evaluation order, optionally for one transaction type."""
        query = select(CategorizationRule).order_by(
            CategorizationRule.priority.desc(), CategorizationRule.id.asc()
        )
        if transaction_type:
            query = query.where(CategorizationRule.transaction_type == transaction_type)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_ordered_with_category_names(
        self, transaction_type: str | None = None
    ) -> list[tuple[CategorizationRule, str]]:
        """Get rules in evaluation order along with their category name."""
        query = (
            select(CategorizationRule, Category.name)
            .join(Category, CategorizationRule.category_id == Category.id)
            .order_by(CategorizationRule.priority.desc(), CategorizationRule.id.asc())
        )
        if transaction_type:
            query = query.where(CategorizationRule.transaction_type == transaction_type)
        result = await self.db.execute(query)
        return [(rule, name) for rule, name in result.all()]
