"""Categorization rule management.

The category/type consistency check lives here, upstream of the engine; the
engine itself trusts stored rules.
"""
import logging
from collections.abc import Iterable
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from assofinance.categorization import normalize_keywords
from assofinance.core.exceptions import NotFoundError, ValidationError
from assofinance.models.categorization_rule import CategorizationRule
from assofinance.repositories.category import CategoryRepository
from assofinance.repositories.rule import RuleRepository

logger = logging.getLogger(__name__)


class RuleService:
    """Service layer for categorization rules."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.rule_repo = RuleRepository(db)
        self.category_repo = CategoryRepository(db)

    async def create_rule(
        self,
        category_id: UUID,
        keywords: str | Iterable[str],
        transaction_type: str,
        priority: int = 1,
    ) -> tuple[CategorizationRule, str]:
        """Create a rule.

        Args:
            category_id: Target category
            keywords: Comma-separated string or list of keywords
            transaction_type: "income" or "expense"
            priority: 1 (lowest) to 10 (highest)

        Returns:
            The stored rule and its category name

        Raises:
            ValidationError: Empty keywords (VAL_002) or category type mismatch (VAL_003)
            NotFoundError: Unknown category (API_002)
        """
        normalized = normalize_keywords(keywords)
        if not normalized:
            raise ValidationError("VAL_002", {"field": "keywords"})

        category = await self.category_repo.get_by_id(category_id)
        if not category:
            raise NotFoundError("API_002", {"category_id": str(category_id)})
        if category.type != transaction_type:
            raise ValidationError(
                "VAL_003",
                {"category_type": category.type, "transaction_type": transaction_type},
            )

        rule = await self.rule_repo.create(
            CategorizationRule(
                category_id=category_id,
                keywords=normalized,
                transaction_type=transaction_type,
                priority=priority,
            )
        )
        logger.info(
            "Categorization rule created",
            extra={"rule_id": str(rule.id), "keywords_count": len(normalized), "priority": priority},
        )
        return rule, category.name

    async def list_rules(
        self, transaction_type: str | None = None
    ) -> list[tuple[CategorizationRule, str]]:
        """List rules in evaluation order with their category names."""
        return await self.rule_repo.get_ordered_with_category_names(transaction_type)

    async def delete_rule(self, rule_id: UUID) -> None:
        if not await self.rule_repo.delete(rule_id):
            raise NotFoundError("API_004", {"rule_id": str(rule_id)})
