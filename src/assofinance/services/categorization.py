"""Bulk categorization of existing transactions.

Rules and candidates are loaded fresh on every run. Each category assignment
is its own write: a failed write is rolled back and skipped, the rest of the
batch carries on. A run interrupted halfway leaves the already-written
assignments in place; re-running in the default mode only picks up what is
still uncategorized.
"""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from assofinance.categorization import match_category, order_rules
from assofinance.core.exceptions import CategorizationError
from assofinance.repositories.rule import RuleRepository
from assofinance.repositories.transaction import TransactionRepository
from assofinance.schemas.categorization import BulkApplyResult
from assofinance.schemas.internal import CategorizationCandidate, RuleSnapshot

logger = logging.getLogger(__name__)


def summary_message(updated_count: int) -> str:
    """User-facing outcome of a bulk run."""
    if updated_count == 0:
        return "no transactions to categorize"
    noun = "transaction" if updated_count == 1 else "transactions"
    return f"{updated_count} {noun} categorized"


class CategorizationService:
    """Runs the categorization rules over stored transactions."""

    def __init__(self, db: AsyncSession):
        """Initialize the service.

        Args:
            db: Database session
        """
        self.db = db
        self.rule_repo = RuleRepository(db)
        self.transaction_repo = TransactionRepository(db)

    async def bulk_apply(self, target_ids: list[UUID] | None = None) -> BulkApplyResult:
        """Categorize a batch of transactions.

        Args:
            target_ids: Explicit transactions to re-categorize regardless of
                their current category. When None, every uncategorized
                transaction is a candidate.

        Returns:
            BulkApplyResult with updated/failed/candidate counts

        Raises:
            CategorizationError: If rules (CAT_001) or candidates (CAT_002)
                cannot be loaded. Nothing is written in that case.
        """
        rules = await self._load_rules()
        candidates = await self._load_candidates(target_ids)

        updated_count = 0
        failed_count = 0
        for candidate in candidates:
            if not candidate.description:
                continue

            category_id = match_category(candidate.description, candidate.type, rules)
            if category_id is None:
                continue

            try:
                written = await self.transaction_repo.set_category(candidate.id, category_id)
            except SQLAlchemyError as e:
                await self.db.rollback()
                failed_count += 1
                logger.warning(
                    "Category write failed; transaction skipped",
                    extra={"transaction_id": str(candidate.id), "error_type": type(e).__name__},
                )
                continue

            if written:
                updated_count += 1

        logger.info(
            "Bulk categorization completed",
            extra={
                "mode": "targeted" if target_ids is not None else "uncategorized",
                "candidates_count": len(candidates),
                "updated_count": updated_count,
                "failed_count": failed_count,
            },
        )
        return BulkApplyResult(
            updated_count=updated_count,
            failed_count=failed_count,
            candidates_count=len(candidates),
            message=summary_message(updated_count),
        )

    async def _load_rules(self) -> list[RuleSnapshot]:
        try:
            rules = await self.rule_repo.get_ordered()
        except SQLAlchemyError as e:
            logger.error("Failed to load categorization rules", extra={"error_type": type(e).__name__})
            raise CategorizationError("CAT_001") from e
        # Snapshots stay readable after a rollback expires ORM instances.
        return order_rules(RuleSnapshot.model_validate(rule) for rule in rules)

    async def _load_candidates(
        self, target_ids: list[UUID] | None
    ) -> list[CategorizationCandidate]:
        try:
            if target_ids is None:
                return await self.transaction_repo.get_uncategorized_candidates()
            return await self.transaction_repo.get_candidates_by_ids(target_ids)
        except SQLAlchemyError as e:
            logger.error(
                "Failed to load transactions to categorize",
                extra={"error_type": type(e).__name__},
            )
            raise CategorizationError("CAT_002") from e
