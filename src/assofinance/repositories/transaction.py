"""Transaction repository with filtering, categorization and aggregation queries."""
from datetime import date
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from assofinance.models.account import Account
from assofinance.models.base import EXPENSE, INCOME
from assofinance.models.category import Category
from assofinance.models.transaction import Transaction
from assofinance.repositories.base import BaseRepository
from assofinance.schemas.internal import CategorizationCandidate


class TransactionRepository(BaseRepository[Transaction]):
    """Repository for Transaction model with filtering and analytics queries."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Transaction)

    def _filtered(
        self,
        account_id: UUID | None = None,
        transaction_type: str | None = None,
        category_id: UUID | None = None,
        uncategorized: bool = False,
        start_date: date | None = None,
        end_date: date | None = None,
    ):
        query = (
            select(Transaction, Account.name, Category.name)
            .join(Account, Transaction.account_id == Account.id)
            .outerjoin(Category, Transaction.category_id == Category.id)
        )
        if account_id:
            query = query.where(Transaction.account_id == account_id)
        if transaction_type:
            query = query.where(Transaction.type == transaction_type)
        if uncategorized:
            query = query.where(Transaction.category_id.is_(None))
        elif category_id:
            query = query.where(Transaction.category_id == category_id)
        if start_date:
            query = query.where(Transaction.transaction_date >= start_date)
        if end_date:
            query = query.where(Transaction.transaction_date <= end_date)
        return query

    async def list_with_names(
        self, skip: int = 0, limit: int = 100, **filters
    ) -> tuple[list[tuple[Transaction, str, str | None]], int]:
        """
        List transactions (newest first) with their account and category names.
        Returns (rows, total) where total ignores pagination.
        """
        query = self._filtered(**filters)

        count_query = select(func.count()).select_from(query.subquery())
        total = (await self.db.execute(count_query)).scalar() or 0

        query = (
            query.order_by(
                Transaction.transaction_date.desc(), Transaction.created_at.desc()
            )
            .offset(skip)
            .limit(limit)
        )
        result = await self.db.execute(query)
        rows = [(txn, account_name, category_name) for txn, account_name, category_name in result.all()]
        return rows, int(total)

    async def get_uncategorized_candidates(self) -> list[CategorizationCandidate]:
        """Get every transaction without a category, oldest first."""
        result = await self.db.execute(
            select(Transaction.id, Transaction.description, Transaction.type)
            .where(Transaction.category_id.is_(None))
            .order_by(Transaction.created_at.asc(), Transaction.id.asc())
        )
        return [
            CategorizationCandidate(id=row.id, description=row.description, type=row.type)
            for row in result
        ]

    async def get_candidates_by_ids(self, ids: list[UUID]) -> list[CategorizationCandidate]:
        """Get the given transactions in the order the ids were supplied.

        Unknown ids are silently absent from the result.
        """
        if not ids:
            return []
        result = await self.db.execute(
            select(Transaction.id, Transaction.description, Transaction.type).where(
                Transaction.id.in_(ids)
            )
        )
        by_id = {
            row.id: CategorizationCandidate(id=row.id, description=row.description, type=row.type)
            for row in result
        }
        ordered: list[CategorizationCandidate] = []
        seen: set[UUID] = set()
        for txn_id in ids:
            if txn_id in by_id and txn_id not in seen:
                ordered.append(by_id[txn_id])
                seen.add(txn_id)
        return ordered

    async def set_category(self, transaction_id: UUID, category_id: UUID | None) -> bool:
        """Persist a single category assignment as its own write.

        Only ``category_id`` (and the update timestamp) is touched.
        Returns False when the transaction no longer exists.
        """
        result = await self.db.execute(
            update(Transaction)
            .where(Transaction.id == transaction_id)
            .values(category_id=category_id)
            .execution_options(synchronize_session="evaluate")
        )
        await self.db.commit()
        return bool(result.rowcount)

    async def get_totals_by_type(self, start_date: date) -> dict[str, dict[str, int]]:
        """
        Aggregate amount and count per transaction type since ``start_date``.
        Returns dict of {type: {"amount": total, "count": n}}.
        """
        result = await self.db.execute(
            select(
                Transaction.type,
                func.sum(Transaction.amount).label("amount"),
                func.count(Transaction.id).label("count"),
            )
            .where(Transaction.transaction_date >= start_date)
            .group_by(Transaction.type)
        )
        totals = {INCOME: {"amount": 0, "count": 0}, EXPENSE: {"amount": 0, "count": 0}}
        for row in result:
            totals[row.type] = {"amount": int(row.amount or 0), "count": int(row.count or 0)}
        return totals

    async def get_daily_totals(self, start_date: date) -> dict[date, dict[str, int]]:
        """
        Aggregate income and expenses per day since ``start_date``.
        Returns dict of {date: {"income": total, "expense": total}}.
        """
        result = await self.db.execute(
            select(
                Transaction.transaction_date,
                Transaction.type,
                func.sum(Transaction.amount).label("amount"),
            )
            .where(Transaction.transaction_date >= start_date)
            .group_by(Transaction.transaction_date, Transaction.type)
        )
        daily: dict[date, dict[str, int]] = {}
        for row in result:
            day = daily.setdefault(row.transaction_date, {INCOME: 0, EXPENSE: 0})
            day[row.type] = int(row.amount or 0)
        return daily

    async def get_category_totals(self, start_date: date) -> dict[str | None, dict[str, int]]:
        """
        Aggregate income and expenses per category name since ``start_date``.
        Uncategorized transactions are keyed by None.
        """
        result = await self.db.execute(
            select(
                Category.name,
                Transaction.type,
                func.sum(Transaction.amount).label("amount"),
            )
            .select_from(Transaction)
            .outerjoin(Category, Transaction.category_id == Category.id)
            .where(Transaction.transaction_date >= start_date)
            .group_by(Category.name, Transaction.type)
        )
        totals: dict[str | None, dict[str, int]] = {}
        for row in result:
            entry = totals.setdefault(row.name, {INCOME: 0, EXPENSE: 0})
            entry[row.type] += int(row.amount or 0)
        return totals
