"""Account repository with balance maintenance queries."""
from uuid import UUID

from sqlalchemy import case, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from assofinance.models.account import Account
from assofinance.models.base import INCOME
from assofinance.models.transaction import Transaction
from assofinance.repositories.base import BaseRepository


class AccountRepository(BaseRepository[Account]):
    """Repository for Account model."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Account)

    async def get_all_newest_first(self, skip: int = 0, limit: int = 100) -> list[Account]:
        """Get accounts, most recently created first."""
        result = await self.db.execute(
            select(Account).order_by(Account.created_at.desc()).offset(skip).limit(limit)
        )
        return list(result.scalars().all())

    async def recompute_balance(self, account_id: UUID) -> int:
        """
        Recompute an account balance from its transactions.
        Income adds, expense subtracts. Does not commit; the caller owns the unit of work.
        """
        signed_amount = case(
            (Transaction.type == INCOME, Transaction.amount),
            else_=-Transaction.amount,
        )
        result = await self.db.execute(
            select(func.coalesce(func.sum(signed_amount), 0)).where(
                Transaction.account_id == account_id
            )
        )
        balance = int(result.scalar_one())
        await self.db.execute(
            update(Account).where(Account.id == account_id).values(balance=balance)
        )
        return balance

    async def get_balance_by_type(self) -> dict[str, int]:
        """
        Aggregate balances by account type.
        Returns dict of {account_type: total_balance}.
        """
        result = await self.db.execute(
            select(Account.type, func.sum(Account.balance).label("total")).group_by(
                Account.type
            )
        )
        return {row.type: int(row.total or 0) for row in result}

    async def delete_with_transactions(self, account_id: UUID) -> bool:
        """Delete an account and every transaction booked on it."""
        account = await self.get_by_id(account_id)
        if not account:
            return False

        await self.db.execute(
            delete(Transaction).where(Transaction.account_id == account_id)
        )
        await self.db.delete(account)
        await self.db.commit()
        return True
