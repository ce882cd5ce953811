"""Account service for business logic operations."""
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from assofinance.core.exceptions import NotFoundError, ValidationError
from assofinance.models.account import Account
from assofinance.repositories.account import AccountRepository


class AccountService:
    """Service layer for account-related operations."""

    def __init__(self, db: AsyncSession):
        """Initialize account service with database session.

        Args:
            db: Database session
        """
        self.db = db
        self.account_repo = AccountRepository(db)

    async def create_account(self, name: str, account_type: str) -> Account:
        """Create an account with a zero balance.

        Raises:
            ValidationError: If the name is empty after trimming
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("VAL_004", {"field": "name"})
        return await self.account_repo.create(Account(name=name, type=account_type, balance=0))

    async def list_accounts(self, skip: int = 0, limit: int = 100) -> list[Account]:
        """Get accounts, newest first."""
        return await self.account_repo.get_all_newest_first(skip, limit)

    async def get_account(self, account_id: UUID) -> Account:
        """Get an account.

        Raises:
            NotFoundError: If the account does not exist
        """
        account = await self.account_repo.get_by_id(account_id)
        if not account:
            raise NotFoundError("API_001", {"account_id": str(account_id)})
        return account

    async def delete_account(self, account_id: UUID) -> None:
        """Delete an account together with its transactions."""
        if not await self.account_repo.delete_with_transactions(account_id):
            raise NotFoundError("API_001", {"account_id": str(account_id)})

    async def get_balance_overview(self) -> tuple[int, dict[str, int]]:
        """Get the total balance and the balance per account type.

        Returns:
            (total_balance, {account_type: balance})
        """
        by_type = await self.account_repo.get_balance_by_type()
        return sum(by_type.values()), by_type
