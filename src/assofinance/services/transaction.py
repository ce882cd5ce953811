"""Transaction service.

Creating, editing and deleting transactions keeps the owning account balance
in sync. New transactions without a category are run through the
categorization rules once, before they are stored.
"""

import logging
from datetime import date
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from assofinance.categorization import match_category
from assofinance.core.exceptions import NotFoundError, ValidationError
from assofinance.models.transaction import Transaction
from assofinance.repositories.account import AccountRepository
from assofinance.repositories.category import CategoryRepository
from assofinance.repositories.rule import RuleRepository
from assofinance.repositories.transaction import TransactionRepository

logger = logging.getLogger(__name__)

# Columns that may not be set to NULL through a partial update.
_REQUIRED_FIELDS = ("account_id", "amount", "type", "transaction_date")


class TransactionService:
    """Service layer for transaction entry and maintenance."""

    def __init__(self, db: AsyncSession):
        """Initialize the service.

        Args:
            db: Database session
        """
        self.db = db
        self.transaction_repo = TransactionRepository(db)
        self.account_repo = AccountRepository(db)
        self.category_repo = CategoryRepository(db)
        self.rule_repo = RuleRepository(db)

    async def create_transaction(
        self,
        *,
        account_id: UUID,
        amount: int,
        transaction_type: str,
        transaction_date: date,
        description: str | None = None,
        category_id: UUID | None = None,
    ) -> Transaction:
        """Record a transaction and update the account balance.

        A caller-supplied ``category_id`` is kept as is (after checking it
        matches the transaction type). Without one, a non-empty description is
        matched against the rules for the transaction type.

        Raises:
            NotFoundError: Unknown account (API_001) or category (API_002)
            ValidationError: Category type differs from transaction type (VAL_003)
        """
        await self._require_account(account_id)
        description = (description or "").strip() or None

        if category_id is not None:
            await self._require_category_for(category_id, transaction_type)
        elif description:
            rules = await self.rule_repo.get_ordered(transaction_type)
            category_id = match_category(description, transaction_type, rules)
            if category_id is not None:
                logger.debug("Transaction auto-categorized at creation")

        txn = Transaction(
            account_id=account_id,
            amount=amount,
            type=transaction_type,
            description=description,
            category_id=category_id,
            transaction_date=transaction_date,
        )
        try:
            self.db.add(txn)
            await self.db.flush()
            await self.account_repo.recompute_balance(account_id)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        await self.db.refresh(txn)
        return txn

    async def list_transactions(
        self,
        page: int = 1,
        limit: int = 100,
        *,
        account_id: UUID | None = None,
        transaction_type: str | None = None,
        category_id: UUID | None = None,
        uncategorized: bool = False,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> tuple[list[tuple[Transaction, str, str | None]], int]:
        """List transactions newest first.

        Returns:
            (rows of (transaction, account_name, category_name), total)
        """
        return await self.transaction_repo.list_with_names(
            skip=(page - 1) * limit,
            limit=limit,
            account_id=account_id,
            transaction_type=transaction_type,
            category_id=category_id,
            uncategorized=uncategorized,
            start_date=start_date,
            end_date=end_date,
        )

    async def get_transaction(self, transaction_id: UUID) -> Transaction:
        txn = await self.transaction_repo.get_by_id(transaction_id)
        if not txn:
            raise NotFoundError("API_003", {"transaction_id": str(transaction_id)})
        return txn

    async def update_transaction(self, transaction_id: UUID, changes: dict) -> Transaction:
        """Apply a partial update.

        Only keys present in ``changes`` are applied. Setting ``category_id``
        to None clears the category. Rules are not re-run on update.

        Raises:
            NotFoundError: Unknown transaction, account or category
            ValidationError: Category type differs from the resulting transaction type
        """
        txn = await self.get_transaction(transaction_id)
        changes = {
            key: value
            for key, value in changes.items()
            if not (key in _REQUIRED_FIELDS and value is None)
        }

        old_account_id = txn.account_id
        new_account_id = changes.get("account_id", old_account_id)
        if new_account_id != old_account_id:
            await self._require_account(new_account_id)

        new_type = changes.get("type", txn.type)
        if "category_id" in changes:
            if changes["category_id"] is not None:
                await self._require_category_for(changes["category_id"], new_type)
        elif new_type != txn.type and txn.category_id is not None:
            await self._require_category_for(txn.category_id, new_type)

        if "description" in changes:
            changes["description"] = (changes["description"] or "").strip() or None

        for key, value in changes.items():
            setattr(txn, key, value)

        try:
            await self.db.flush()
            await self.account_repo.recompute_balance(new_account_id)
            if new_account_id != old_account_id:
                await self.account_repo.recompute_balance(old_account_id)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        await self.db.refresh(txn)
        return txn

    async def set_category(self, transaction_id: UUID, category_id: UUID | None) -> Transaction:
        """Manually assign (or clear) a transaction's category."""
        return await self.update_transaction(transaction_id, {"category_id": category_id})

    async def delete_transaction(self, transaction_id: UUID) -> None:
        """Delete a transaction and recompute its account balance."""
        txn = await self.get_transaction(transaction_id)
        account_id = txn.account_id
        try:
            await self.db.delete(txn)
            await self.db.flush()
            await self.account_repo.recompute_balance(account_id)
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise

    async def _require_account(self, account_id: UUID) -> None:
        if not await self.account_repo.get_by_id(account_id):
            raise NotFoundError("API_001", {"account_id": str(account_id)})

    async def _require_category_for(self, category_id: UUID, transaction_type: str) -> None:
        category = await self.category_repo.get_by_id(category_id)
        if not category:
            raise NotFoundError("API_002", {"category_id": str(category_id)})
        if category.type != transaction_type:
            raise ValidationError(
                "VAL_003",
                {"category_type": category.type, "transaction_type": transaction_type},
            )
