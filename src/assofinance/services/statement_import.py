"""Bank statement import.

Rows arrive already parsed (date, description, signed amount). Each usable row
becomes a transaction through TransactionService, so categorization rules
apply exactly as for manual entry.
"""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from assofinance.core.exceptions import FinanceError, NotFoundError, StatementImportError
from assofinance.models.base import EXPENSE, INCOME
from assofinance.repositories.account import AccountRepository
from assofinance.schemas.internal import NormalizedImportRow
from assofinance.schemas.statement_import import StatementImportResult, StatementRow
from assofinance.services.transaction import TransactionService

logger = logging.getLogger(__name__)


def normalize_row(row: StatementRow) -> NormalizedImportRow | None:
    """Turn a signed statement row into a positive amount plus direction.

    Returns None for rows without a description or with a zero amount.
    """
    description = (row.description or "").strip()
    if not description or row.amount_cents == 0:
        return None
    return NormalizedImportRow(
        transaction_date=row.transaction_date,
        description=description,
        amount=abs(row.amount_cents),
        type=INCOME if row.amount_cents > 0 else EXPENSE,
    )


class StatementImportService:
    """Imports parsed statement rows into one account."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.account_repo = AccountRepository(db)
        self.transaction_service = TransactionService(db)

    async def import_rows(self, account_id: UUID, rows: list[StatementRow]) -> StatementImportResult:
        """Import rows one at a time.

        A failing row is counted and skipped; it never aborts the import.

        Raises:
            NotFoundError: If the target account does not exist (API_001)
            StatementImportError: If no row is usable (IMP_001)
        """
        if not await self.account_repo.get_by_id(account_id):
            raise NotFoundError("API_001", {"account_id": str(account_id)})

        normalized = [normalize_row(row) for row in rows]
        usable = [row for row in normalized if row is not None]
        skipped_count = len(normalized) - len(usable)
        if not usable:
            raise StatementImportError("IMP_001", {"rows": len(rows)})

        imported_count = 0
        error_count = 0
        for index, row in enumerate(usable):
            try:
                await self.transaction_service.create_transaction(
                    account_id=account_id,
                    amount=row.amount,
                    transaction_type=row.type,
                    transaction_date=row.transaction_date,
                    description=row.description,
                )
            except (FinanceError, SQLAlchemyError) as e:
                error_count += 1
                logger.warning(
                    "Statement row import failed",
                    extra={"row_index": index, "error_type": type(e).__name__},
                )
                continue
            imported_count += 1

        logger.info(
            "Statement import completed",
            extra={
                "imported_count": imported_count,
                "error_count": error_count,
                "skipped_count": skipped_count,
            },
        )

        message = f"{imported_count} transactions imported"
        if error_count:
            message += f", {error_count} errors"
        return StatementImportResult(
            imported_count=imported_count,
            error_count=error_count,
            skipped_count=skipped_count,
            message=message,
        )
