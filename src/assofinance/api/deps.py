"""FastAPI dependency injection for database sessions and services."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from assofinance.db.session import get_db
from assofinance.services.account import AccountService
from assofinance.services.categorization import CategorizationService
from assofinance.services.category import CategoryService
from assofinance.services.report import ReportService
from assofinance.services.rule import RuleService
from assofinance.services.statement_import import StatementImportService
from assofinance.services.transaction import TransactionService

__all__ = [
    "get_db",
    "get_account_service",
    "get_category_service",
    "get_rule_service",
    "get_transaction_service",
    "get_categorization_service",
    "get_import_service",
    "get_report_service",
]


async def get_account_service(db: AsyncSession = Depends(get_db)) -> AccountService:
    return AccountService(db)


async def get_category_service(db: AsyncSession = Depends(get_db)) -> CategoryService:
    return CategoryService(db)


async def get_rule_service(db: AsyncSession = Depends(get_db)) -> RuleService:
    return RuleService(db)


async def get_transaction_service(db: AsyncSession = Depends(get_db)) -> TransactionService:
    return TransactionService(db)


async def get_categorization_service(
    db: AsyncSession = Depends(get_db),
) -> CategorizationService:
    """
    Get bulk categorization service instance.

    Args:
        db: Database session

    Returns:
        CategorizationService bound to the request session
    """
    return CategorizationService(db)


async def get_import_service(db: AsyncSession = Depends(get_db)) -> StatementImportService:
    return StatementImportService(db)


async def get_report_service(db: AsyncSession = Depends(get_db)) -> ReportService:
    return ReportService(db)
