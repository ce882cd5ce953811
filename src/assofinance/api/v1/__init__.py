"""API version 1 routes."""

from fastapi import APIRouter

from assofinance.api.v1 import (
    accounts,
    categories,
    categorization,
    imports,
    reports,
    rules,
    transactions,
)

router = APIRouter(prefix="/api/v1")

router.include_router(accounts.router)
router.include_router(categories.router)
router.include_router(rules.router)
router.include_router(transactions.router)
router.include_router(categorization.router)
router.include_router(imports.router)
router.include_router(reports.router)
