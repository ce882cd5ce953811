"""Reporting endpoints backing the dashboard."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from assofinance.api.deps import get_report_service
from assofinance.config import settings
from assofinance.schemas.common import MoneyMeta
from assofinance.schemas.report import (
    AccountTypeBalances,
    CategoryBreakdown,
    CategoryTotal,
    DailyEvolution,
    DailyPoint,
    PeriodSummary,
)
from assofinance.services.report import ReportService

router = APIRouter(prefix="/reports", tags=["reports"])

Days = Annotated[int | None, Query(ge=1, le=3660, description="Trailing window in days")]


def _money() -> MoneyMeta:
    return MoneyMeta(currency=settings.currency, minor_unit=settings.currency_minor_unit)


@router.get("/summary", response_model=PeriodSummary, summary="Income/expense summary")
async def get_summary(
    days: Days = None,
    service: ReportService = Depends(get_report_service),
) -> PeriodSummary:
    summary = await service.period_summary(days or settings.report_default_days)
    return PeriodSummary(**summary, money=_money())


@router.get("/evolution", response_model=DailyEvolution, summary="Daily totals and running balance")
async def get_evolution(
    days: Days = None,
    service: ReportService = Depends(get_report_service),
) -> DailyEvolution:
    days = days or settings.report_default_days
    points = await service.daily_evolution(days)
    return DailyEvolution(days=days, points=[DailyPoint(**p) for p in points], money=_money())


@router.get("/categories", response_model=CategoryBreakdown, summary="Totals per category")
async def get_category_breakdown(
    days: Days = None,
    service: ReportService = Depends(get_report_service),
) -> CategoryBreakdown:
    days = days or settings.report_default_days
    rows = await service.category_breakdown(days)
    return CategoryBreakdown(days=days, categories=[CategoryTotal(**r) for r in rows], money=_money())


@router.get("/account-types", response_model=AccountTypeBalances, summary="Balance per account type")
async def get_account_type_balances(
    service: ReportService = Depends(get_report_service),
) -> AccountTypeBalances:
    return AccountTypeBalances(balances=await service.account_type_balances(), money=_money())
