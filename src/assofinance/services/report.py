"""Reporting over a trailing period of transactions."""
from datetime import date, timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from assofinance.models.base import EXPENSE, INCOME
from assofinance.repositories.account import AccountRepository
from assofinance.repositories.transaction import TransactionRepository

UNCATEGORIZED = "Uncategorized"


class ReportService:
    """Dashboard and report figures. All amounts are minor units."""

    def __init__(self, db: AsyncSession, today: date | None = None):
        self.db = db
        self.today = today
        self.transaction_repo = TransactionRepository(db)
        self.account_repo = AccountRepository(db)

    def period_start(self, days: int) -> date:
        """First day included in a trailing window of ``days`` days."""
        return (self.today or date.today()) - timedelta(days=days)

    async def period_summary(self, days: int) -> dict:
        """Income, expenses, balance, count and average over the period."""
        start = self.period_start(days)
        totals = await self.transaction_repo.get_totals_by_type(start)

        income = totals[INCOME]["amount"]
        expenses = totals[EXPENSE]["amount"]
        count = totals[INCOME]["count"] + totals[EXPENSE]["count"]
        return {
            "days": days,
            "start_date": start,
            "total_income": income,
            "total_expenses": expenses,
            "balance": income - expenses,
            "transaction_count": count,
            "average_transaction": round((income + expenses) / count) if count else 0,
        }

    async def daily_evolution(self, days: int) -> list[dict]:
        """Per-day totals in date order with a running balance."""
        daily = await self.transaction_repo.get_daily_totals(self.period_start(days))

        points = []
        cumulative = 0
        for day in sorted(daily):
            income = daily[day][INCOME]
            expenses = daily[day][EXPENSE]
            cumulative += income - expenses
            points.append(
                {"day": day, "income": income, "expenses": expenses, "cumulative_balance": cumulative}
            )
        return points

    async def category_breakdown(self, days: int) -> list[dict]:
        """Totals per category name, largest first."""
        totals = await self.transaction_repo.get_category_totals(self.period_start(days))

        merged: dict[str, dict[str, int]] = {}
        for name, amounts in totals.items():
            entry = merged.setdefault(name or UNCATEGORIZED, {INCOME: 0, EXPENSE: 0})
            entry[INCOME] += amounts[INCOME]
            entry[EXPENSE] += amounts[EXPENSE]

        breakdown = [
            {
                "category": name,
                "income": amounts[INCOME],
                "expenses": amounts[EXPENSE],
                "total": amounts[INCOME] + amounts[EXPENSE],
            }
            for name, amounts in merged.items()
        ]
        breakdown.sort(key=lambda x: (-x["total"], x["category"]))
        return breakdown

    async def account_type_balances(self) -> dict[str, int]:
        return await self.account_repo.get_balance_by_type()
