"""Schemas for reporting endpoints."""

from datetime import date

from pydantic import BaseModel, Field

from assofinance.schemas.common import MoneyMeta


class PeriodSummary(BaseModel):
    """Income/expense totals over a trailing period."""

    days: int
    start_date: date
    total_income: int
    total_expenses: int
    balance: int = Field(description="Income minus expenses")
    transaction_count: int
    average_transaction: int = Field(description="(income + expenses) / count, 0 when empty")
    money: MoneyMeta


class DailyPoint(BaseModel):
    """Totals for one day plus running balance."""

    day: date
    income: int
    expenses: int
    cumulative_balance: int


class DailyEvolution(BaseModel):
    days: int
    points: list[DailyPoint]
    money: MoneyMeta


class CategoryTotal(BaseModel):
    """Totals for one category name."""

    category: str
    income: int
    expenses: int
    total: int


class CategoryBreakdown(BaseModel):
    days: int
    categories: list[CategoryTotal]
    money: MoneyMeta


class AccountTypeBalances(BaseModel):
    balances: dict[str, int]
    money: MoneyMeta
