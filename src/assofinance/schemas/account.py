"""Pydantic schemas for account requests and responses."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from assofinance.schemas.common import AccountType, MoneyMeta


class AccountCreateRequest(BaseModel):
    """Request to create an account."""

    name: str = Field(description="Account name")
    type: AccountType = Field("bank", description="bank, cash, grants or dues")


class AccountResponse(BaseModel):
    """Account data for API responses."""

    id: UUID
    name: str
    type: AccountType
    balance: int = Field(description="Balance in minor units (income minus expenses)")
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AccountListResult(BaseModel):
    """List of accounts."""

    accounts: list[AccountResponse]
    total: int = Field(description="Total number of accounts")
    money: MoneyMeta


class BalanceOverview(BaseModel):
    """Total balance and balance per account type."""

    total_balance: int = Field(description="Sum of all account balances (minor units)")
    by_type: dict[str, int] = Field(description="Balance per account type (minor units)")
    money: MoneyMeta
