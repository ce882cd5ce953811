"""Transaction-specific request/response schemas."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from assofinance.schemas.common import MoneyMeta, PaginationMeta, TransactionType


class TransactionCreateRequest(BaseModel):
    """Request to record a transaction.

    When ``category_id`` is omitted and a description is given, categorization
    rules are applied before the transaction is stored.
    """

    account_id: UUID
    amount: int = Field(gt=0, description="Amount in minor units (always positive)")
    type: TransactionType = "expense"
    category_id: UUID | None = None
    description: str | None = None
    transaction_date: date


class TransactionUpdateRequest(BaseModel):
    """Partial update; only fields present in the payload are changed."""

    account_id: UUID | None = None
    amount: int | None = Field(None, gt=0)
    type: TransactionType | None = None
    category_id: UUID | None = None
    description: str | None = None
    transaction_date: date | None = None


class TransactionCategoryRequest(BaseModel):
    """Manual category assignment; null clears the category."""

    category_id: UUID | None = Field(description="Category to apply, or null to clear")


class TransactionResponse(BaseModel):
    """Transaction data for API responses."""

    id: UUID
    account_id: UUID
    account_name: str | None = None
    amount: int = Field(description="Amount in minor units")
    type: TransactionType
    category_id: UUID | None = None
    category_name: str | None = None
    description: str | None = None
    transaction_date: date
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TransactionListResult(BaseModel):
    """Paginated list of transactions."""

    transactions: list[TransactionResponse]
    pagination: PaginationMeta
    money: MoneyMeta
