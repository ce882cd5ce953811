"""Pydantic schemas for categorization rules."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from assofinance.schemas.common import TransactionType


class RuleCreateRequest(BaseModel):
    """Request to create a categorization rule.

    ``keywords`` accepts either a list or a comma-separated string such as
    "supermarché, courses, alimentation".
    """

    category_id: UUID = Field(description="Target category (must match transaction_type)")
    keywords: list[str] | str = Field(description="Keywords matched in descriptions")
    transaction_type: TransactionType = Field("expense", description="income or expense")
    priority: int = Field(1, ge=1, le=10, description="Higher priority rules are evaluated first")


class RuleResponse(BaseModel):
    """Categorization rule data for API responses."""

    id: UUID
    category_id: UUID
    category_name: str | None = Field(None, description="Target category name")
    keywords: list[str]
    transaction_type: TransactionType
    priority: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class RuleListResult(BaseModel):
    """Rules in evaluation order."""

    rules: list[RuleResponse]
    total: int
