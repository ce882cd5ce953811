"""Pydantic schemas for category requests and responses."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from assofinance.schemas.common import TransactionType


class CategoryCreateRequest(BaseModel):
    """Request to create a category."""

    name: str = Field(description="Category name")
    type: TransactionType = Field("expense", description="income or expense")


class CategoryResponse(BaseModel):
    """Category data for API responses."""

    id: UUID
    name: str
    type: TransactionType
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CategoryListResult(BaseModel):
    """List of categories."""

    categories: list[CategoryResponse]
    total: int
