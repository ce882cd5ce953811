"""Shared schemas for API responses."""

from typing import Literal

from pydantic import BaseModel, Field

TransactionType = Literal["income", "expense"]
AccountType = Literal["bank", "cash", "grants", "dues"]


class MoneyMeta(BaseModel):
    """Metadata describing how monetary amounts are represented."""

    currency: str = Field(description="ISO currency code (e.g., EUR)")
    minor_unit: int = Field(
        description="Number of decimal places for the currency (e.g., 2 for cents)"
    )


class PaginationMeta(BaseModel):
    """Pagination metadata for list endpoints."""

    page: int = Field(description="Current page number (1-indexed)")
    limit: int = Field(description="Items per page")
    total: int = Field(description="Total number of items")
    total_pages: int = Field(description="Total number of pages")
