"""Schemas for bulk categorization runs."""

from uuid import UUID

from pydantic import BaseModel, Field


class BulkApplyRequest(BaseModel):
    """Bulk apply request.

    Without ``transaction_ids`` every uncategorized transaction is a candidate.
    With it, exactly those transactions are re-categorized whatever their
    current category.
    """

    transaction_ids: list[UUID] | None = Field(
        None, description="Explicit transactions to (re)categorize"
    )


class BulkApplyResult(BaseModel):
    """Outcome of a bulk categorization run."""

    updated_count: int = Field(description="Transactions whose category was written")
    failed_count: int = Field(0, description="Matched transactions whose write failed")
    candidates_count: int = Field(0, description="Transactions considered")
    message: str
