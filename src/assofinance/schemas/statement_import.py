"""Schemas for bank statement row import."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field


class StatementRow(BaseModel):
    """One already-parsed bank statement line.

    The amount is signed: positive for money in, negative for money out.
    """

    transaction_date: date
    description: str = ""
    amount_cents: int = Field(description="Signed amount in minor units")


class StatementImportRequest(BaseModel):
    """Rows to import into one account."""

    account_id: UUID
    rows: list[StatementRow]


class StatementImportResult(BaseModel):
    """Outcome of a statement import."""

    imported_count: int
    error_count: int = 0
    skipped_count: int = Field(0, description="Rows dropped for missing description or zero amount")
    message: str
