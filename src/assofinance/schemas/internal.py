"""Internal data schemas passed between repositories and services.

These are plain snapshots detached from the ORM session, so batch loops can
roll back a failed write without touching expired instances.
"""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CategorizationCandidate(BaseModel):
    """A transaction as seen by the categorization engine."""

    id: UUID
    description: str | None = None
    type: str = Field(description="'income' or 'expense'")


class NormalizedImportRow(BaseModel):
    """A statement row after sign handling.

    The amount is in minor units and always positive; the direction is in ``type``.
    """

    transaction_date: date
    description: str
    amount: int = Field(gt=0)
    type: str


class RuleSnapshot(BaseModel):
    """Read-only copy of a categorization rule for the duration of a batch."""

    id: UUID
    category_id: UUID
    keywords: list[str]
    transaction_type: str
    priority: int

    model_config = ConfigDict(from_attributes=True, frozen=True)
