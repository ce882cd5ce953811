"""Keyword rules that assign a category to matching transactions.

Rules are immutable once stored: changing a rule means deleting it and
creating a new one.
"""
from uuid import UUID

from sqlalchemy import JSON, CheckConstraint, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from assofinance.models.base import BaseModel


class CategorizationRule(BaseModel):
    """Keyword rule for one transaction direction."""

    __tablename__ = "categorization_rules"

    category_id: Mapped[UUID] = mapped_column(
        ForeignKey("categories.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # Lowercase, non-empty list of substrings.
    keywords: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    transaction_type: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    priority: Mapped[int] = mapped_column(Integer, default=1, nullable=False)

    __table_args__ = (
        CheckConstraint(
            "transaction_type IN ('income', 'expense')",
            name="ck_categorization_rules_transaction_type",
        ),
    )

    def __repr__(self) -> str:
        return (
            f"<CategorizationRule(id={self.id}, category_id={self.category_id}, "
            f"transaction_type={self.transaction_type}, priority={self.priority})>"
        )
