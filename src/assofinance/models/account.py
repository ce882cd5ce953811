"""Account model: bank account, cash box, grants or membership dues."""
from sqlalchemy import BigInteger, CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column

from assofinance.models.base import BaseModel


class Account(BaseModel):
    """Association account holding a derived balance in minor units."""

    __tablename__ = "accounts"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    # Recomputed from transactions; never written directly by callers.
    balance: Mapped[int] = mapped_column(BigInteger, default=0, nullable=False)

    __table_args__ = (
        CheckConstraint(
            "type IN ('bank', 'cash', 'grants', 'dues')", name="ck_accounts_type"
        ),
    )

    def __repr__(self) -> str:
        return f"<Account(id={self.id}, name={self.name}, type={self.type})>"
