"""Initial schema: accounts, categories, transactions and categorization rules.

Revision ID: 5e1a7c3d9b20
Revises:
Create Date: 2026-10-19
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "5e1a7c3d9b20"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "accounts",
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.Column("balance", sa.BigInteger(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.CheckConstraint(
            "type IN ('bank', 'cash', 'grants', 'dues')", name="ck_accounts_type"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_accounts_type", "accounts", ["type"], unique=False)

    op.create_table(
        "categories",
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("type", sa.String(length=10), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("type IN ('income', 'expense')", name="ck_categories_type"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_categories_name", "categories", ["name"], unique=False)

    op.create_table(
        "transactions",
        sa.Column("account_id", sa.Uuid(), nullable=False),
        sa.Column("category_id", sa.Uuid(), nullable=True),
        sa.Column("amount", sa.BigInteger(), nullable=False),
        sa.Column("type", sa.String(length=10), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("transaction_date", sa.Date(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("amount > 0", name="ck_transactions_amount_positive"),
        sa.CheckConstraint("type IN ('income', 'expense')", name="ck_transactions_type"),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["category_id"], ["categories.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_transactions_account_id", "transactions", ["account_id"], unique=False)
    op.create_index("ix_transactions_category_id", "transactions", ["category_id"], unique=False)
    op.create_index(
        "ix_transactions_transaction_date", "transactions", ["transaction_date"], unique=False
    )
    op.create_index(
        "ix_transactions_account_id_transaction_date",
        "transactions",
        ["account_id", "transaction_date"],
        unique=False,
    )

    op.create_table(
        "categorization_rules",
        sa.Column("category_id", sa.Uuid(), nullable=False),
        sa.Column("keywords", sa.JSON(), nullable=False),
        sa.Column("transaction_type", sa.String(length=10), nullable=False),
        sa.Column("priority", sa.Integer(), nullable=False, server_default="1"),
        *_timestamps(),
        sa.CheckConstraint(
            "transaction_type IN ('income', 'expense')",
            name="ck_categorization_rules_transaction_type",
        ),
        sa.ForeignKeyConstraint(["category_id"], ["categories.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_categorization_rules_category_id",
        "categorization_rules",
        ["category_id"],
        unique=False,
    )
    op.create_index(
        "ix_categorization_rules_transaction_type",
        "categorization_rules",
        ["transaction_type"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_categorization_rules_transaction_type", table_name="categorization_rules")
    op.drop_index("ix_categorization_rules_category_id", table_name="categorization_rules")
    op.drop_table("categorization_rules")

    op.drop_index("ix_transactions_account_id_transaction_date", table_name="transactions")
    op.drop_index("ix_transactions_transaction_date", table_name="transactions")
    op.drop_index("ix_transactions_category_id", table_name="transactions")
    op.drop_index("ix_transactions_account_id", table_name="transactions")
    op.drop_table("transactions")

    op.drop_index("ix_categories_name", table_name="categories")
    op.drop_table("categories")

    op.drop_index("ix_accounts_type", table_name="accounts")
    op.drop_table("accounts")
