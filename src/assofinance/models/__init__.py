"""Database models."""
from assofinance.models.account import Account
from assofinance.models.category import Category
from assofinance.models.transaction import Transaction
from assofinance.models.categorization_rule import CategorizationRule

__all__ = ["Account", "Category", "Transaction", "CategorizationRule"]
