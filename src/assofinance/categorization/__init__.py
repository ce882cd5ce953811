"""Transaction categorization utilities.

Local, rule-based categorization of transactions from their descriptions.
Rules are owned by the association administrators and stored alongside the
transactions they classify.
"""

from .engine import match_category, normalize_keywords, order_rules

__all__ = ["match_category", "normalize_keywords", "order_rules"]
