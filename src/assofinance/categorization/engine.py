"""Deterministic keyword-based transaction categorization.

A rule targets one transaction direction (income or expense) and carries a set
of lowercase keywords, a target category and a priority from 1 to 10. Rules
are evaluated from the highest priority down; rules of equal priority are
evaluated by ascending rule id so the outcome never depends on fetch order.

The first rule with any keyword contained in the description wins. There is no
scoring: a higher-priority rule matching one keyword beats a lower-priority
rule matching several.

Everything here is pure. Persistence and batching live in
``assofinance.services.categorization``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol
from uuid import UUID


class RuleLike(Protocol):
    """Shape the engine reads from a stored rule."""

    id: UUID
    category_id: UUID
    keywords: list[str]
    transaction_type: str
    priority: int


def normalize_keywords(raw: str | Iterable[str] | None) -> list[str]:
    """Normalize keyword input into the stored form.

    Accepts a comma-separated string or an iterable of strings. Entries are
    trimmed and lowercased; empty entries and duplicates are dropped while
    preserving first-seen order.
    """
    if raw is None:
        return []
    parts = raw.split(",") if isinstance(raw, str) else raw

    keywords: list[str] = []
    for part in parts:
        keyword = (part or "").strip().lower()
        if keyword and keyword not in keywords:
            keywords.append(keyword)
    return keywords


def _evaluation_key(rule: RuleLike) -> tuple[int, str]:
    return (-rule.priority, str(rule.id))


def order_rules(rules: Iterable[RuleLike]) -> list[RuleLike]:
    """Return rules in evaluation order: priority desc, then id asc."""
    return sorted(rules, key=_evaluation_key)


def rule_matches(rule: RuleLike, description: str) -> bool:
    """True when any keyword of ``rule`` is a substring of ``description``.

    ``description`` must already be lowercased.
    """
    return any(kw and kw.lower() in description for kw in rule.keywords)


def match_rule(
    description: str | None,
    transaction_type: str,
    rules: Sequence[RuleLike],
) -> RuleLike | None:
    """Return the first rule matching the description, or None."""
    if not description:
        return None

    text = description.lower()
    candidates = (r for r in rules if r.transaction_type == transaction_type)
    for rule in order_rules(candidates):
        if rule_matches(rule, text):
            return rule
    return None


def match_category(
    description: str | None,
    transaction_type: str,
    rules: Sequence[RuleLike],
) -> UUID | None:
    """Pick a category for a transaction description.

    Args:
        description: Free-text transaction description (may be empty/None).
        transaction_type: "income" or "expense". Rules for the other
            direction are ignored.
        rules: Candidate rules in any order.

    Returns:
        The winning rule's category id, or None when the description is empty
        or no rule matches.
    """
    rule = match_rule(description, transaction_type, rules)
    return rule.category_id if rule is not None else None
