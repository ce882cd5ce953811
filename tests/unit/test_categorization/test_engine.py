from uuid import UUID, uuid4

from assofinance.categorization import match_category, order_rules
from assofinance.schemas.internal import RuleSnapshot

FOOD = uuid4()
FEES = uuid4()
CARD = uuid4()
DUES = uuid4()


def make_rule(keywords, category_id, transaction_type="expense", priority=1, rule_id=None):
    return RuleSnapshot(
        id=rule_id or uuid4(),
        category_id=category_id,
        keywords=keywords,
        transaction_type=transaction_type,
        priority=priority,
    )


def test_match_supermarket_expense() -> None:
    rules = [make_rule(["supermarché", "courses"], FOOD, priority=5)]
    assert match_category("CB SUPERMARCHÉ CARREFOUR", "expense", rules) == FOOD


def test_higher_priority_wins_when_both_match() -> None:
    rules = [
        make_rule(["paiement"], FEES, priority=1),
        make_rule(["carte"], CARD, priority=8),
    ]
    assert match_category("PAIEMENT PAR CARTE", "expense", rules) == CARD


def test_input_order_does_not_change_result() -> None:
    low = make_rule(["paiement"], FEES, priority=1)
    high = make_rule(["carte"], CARD, priority=8)
    assert match_category("PAIEMENT PAR CARTE", "expense", [low, high]) == CARD
    assert match_category("PAIEMENT PAR CARTE", "expense", [high, low]) == CARD


def test_no_scoring_on_number_of_matched_keywords() -> None:
    rules = [
        make_rule(["paiement", "par", "carte"], FEES, priority=1),
        make_rule(["carte"], CARD, priority=2),
    ]
    assert match_category("PAIEMENT PAR CARTE", "expense", rules) == CARD


def test_empty_description_never_matches() -> None:
    rules = [make_rule(["cotisation"], DUES, transaction_type="income")]
    assert match_category("", "income", rules) is None
    assert match_category(None, "income", rules) is None


def test_rules_for_other_type_are_ignored() -> None:
    rules = [make_rule(["cotisation"], DUES, transaction_type="income")]
    assert match_category("COTISATION ANNUELLE", "expense", rules) is None
    assert match_category("COTISATION ANNUELLE", "income", rules) == DUES


def test_no_rule_matches() -> None:
    rules = [make_rule(["supermarché"], FOOD)]
    assert match_category("VIREMENT LOYER", "expense", rules) is None


def test_empty_rule_set() -> None:
    assert match_category("CB SUPERMARCHÉ", "expense", []) is None


def test_matching_is_case_insensitive_substring() -> None:
    rules = [make_rule(["carrefour"], FOOD)]
    assert match_category("cb CarreFOUR market 12/03", "expense", rules) == FOOD


def test_equal_priority_tie_broken_by_rule_id() -> None:
    first = make_rule(["carte"], CARD, priority=3, rule_id=UUID("00000000-0000-0000-0000-000000000001"))
    second = make_rule(["paiement"], FEES, priority=3, rule_id=UUID("ffffffff-0000-0000-0000-000000000000"))
    assert match_category("PAIEMENT PAR CARTE", "expense", [second, first]) == CARD
    assert match_category("PAIEMENT PAR CARTE", "expense", [first, second]) == CARD


def test_order_rules_priority_desc_then_id() -> None:
    a = make_rule(["a"], FOOD, priority=1, rule_id=UUID("00000000-0000-0000-0000-00000000000a"))
    b = make_rule(["b"], FOOD, priority=9, rule_id=UUID("00000000-0000-0000-0000-00000000000b"))
    c = make_rule(["c"], FOOD, priority=1, rule_id=UUID("00000000-0000-0000-0000-000000000001"))
    assert [r.id for r in order_rules([a, b, c])] == [b.id, c.id, a.id]
