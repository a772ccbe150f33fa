from itertools import product

import pytest

from clarity.categorization.rules import (
    CATEGORIES,
    EXPENSE,
    INCOME,
    KEYWORD_TABLE,
    MANUAL_REASON,
    allowed_categories,
    detect_category,
    is_valid_category,
    resolve_category,
)


def test_taxonomy_has_twelve_categories_with_other_last() -> None:
    assert len(CATEGORIES) == 12
    assert CATEGORIES[-1] == "Other"
    assert [category for category, _ in KEYWORD_TABLE] == list(CATEGORIES)


def test_is_valid_category() -> None:
    assert is_valid_category("Food")
    assert not is_valid_category("food")
    assert not is_valid_category("Travel")
    assert not is_valid_category(None)


def test_allowed_categories_by_type() -> None:
    assert allowed_categories(INCOME) == {"Salary", "Freelance", "Investment", "Other"}
    assert "Salary" not in allowed_categories(EXPENSE)
    assert "Other" in allowed_categories(EXPENSE)
    assert len(allowed_categories(EXPENSE)) == 9


def test_detect_category_is_case_insensitive() -> None:
    assert detect_category("NETFLIX Subscription") == ("Entertainment", "netflix")


def test_detect_category_empty_description() -> None:
    assert detect_category("") is None
    assert detect_category(None) is None


def test_detect_category_category_order_wins() -> None:
    # "chocolate" contains "ola" (Transportation) but Food is scanned first.
    assert detect_category("chocolate snack") == ("Food", "snack")


def test_detect_category_keyword_order_within_category() -> None:
    assert detect_category("coffee from swiggy") == ("Food", "swiggy")


def test_detect_category_first_category_beats_later_match() -> None:
    assert detect_category("uber eats food") == ("Food", "food")


def test_rent_with_other_expense_becomes_housing() -> None:
    decision = resolve_category("Other", "I paid rent today", EXPENSE)
    assert decision.category == "Housing"
    assert decision.reason == 'Matched keyword "rent" in description'


def test_salary_keyword_rejected_for_expense() -> None:
    decision = resolve_category("Other", "received salary payment", EXPENSE)
    assert decision.category == "Other"
    assert decision.reason == MANUAL_REASON


def test_income_keyword_accepted_for_income() -> None:
    decision = resolve_category("Other", "Dividend from stocks", INCOME)
    assert decision.category == "Investment"
    assert decision.reason == 'Matched keyword "dividend" in description'


def test_expense_keyword_rejected_for_income() -> None:
    decision = resolve_category("Other", "coffee shop refund", INCOME)
    assert decision.category == "Other"
    assert decision.reason == MANUAL_REASON


def test_explicit_choice_wins_over_keyword() -> None:
    decision = resolve_category("Shopping", "rent for march", EXPENSE)
    assert decision.category == "Shopping"
    assert decision.reason == MANUAL_REASON


def test_explicit_choice_matching_keyword_is_explained() -> None:
    decision = resolve_category("Housing", "rent for march", EXPENSE)
    assert decision.category == "Housing"
    assert decision.reason == 'Matched keyword "rent" in description'


@pytest.mark.parametrize(
    "description",
    ["", "   ", "weekly groceries", "gift for mom", "misc"],
)
def test_no_keyword_always_manual(description: str) -> None:
    for category, transaction_type in product(CATEGORIES, (INCOME, EXPENSE)):
        decision = resolve_category(category, description, transaction_type)
        assert decision.category == category
        assert decision.reason == MANUAL_REASON


@pytest.mark.parametrize(
    "description",
    [
        "I paid rent today",
        "received salary payment",
        "coffee shop refund",
        "Uber to the airport",
        "client payment for logo",
        "chocolate snack",
        "",
    ],
)
def test_re_resolution_is_stable(description: str) -> None:
    for category, transaction_type in product(CATEGORIES, (INCOME, EXPENSE)):
        first = resolve_category(category, description, transaction_type)
        second = resolve_category(first.category, description, transaction_type)
        assert second == first
        assert is_valid_category(first.category)
