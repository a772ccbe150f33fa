"""Deterministic transaction categorization.

Users pick a category when they log a transaction, but many leave it on
"Other". On every write we scan the description for well-known keywords and,
when it is safe to do so, replace "Other" with the detected category. The
decision is stored together with a short human-readable reason so the UI can
explain why a transaction landed where it did.

Re-resolving a stored transaction with its stored category never changes it.
"""

from __future__ import annotations

from dataclasses import dataclass

INCOME = "income"
EXPENSE = "expense"
TRANSACTION_TYPES: tuple[str, ...] = (INCOME, EXPENSE)

OTHER = "Other"

# Public taxonomy. The order is also the keyword scan order.
CATEGORIES: tuple[str, ...] = (
    "Food",
    "Transportation",
    "Housing",
    "Entertainment",
    "Utilities",
    "Healthcare",
    "Shopping",
    "Education",
    "Salary",
    "Freelance",
    "Investment",
    OTHER,
)

INCOME_CATEGORIES: frozenset[str] = frozenset({"Salary", "Freelance", "Investment"})

MANUAL_REASON = "Selected manually"

# Ordering matters: categories are scanned top to bottom, keywords left to
# right, and the first substring hit wins.
KEYWORD_TABLE: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Food", ("zomato", "swiggy", "restaurant", "dining", "snack", "coffee", "food")),
    ("Transportation", ("uber", "ola", "bus", "metro", "taxi", "fuel", "petrol", "train")),
    ("Housing", ("rent", "landlord", "maintenance", "mortgage")),
    ("Entertainment", ("movie", "netflix", "spotify", "concert", "game")),
    ("Utilities", ("electricity", "water bill", "internet", "wifi", "gas bill", "phone bill")),
    ("Healthcare", ("doctor", "clinic", "medicine", "pharmacy", "hospital")),
    ("Shopping", ("amazon", "flipkart", "store", "mall", "shopping")),
    ("Education", ("course", "tuition", "book", "college", "exam fee")),
    ("Salary", ("salary", "payroll", "paycheck")),
    ("Freelance", ("freelance", "client payment", "project fee")),
    ("Investment", ("dividend", "interest", "mutual fund", "stocks", "sip")),
    (OTHER, ()),
)


@dataclass(frozen=True)
class CategoryDecision:
    """Category to persist plus the reason shown to the user."""

    category: str
    reason: str


def matched_reason(keyword: str) -> str:
    return f'Matched keyword "{keyword}" in description'


def is_valid_category(category: str | None) -> bool:
    return category in CATEGORIES


def category_order(category: str) -> int:
    """Position in the taxonomy; unknown labels sort last."""
    try:
        return CATEGORIES.index(category)
    except ValueError:
        return len(CATEGORIES)


def allowed_categories(transaction_type: str) -> frozenset[str]:
    """Categories a keyword match may assign for the given transaction type.

    Income may only land in the income categories (or Other); expenses may
    land anywhere except the income categories.
    """
    if transaction_type == INCOME:
        return INCOME_CATEGORIES | {OTHER}
    return frozenset(CATEGORIES) - INCOME_CATEGORIES


def detect_category(description: str | None) -> tuple[str, str] | None:
    """Return the first (category, keyword) whose keyword occurs in the text."""
    normalized = (description or "").lower()
    if not normalized:
        return None

    for category, keywords in KEYWORD_TABLE:
        for keyword in keywords:
            if keyword in normalized:
                return category, keyword

    return None


def resolve_category(
    selected_category: str,
    description: str | None,
    transaction_type: str,
) -> CategoryDecision:
    """Decide the stored category for a transaction and explain why.

    Args:
        selected_category: Category the user picked (already validated).
        description: Free-text description, may be empty.
        transaction_type: "income" or "expense" (already validated).

    Returns:
        CategoryDecision. An explicit non-"Other" choice always wins; a
        keyword match only replaces "Other", and only with a category that
        fits the transaction type.
    """
    detected = detect_category(description)
    if detected is None:
        return CategoryDecision(selected_category, MANUAL_REASON)

    category, keyword = detected

    if selected_category == OTHER and category in allowed_categories(transaction_type):
        return CategoryDecision(category, matched_reason(keyword))

    if category == selected_category:
        return CategoryDecision(selected_category, matched_reason(keyword))

    return CategoryDecision(selected_category, MANUAL_REASON)
