"""Plain-language explanation of this month's spending."""

from __future__ import annotations

from decimal import Decimal

from clarity.analytics.ledger import ZERO, format_amount, round_half_up
from clarity.analytics.trend import MonthPoint
from clarity.categorization.rules import category_order

NO_ACTIVITY_SUMMARY = (
    "No expense activity recorded this month or last month yet. "
    "Log a few transactions to unlock spending insights."
)
NON_NEGATIVE_BALANCE = "Your balance this month is non-negative, so income is covering spending."
NEGATIVE_BALANCE = "Your balance this month is negative, so spending is outpacing income."


def top_category(point: MonthPoint) -> str | None:
    """Largest expense category of a month (ties go to taxonomy order)."""
    spending = [(category, amount) for category, amount in point.by_category.items() if amount > 0]
    if not spending:
        return None
    spending.sort(key=lambda item: (-item[1], category_order(item[0])))
    return spending[0][0]


def category_change_sentence(category: str, current: Decimal, previous: Decimal) -> str:
    if previous == 0:
        return f"You started spending on {category} this month with {format_amount(current)}."
    pct = round_half_up(abs(current - previous) / previous * 100)
    direction = "more" if current - previous >= 0 else "less"
    return f"{category} spending is {pct}% {direction} than last month."


def total_change_sentence(current: Decimal, previous: Decimal) -> str:
    trend = "increased" if current > previous else "improved"
    return (
        f"Overall expenses {trend} from {format_amount(previous)} last month "
        f"to {format_amount(current)} this month."
    )


def explain_summary(points: list[MonthPoint]) -> str:
    """Three-sentence summary comparing the current month with the previous one.

    ``points`` must be ordered oldest first with the current month last.
    """
    if not points:
        return NO_ACTIVITY_SUMMARY

    current = points[-1]
    previous = points[-2] if len(points) > 1 else None
    category = top_category(current) or (top_category(previous) if previous else None)
    if category is None:
        return NO_ACTIVITY_SUMMARY

    previous_category = previous.category_expense(category) if previous else ZERO
    previous_total = previous.expense if previous else ZERO
    balance = current.income - current.expense

    return " ".join(
        [
            category_change_sentence(category, current.category_expense(category), previous_category),
            total_change_sentence(current.expense, previous_total),
            NON_NEGATIVE_BALANCE if balance >= 0 else NEGATIVE_BALANCE,
        ]
    )
