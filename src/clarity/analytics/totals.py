"""Income/expense totals for the dashboard cards and the daily advice."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable

from clarity.analytics.ledger import ZERO, to_entries
from clarity.categorization.rules import EXPENSE, INCOME, category_order


@dataclass(frozen=True)
class Totals:
    total_income: Decimal
    total_expense: Decimal
    balance: Decimal
    by_category: dict[str, Decimal] = field(default_factory=dict)

    def top_categories(self, limit: int = 3) -> list[tuple[str, Decimal]]:
        ranked = sorted(self.by_category.items(), key=lambda item: (-item[1], category_order(item[0])))
        return ranked[:limit]


def summarize(transactions: Iterable) -> Totals:
    """Sum income and expense (and expense per category)."""
    income = ZERO
    expense = ZERO
    by_category: dict[str, Decimal] = {}

    for entry in to_entries(transactions):
        if entry.type == INCOME:
            income += entry.amount
        elif entry.type == EXPENSE:
            expense += entry.amount
            by_category[entry.category] = by_category.get(entry.category, ZERO) + entry.amount

    return Totals(
        total_income=income,
        total_expense=expense,
        balance=income - expense,
        by_category=by_category,
    )
