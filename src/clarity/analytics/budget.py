"""Budget status over a rolling period."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Iterable

from clarity.analytics.ledger import ZERO, iso_utc, to_decimal, to_entries
from clarity.analytics.periods import resolve_period_range
from clarity.categorization.rules import EXPENSE

# Utilization is capped here, not at 100%.
MAX_UTILIZATION_PCT = 999.0


@dataclass(frozen=True)
class BudgetStatus:
    amount: Decimal
    period: str
    start_date: str
    end_date: str
    spent: Decimal
    remaining: Decimal
    utilization_pct: float


def utilization_pct(spent: Decimal, amount: Decimal) -> float:
    if amount <= 0:
        return 0.0
    return min(float(spent / amount * 100), MAX_UTILIZATION_PCT)


def compute_budget_status(budget, transactions: Iterable, now: datetime | None = None) -> BudgetStatus:
    """Evaluate a budget against a user's transactions.

    Args:
        budget: Object with ``amount``, ``period`` and ``start_date``.
        transactions: Transaction records or LedgerEntry objects.
        now: Reference time (defaults to the current UTC time).

    Returns:
        BudgetStatus with spend summed over expense transactions inside the
        period window (inclusive on both ends).
    """
    window = resolve_period_range(budget.period, budget.start_date, now=now)
    amount = to_decimal(budget.amount)

    spent = sum(
        (
            entry.amount
            for entry in to_entries(transactions)
            if entry.type == EXPENSE and window.contains(entry.txn_date)
        ),
        ZERO,
    )

    return BudgetStatus(
        amount=amount,
        period=budget.period,
        start_date=iso_utc(window.start),
        end_date=iso_utc(window.end),
        spent=spent,
        remaining=amount - spent,
        utilization_pct=utilization_pct(spent, amount),
    )
