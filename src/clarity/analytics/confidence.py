"""Data-confidence score for the current month.

The score tells users how much to trust the dashboard: it rewards logging on
most days, writing descriptions, and avoiding the catch-all "Other" category.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable

from clarity.analytics.ledger import ZERO, round_half_up, to_entries, utc_now
from clarity.categorization.rules import EXPENSE, OTHER

LOGGING_WEIGHT = 0.5
DESCRIPTION_WEIGHT = 0.3
CATEGORIZATION_WEIGHT = 0.2


@dataclass(frozen=True)
class ConfidenceReport:
    score: int
    logging_rate: float
    description_rate: float
    categorization_quality: float
    logged_days: int
    elapsed_days: int

    @property
    def notes(self) -> list[str]:
        return [
            f"{self.logged_days}/{self.elapsed_days} days logged this month",
            f"{round_half_up(self.description_rate * 100)}% transactions have descriptions",
            f"{round_half_up(self.categorization_quality * 100)}% categorization quality",
        ]


def confidence(transactions: Iterable, now: datetime | None = None) -> ConfidenceReport:
    """Score month-to-date data completeness on a 0-100 scale.

    Args:
        transactions: Transaction records or LedgerEntry objects (any dates;
            only the current month up to today is considered).
        now: Reference time (defaults to the current UTC time).
    """
    today = utc_now(now).date()
    month_start = today.replace(day=1)
    entries = [e for e in to_entries(transactions) if month_start <= e.txn_date <= today]

    elapsed_days = (today - month_start).days + 1
    logged_days = len({e.txn_date for e in entries})
    logging_rate = logged_days / elapsed_days if elapsed_days > 0 else 0.0

    if entries:
        described = sum(1 for e in entries if e.description.strip())
        description_rate = described / len(entries)
    else:
        description_rate = 1.0

    expenses = [e for e in entries if e.type == EXPENSE]
    total_expense = sum((e.amount for e in expenses), ZERO)
    if total_expense > 0:
        other_expense = sum((e.amount for e in expenses if e.category == OTHER), ZERO)
        categorization_quality = max(0.0, 1 - float(other_expense / total_expense))
    else:
        categorization_quality = 1.0

    raw = (
        logging_rate * LOGGING_WEIGHT
        + description_rate * DESCRIPTION_WEIGHT
        + categorization_quality * CATEGORIZATION_WEIGHT
    )
    score = min(max(round_half_up(raw * 100), 0), 100)

    return ConfidenceReport(
        score=score,
        logging_rate=logging_rate,
        description_rate=description_rate,
        categorization_quality=categorization_quality,
        logged_days=logged_days,
        elapsed_days=elapsed_days,
    )
