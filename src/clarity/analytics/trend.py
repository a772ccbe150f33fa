"""Calendar-month buckets and the six-month income/expense trend."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable

from clarity.analytics.ledger import ZERO, shift_month, to_entries, utc_now
from clarity.categorization.rules import EXPENSE, INCOME

TREND_MONTHS = 6


@dataclass
class MonthPoint:
    """Totals for one calendar month."""

    key: str
    label: str
    income: Decimal = ZERO
    expense: Decimal = ZERO
    by_category: dict[str, Decimal] = field(default_factory=dict)

    def category_expense(self, category: str) -> Decimal:
        return self.by_category.get(category, ZERO)


@dataclass(frozen=True)
class TrendPoint:
    month: str
    income: Decimal
    expense: Decimal


def month_key(day: date) -> str:
    return f"{day.year:04d}-{day.month:02d}"


def build_month_points(
    transactions: Iterable,
    now: datetime | None = None,
    months: int = TREND_MONTHS,
) -> list[MonthPoint]:
    """Bucket transactions into ``months`` consecutive months ending this month.

    The result is ordered oldest first and always has ``months`` entries, even
    when there are no transactions at all.
    """
    today = utc_now(now).date()
    points: list[MonthPoint] = []
    for offset in range(months - 1, -1, -1):
        year, month = shift_month(today.year, today.month, -offset)
        first = date(year, month, 1)
        points.append(MonthPoint(key=month_key(first), label=first.strftime("%b %Y")))

    by_key = {point.key: point for point in points}
    for entry in to_entries(transactions):
        point = by_key.get(month_key(entry.txn_date))
        if point is None:
            continue
        if entry.type == INCOME:
            point.income += entry.amount
        elif entry.type == EXPENSE:
            point.expense += entry.amount
            point.by_category[entry.category] = point.category_expense(entry.category) + entry.amount

    return points


def monthly_trend(points: list[MonthPoint]) -> list[TrendPoint]:
    return [TrendPoint(month=p.label, income=p.income, expense=p.expense) for p in points]
