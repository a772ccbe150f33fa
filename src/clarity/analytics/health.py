"""Category health: this month's spend against the trailing three months."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from clarity.analytics.ledger import ZERO, money
from clarity.analytics.trend import MonthPoint
from clarity.categorization.rules import category_order

TRAILING_MONTHS = 3
MAX_HEALTH_ITEMS = 6
RED_RATIO = 1.4
YELLOW_RATIO = 1.1

GREEN = "green"
YELLOW = "yellow"
RED = "red"


@dataclass(frozen=True)
class CategoryHealth:
    category: str
    current: Decimal
    trailing_avg: Decimal
    status: str


def spend_ratio(current: Decimal, trailing_avg: Decimal) -> float:
    if trailing_avg > 0:
        return float(current / trailing_avg)
    # New spend with no history reads as elevated.
    return 2.0 if current > 0 else 1.0


def health_status(ratio: float) -> str:
    if ratio > RED_RATIO:
        return RED
    if ratio > YELLOW_RATIO:
        return YELLOW
    return GREEN


def category_health(points: list[MonthPoint]) -> list[CategoryHealth]:
    """Flag categories whose current-month spend runs above their trailing average.

    ``points`` must be ordered oldest first with the current month last.
    """
    if not points:
        return []

    current_point = points[-1]
    trailing = points[-(TRAILING_MONTHS + 1):-1]
    denominator = Decimal(max(len(trailing), 1))

    categories = set(current_point.by_category)
    for point in trailing:
        categories.update(point.by_category)

    items: list[CategoryHealth] = []
    for category in categories:
        current = current_point.category_expense(category)
        trailing_avg = sum((p.category_expense(category) for p in trailing), ZERO) / denominator
        if current == 0 and trailing_avg == 0:
            continue
        items.append(
            CategoryHealth(
                category=category,
                current=current,
                trailing_avg=money(trailing_avg),
                status=health_status(spend_ratio(current, trailing_avg)),
            )
        )

    items.sort(key=lambda item: (-item.current, category_order(item.category)))
    return items[:MAX_HEALTH_ITEMS]
