"""Unit tests for category health flags."""

from datetime import date, datetime, timezone
from decimal import Decimal

from clarity.analytics.health import (
    GREEN,
    MAX_HEALTH_ITEMS,
    RED,
    YELLOW,
    category_health,
    health_status,
    spend_ratio,
)
from clarity.analytics.ledger import LedgerEntry
from clarity.analytics.trend import build_month_points

NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


def spend(amount: str, category: str, year: int, month: int) -> LedgerEntry:
    return LedgerEntry(
        type="expense", amount=Decimal(amount), category=category, txn_date=date(year, month, 10)
    )


class TestRatioAndStatus:
    def test_status_thresholds(self):
        assert health_status(1.5) == RED
        assert health_status(1.4) == YELLOW
        assert health_status(1.2) == YELLOW
        assert health_status(1.1) == GREEN
        assert health_status(0.0) == GREEN

    def test_ratio_without_history(self):
        assert spend_ratio(Decimal("10"), Decimal("0")) == 2.0
        assert spend_ratio(Decimal("0"), Decimal("0")) == 1.0


class TestCategoryHealth:
    """Test the current month against the trailing three months."""

    def test_flags_and_order(self):
        transactions = [
            spend("100", "Food", 2026, 7),
            spend("100", "Food", 2026, 8),
            spend("100", "Food", 2026, 9),
            spend("150", "Food", 2026, 10),
            spend("90", "Entertainment", 2026, 7),
            spend("90", "Entertainment", 2026, 8),
            spend("90", "Entertainment", 2026, 9),
            spend("105", "Entertainment", 2026, 10),
            spend("50", "Shopping", 2026, 10),
            spend("30", "Transportation", 2026, 9),
            # Outside the trailing window and absent this month.
            spend("500", "Housing", 2026, 5),
        ]

        health = category_health(build_month_points(transactions, now=NOW))

        assert [h.category for h in health] == ["Food", "Entertainment", "Shopping", "Transportation"]
        by_category = {h.category: h for h in health}
        assert by_category["Food"].status == RED
        assert by_category["Food"].trailing_avg == Decimal("100.00")
        assert by_category["Entertainment"].status == YELLOW
        assert by_category["Shopping"].status == RED
        assert by_category["Shopping"].trailing_avg == Decimal("0")
        assert by_category["Transportation"].status == GREEN
        assert by_category["Transportation"].current == Decimal("0")
        assert by_category["Transportation"].trailing_avg == Decimal("10.00")

    def test_trailing_average_is_rounded_to_cents(self):
        transactions = [spend("10", "Food", 2026, 9), spend("5", "Food", 2026, 10)]

        health = category_health(build_month_points(transactions, now=NOW))

        assert health[0].trailing_avg == Decimal("3.33")
        assert health[0].status == RED

    def test_never_more_than_six(self):
        categories = ["Food", "Transportation", "Housing", "Entertainment", "Utilities", "Healthcare", "Shopping"]
        transactions = [spend(str(10 * (i + 1)), c, 2026, 10) for i, c in enumerate(categories)]

        health = category_health(build_month_points(transactions, now=NOW))

        assert len(health) == MAX_HEALTH_ITEMS
        assert "Food" not in {h.category for h in health}
        assert health[0].category == "Shopping"

    def test_ties_follow_taxonomy_order(self):
        transactions = [spend("20", "Shopping", 2026, 10), spend("20", "Food", 2026, 10)]

        health = category_health(build_month_points(transactions, now=NOW))

        assert [h.category for h in health] == ["Food", "Shopping"]

    def test_empty_history(self):
        assert category_health(build_month_points([], now=NOW)) == []
        assert category_health([]) == []
