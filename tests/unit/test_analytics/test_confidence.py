"""Unit tests for the data-confidence score."""

from datetime import date, datetime, timezone
from decimal import Decimal

from clarity.analytics.confidence import confidence
from clarity.analytics.ledger import LedgerEntry

NOW = datetime(2026, 10, 10, 12, 0, tzinfo=timezone.utc)


def entry(type_: str, amount: str, category: str, day: date, description: str = "") -> LedgerEntry:
    return LedgerEntry(
        type=type_, amount=Decimal(amount), category=category, txn_date=day, description=description
    )


class TestConfidence:
    def test_empty_month(self):
        report = confidence([], now=NOW)

        assert report.logging_rate == 0.0
        assert report.description_rate == 1.0
        assert report.categorization_quality == 1.0
        assert report.score == 50
        assert report.notes == [
            "0/10 days logged this month",
            "100% transactions have descriptions",
            "100% categorization quality",
        ]

    def test_mixed_month(self):
        transactions = [
            entry("expense", "100", "Food", date(2026, 10, 1), "lunch"),
            entry("expense", "100", "Other", date(2026, 10, 2), "   "),
            entry("income", "1000", "Salary", date(2026, 10, 2), "pay"),
            # Outside the month-to-date window.
            entry("expense", "500", "Other", date(2026, 9, 30)),
            entry("expense", "500", "Other", date(2026, 10, 11)),
        ]

        report = confidence(transactions, now=NOW)

        assert report.logged_days == 2
        assert report.elapsed_days == 10
        assert report.categorization_quality == 0.5
        assert report.score == 40
        assert report.notes == [
            "2/10 days logged this month",
            "67% transactions have descriptions",
            "50% categorization quality",
        ]

    def test_perfect_first_day(self):
        now = datetime(2026, 10, 1, 8, 0, tzinfo=timezone.utc)
        report = confidence([entry("expense", "5", "Food", date(2026, 10, 1), "tea")], now=now)

        assert report.score == 100

    def test_all_other_spend(self):
        transactions = [entry("expense", "10", "Other", date(2026, 10, d), "x") for d in range(1, 11)]

        report = confidence(transactions, now=NOW)

        assert report.categorization_quality == 0.0
        assert report.score == 80

    def test_score_is_bounded_integer(self):
        for transactions in ([], [entry("income", "1", "Salary", date(2026, 10, 3))]):
            score = confidence(transactions, now=NOW).score
            assert isinstance(score, int)
            assert 0 <= score <= 100
