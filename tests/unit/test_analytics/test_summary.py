"""Unit tests for the plain-language monthly summary."""

from datetime import date, datetime, timezone
from decimal import Decimal

from clarity.analytics.ledger import LedgerEntry
from clarity.analytics.summary import (
    NEGATIVE_BALANCE,
    NO_ACTIVITY_SUMMARY,
    NON_NEGATIVE_BALANCE,
    explain_summary,
)
from clarity.analytics.trend import build_month_points

NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


def entry(type_: str, amount: str, category: str, day: date) -> LedgerEntry:
    return LedgerEntry(type=type_, amount=Decimal(amount), category=category, txn_date=day)


def summarize(transactions) -> str:
    return explain_summary(build_month_points(transactions, now=NOW))


class TestExplainSummary:
    def test_no_activity(self):
        assert summarize([]) == NO_ACTIVITY_SUMMARY

    def test_income_only_is_no_activity(self):
        assert summarize([entry("income", "100", "Salary", date(2026, 10, 1))]) == NO_ACTIVITY_SUMMARY

    def test_percentage_increase(self):
        transactions = [
            entry("expense", "100", "Food", date(2026, 9, 5)),
            entry("expense", "150", "Food", date(2026, 10, 5)),
            entry("income", "200", "Salary", date(2026, 10, 1)),
        ]

        assert summarize(transactions) == (
            "Food spending is 50% more than last month. "
            "Overall expenses increased from 100.00 last month to 150.00 this month. "
            + NON_NEGATIVE_BALANCE
        )

    def test_started_spending(self):
        transactions = [
            entry("expense", "42.5", "Food", date(2026, 10, 5)),
            entry("expense", "10", "Shopping", date(2026, 9, 5)),
        ]

        summary = summarize(transactions)

        assert summary.startswith("You started spending on Food this month with 42.50.")
        assert "Overall expenses increased from 10.00 last month to 42.50 this month." in summary
        assert summary.endswith(NEGATIVE_BALANCE)

    def test_falls_back_to_previous_month_category(self):
        transactions = [entry("expense", "80", "Shopping", date(2026, 9, 5))]

        assert summarize(transactions) == (
            "Shopping spending is 100% less than last month. "
            "Overall expenses improved from 80.00 last month to 0.00 this month. "
            + NON_NEGATIVE_BALANCE
        )

    def test_percentage_rounds_half_up(self):
        transactions = [
            entry("expense", "200", "Food", date(2026, 9, 5)),
            entry("expense", "201", "Food", date(2026, 10, 5)),
        ]

        # 0.5% rounds up to 1%.
        assert summarize(transactions).startswith("Food spending is 1% more than last month.")

    def test_large_amounts_use_thousands_separator(self):
        transactions = [
            entry("expense", "1500", "Housing", date(2026, 9, 5)),
            entry("expense", "1200", "Housing", date(2026, 10, 5)),
        ]

        summary = summarize(transactions)

        assert "Housing spending is 20% less than last month." in summary
        assert "improved from 1,500.00 last month to 1,200.00 this month." in summary
