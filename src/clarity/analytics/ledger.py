"""Plain records and time helpers shared by the analytics functions.

All analytics run in UTC: "today" is the UTC calendar day of ``now`` and
transactions are bucketed by their stored calendar day.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

ZERO = Decimal("0")
CENT = Decimal("0.01")

_END_OF_DAY = time(23, 59, 59, 999000)


@dataclass(frozen=True)
class LedgerEntry:
    """One transaction as seen by the analytics (no ORM state)."""

    type: str
    amount: Decimal
    category: str
    txn_date: date
    description: str = ""

    @classmethod
    def from_record(cls, record) -> "LedgerEntry":
        """Build an entry from any object exposing the transaction fields."""
        return cls(
            type=record.type,
            amount=to_decimal(record.amount),
            category=record.category,
            txn_date=record.txn_date,
            description=record.description or "",
        )


def to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_entries(records: Iterable) -> list[LedgerEntry]:
    return [r if isinstance(r, LedgerEntry) else LedgerEntry.from_record(r) for r in records]


def utc_now(now: datetime | None = None) -> datetime:
    """Return ``now`` as an aware UTC datetime (defaults to the current time).

    Naive datetimes are taken to already be in UTC.
    """
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def start_of_day(day: date | datetime) -> datetime:
    if isinstance(day, datetime):
        day = utc_now(day).date()
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def end_of_day(day: date | datetime) -> datetime:
    if isinstance(day, datetime):
        day = utc_now(day).date()
    return datetime.combine(day, _END_OF_DAY, tzinfo=timezone.utc)


def iso_utc(moment: datetime) -> str:
    """ISO-8601 with millisecond precision and a trailing Z."""
    return utc_now(moment).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def round_half_up(value: float | Decimal) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def money(value: Decimal) -> Decimal:
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def format_amount(value: Decimal) -> str:
    return f"{money(value):,.2f}"


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move (year, month) by ``delta`` calendar months."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1
