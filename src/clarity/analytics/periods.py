"""Budget period windows.

A budget is always evaluated up to the end of the current day; only the start
of the window depends on the period.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from clarity.analytics.ledger import end_of_day, start_of_day, utc_now
from clarity.core.exceptions import InvalidPeriodError

PERIOD_NOW = "now"
PERIOD_WEEK = "week"
PERIOD_MONTH = "month"
BUDGET_PERIODS: tuple[str, ...] = (PERIOD_NOW, PERIOD_WEEK, PERIOD_MONTH)


@dataclass(frozen=True)
class PeriodRange:
    start: datetime
    end: datetime

    def contains(self, moment) -> bool:
        """Inclusive check for a date or datetime."""
        if isinstance(moment, datetime):
            return self.start <= utc_now(moment) <= self.end
        return self.start.date() <= moment <= self.end.date()


def resolve_period_range(
    period: str,
    explicit_start: datetime | None = None,
    now: datetime | None = None,
) -> PeriodRange:
    """Compute [start, end] for a budget period.

    - week: most recent Monday 00:00 to today 23:59:59.999
    - month: first of the month 00:00 to today 23:59:59.999
    - now: the stored start (or today) 00:00 to today 23:59:59.999

    Raises:
        InvalidPeriodError: If ``period`` is not one of now/week/month.
    """
    current = utc_now(now)
    today = current.date()

    if period == PERIOD_WEEK:
        # weekday(): Monday is 0, Sunday is 6 (so Sunday backs up six days).
        start = start_of_day(today - timedelta(days=today.weekday()))
    elif period == PERIOD_MONTH:
        start = start_of_day(today.replace(day=1))
    elif period == PERIOD_NOW:
        start = start_of_day(explicit_start if explicit_start is not None else today)
    else:
        raise InvalidPeriodError(period)

    return PeriodRange(start=start, end=end_of_day(today))
