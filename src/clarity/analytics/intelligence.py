"""Dashboard intelligence: every derived view computed from one snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable

from clarity.analytics.confidence import confidence
from clarity.analytics.health import CategoryHealth, category_health
from clarity.analytics.ledger import to_entries, utc_now
from clarity.analytics.summary import explain_summary
from clarity.analytics.trend import TrendPoint, build_month_points, monthly_trend


@dataclass(frozen=True)
class DashboardIntelligence:
    explain_summary: str
    confidence_score: int
    confidence_notes: list[str]
    monthly_trend: list[TrendPoint]
    category_health: list[CategoryHealth]


def build_intelligence(transactions: Iterable, now: datetime | None = None) -> DashboardIntelligence:
    """Compute the dashboard views for one user's transaction history.

    ``now`` is resolved once so every view shares the same notion of today.
    """
    current = utc_now(now)
    entries = to_entries(transactions)
    points = build_month_points(entries, now=current)
    report = confidence(entries, now=current)

    return DashboardIntelligence(
        explain_summary=explain_summary(points),
        confidence_score=report.score,
        confidence_notes=report.notes,
        monthly_trend=monthly_trend(points),
        category_health=category_health(points),
    )
