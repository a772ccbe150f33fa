"""Period analytics over a user's transaction history.

Everything in this package is a pure function over already-fetched records:
no database access, no clock reads except through the optional ``now``
argument, and no shared state.
"""

from .budget import BudgetStatus, compute_budget_status
from .confidence import ConfidenceReport, confidence
from .health import CategoryHealth, category_health
from .intelligence import DashboardIntelligence, build_intelligence
from .ledger import LedgerEntry
from .periods import BUDGET_PERIODS, PeriodRange, resolve_period_range
from .summary import explain_summary
from .totals import Totals, summarize
from .trend import MonthPoint, TrendPoint, build_month_points, monthly_trend

__all__ = [
    "BUDGET_PERIODS",
    "BudgetStatus",
    "CategoryHealth",
    "ConfidenceReport",
    "DashboardIntelligence",
    "LedgerEntry",
    "MonthPoint",
    "PeriodRange",
    "Totals",
    "TrendPoint",
    "build_intelligence",
    "build_month_points",
    "category_health",
    "compute_budget_status",
    "confidence",
    "explain_summary",
    "monthly_trend",
    "resolve_period_range",
    "summarize",
]
