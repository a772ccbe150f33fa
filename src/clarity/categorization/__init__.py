"""Transaction categorization utilities.

Deterministic, local categorization of transactions from their descriptions.
"""

from .rules import CATEGORIES, CategoryDecision, detect_category, resolve_category

__all__ = ["CATEGORIES", "CategoryDecision", "detect_category", "resolve_category"]
