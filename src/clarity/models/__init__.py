"""Database models."""
from clarity.models.budget import Budget
from clarity.models.daily_preset import DailyPreset
from clarity.models.transaction import Transaction

__all__ = ["Budget", "DailyPreset", "Transaction"]
