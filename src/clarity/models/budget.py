"""Budget model: at most one spending budget per user."""
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import DateTime, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from clarity.models.base import BaseModel


class Budget(BaseModel):
    """Spending budget evaluated over a rolling now/week/month window."""

    __tablename__ = "budgets"

    user_id: Mapped[UUID] = mapped_column(nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    period: Mapped[str] = mapped_column(String(16), nullable=False, default="month")
    # Only meaningful for "now" budgets; week/month windows move with today.
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    __table_args__ = (UniqueConstraint("user_id", name="uq_budgets_user_id"),)

    def __repr__(self) -> str:
        return f"<Budget(id={self.id}, user_id={self.user_id}, period={self.period}, amount={self.amount})>"
