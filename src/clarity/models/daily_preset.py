"""Daily preset model: a saved transaction template users apply in one tap."""
from decimal import Decimal
from uuid import UUID

from sqlalchemy import Boolean, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from clarity.models.base import BaseModel


class DailyPreset(BaseModel):
    """Reusable template for a recurring daily income or expense."""

    __tablename__ = "daily_presets"

    user_id: Mapped[UUID] = mapped_column(nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(80), nullable=False)
    type: Mapped[str] = mapped_column(String(16), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    category: Mapped[str] = mapped_column(String(32), nullable=False)
    description: Mapped[str] = mapped_column(String(180), nullable=False, default="")
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        return f"<DailyPreset(id={self.id}, name={self.name}, active={self.active})>"
