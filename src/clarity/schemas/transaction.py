"""Transaction request/response schemas."""

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from clarity.schemas.common import CategoryName, TransactionType


class TransactionCreateRequest(BaseModel):
    """New income or expense entry."""

    type: TransactionType = Field(description="income or expense")
    amount: Decimal = Field(gt=0, max_digits=14, decimal_places=2)
    category: CategoryName = Field(description="Category the user picked")
    txn_date: date
    description: str = Field("", max_length=500)

    @field_validator("description")
    @classmethod
    def strip_description(cls, value: str) -> str:
        return value.strip()


class TransactionUpdateRequest(BaseModel):
    """Partial update; omitted fields keep their stored value."""

    type: TransactionType | None = None
    amount: Decimal | None = Field(None, gt=0, max_digits=14, decimal_places=2)
    category: CategoryName | None = None
    txn_date: date | None = None
    description: str | None = Field(None, max_length=500)

    @field_validator("description")
    @classmethod
    def strip_description(cls, value: str | None) -> str | None:
        return value.strip() if value is not None else None


class TransactionResponse(BaseModel):
    """Stored transaction with its categorization decision."""

    id: UUID
    type: str
    amount: float
    category: str
    txn_date: date
    description: str
    categorization_reason: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TransactionListResult(BaseModel):
    transactions: list[TransactionResponse]
    total: int


class DashboardTotalsResponse(BaseModel):
    """Income/expense totals for a date range."""

    total_income: float
    total_expense: float
    balance: float
    by_category: dict[str, float]

    model_config = ConfigDict(from_attributes=True)
