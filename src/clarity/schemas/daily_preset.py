"""Daily preset request/response schemas."""

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from clarity.schemas.common import CategoryName, TransactionType


class DailyPresetCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=80)
    type: TransactionType
    amount: Decimal = Field(gt=0, max_digits=14, decimal_places=2)
    category: CategoryName
    description: str = Field("", max_length=180)
    active: bool = True


class DailyPresetUpdateRequest(BaseModel):
    name: str | None = Field(None, max_length=80)
    type: TransactionType | None = None
    amount: Decimal | None = Field(None, gt=0, max_digits=14, decimal_places=2)
    category: CategoryName | None = None
    description: str | None = Field(None, max_length=180)
    active: bool | None = None


class DailyPresetApplyRequest(BaseModel):
    txn_date: date | None = Field(None, description="Defaults to today (UTC)")


class DailyPresetResponse(BaseModel):
    id: UUID
    name: str
    type: str
    amount: float
    category: str
    description: str
    active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class DailyPresetListResult(BaseModel):
    presets: list[DailyPresetResponse]
