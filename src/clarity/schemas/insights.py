"""Dashboard intelligence and daily advice schemas."""

import datetime
import re

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

ISO_DAY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _is_iso_day(value: str) -> bool:
    if not ISO_DAY.match(value):
        return False
    try:
        datetime.date.fromisoformat(value)
    except ValueError:
        return False
    return True


class TrendPointResponse(BaseModel):
    month: str = Field(description="Month label, e.g. 'Oct 2026'")
    income: float
    expense: float

    model_config = ConfigDict(from_attributes=True)


class CategoryHealthResponse(BaseModel):
    category: str
    current: float
    trailing_avg: float
    status: str = Field(description="green, yellow or red")

    model_config = ConfigDict(from_attributes=True)


class DashboardIntelligenceResponse(BaseModel):
    explain_summary: str
    confidence_score: int = Field(ge=0, le=100)
    confidence_notes: list[str]
    monthly_trend: list[TrendPointResponse]
    category_health: list[CategoryHealthResponse]

    model_config = ConfigDict(from_attributes=True)


class DailySummaryRequest(BaseModel):
    date: str | None = Field(None, description="YYYY-MM-DD, defaults to today (UTC)")

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str | None) -> str | None:
        """Require an exact YYYY-MM-DD calendar date; errors carry INS_001."""
        if v is not None and not _is_iso_day(v):
            raise PydanticCustomError("INS_001", "Invalid date. Expected YYYY-MM-DD.")
        return v

    @property
    def day(self) -> datetime.date | None:
        return datetime.date.fromisoformat(self.date) if self.date else None


class DailyAdviceResponse(BaseModel):
    date: str
    income: float
    expense: float
    balance: float
    brief_summary: str
    do_list: list[str]
    avoid_list: list[str]
    source: str = Field(description="ai or fallback")

    model_config = ConfigDict(from_attributes=True)
