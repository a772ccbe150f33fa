"""Budget request/response schemas."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from clarity.analytics.periods import BUDGET_PERIODS


class BudgetUpsertRequest(BaseModel):
    """Create or replace the user's budget."""

    amount: Decimal = Field(gt=0, max_digits=14, decimal_places=2)
    period: str = Field("month", description="now, week or month")

    @field_validator("period")
    @classmethod
    def check_period(cls, value: str) -> str:
        if value not in BUDGET_PERIODS:
            raise ValueError("period must be one of: now, week, month")
        return value


class BudgetStatusResponse(BaseModel):
    """Budget evaluated up to the end of today."""

    amount: float
    period: str
    start_date: str = Field(description="Window start (ISO-8601, UTC)")
    end_date: str = Field(description="Window end (ISO-8601, UTC)")
    spent: float
    remaining: float
    utilization_pct: float = Field(description="spent / amount * 100, capped at 999")

    model_config = ConfigDict(from_attributes=True)


class BudgetEnvelope(BaseModel):
    budget: BudgetStatusResponse | None
