"""Insight endpoints: dashboard intelligence and daily advice."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from clarity.api.deps import CurrentUserId, get_advice_client, get_db
from clarity.schemas.insights import (
    CategoryHealthResponse,
    DailyAdviceResponse,
    DailySummaryRequest,
    DashboardIntelligenceResponse,
    TrendPointResponse,
)
from clarity.services.advice import AdviceClient
from clarity.services.insights import InsightsService

router = APIRouter(prefix="/insights", tags=["insights"])


@router.get(
    "/dashboard-intelligence",
    response_model=DashboardIntelligenceResponse,
    summary="Dashboard intelligence",
    description="""
    Derived views over the last six calendar months (UTC):

    - **explain_summary**: one-paragraph comparison with last month
    - **confidence_score**: 0-100 data completeness for this month
    - **monthly_trend**: income and expense per month, oldest first
    - **category_health**: this month vs. the trailing three-month average
    """,
)
async def dashboard_intelligence(
    user_id: CurrentUserId,
    db: AsyncSession = Depends(get_db),
) -> DashboardIntelligenceResponse:
    result = await InsightsService(db).dashboard_intelligence(user_id)
    return DashboardIntelligenceResponse(
        explain_summary=result.explain_summary,
        confidence_score=result.confidence_score,
        confidence_notes=result.confidence_notes,
        monthly_trend=[TrendPointResponse.model_validate(p) for p in result.monthly_trend],
        category_health=[CategoryHealthResponse.model_validate(h) for h in result.category_health],
    )


@router.post(
    "/daily-summary",
    response_model=DailyAdviceResponse,
    summary="Daily advice",
    description="""
    Summary and do/avoid advice for one day (default today, UTC).

    Uses the configured OpenRouter model when available and falls back to
    rule-based advice otherwise; `source` tells which one answered.
    """,
)
async def daily_summary(
    user_id: CurrentUserId,
    payload: DailySummaryRequest | None = None,
    db: AsyncSession = Depends(get_db),
    advice_client: AdviceClient | None = Depends(get_advice_client),
) -> DailyAdviceResponse:
    day = payload.day if payload else None
    advice = await InsightsService(db, advice_client=advice_client).daily_summary(user_id, day)
    return DailyAdviceResponse.model_validate(advice)
