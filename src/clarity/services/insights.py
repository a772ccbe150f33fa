"""Insights service: dashboard intelligence and daily advice."""
from datetime import date, datetime
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from clarity.analytics.intelligence import DashboardIntelligence, build_intelligence
from clarity.analytics.ledger import shift_month, utc_now
from clarity.analytics.trend import TREND_MONTHS
from clarity.repositories.transaction import TransactionRepository
from clarity.services.advice import AdviceClient, DailyAdvice, daily_advice


class InsightsService:
    """Service layer for analytics read models."""

    def __init__(self, db: AsyncSession, advice_client: AdviceClient | None = None):
        self.db = db
        self.repo = TransactionRepository(db)
        self.advice_client = advice_client

    async def dashboard_intelligence(
        self, user_id: UUID, now: datetime | None = None
    ) -> DashboardIntelligence:
        """Compute dashboard views over the trailing six calendar months."""
        current = utc_now(now)
        year, month = shift_month(current.year, current.month, -(TREND_MONTHS - 1))
        transactions = await self.repo.get_since(user_id, date(year, month, 1))
        return build_intelligence(transactions, now=current)

    async def daily_summary(
        self, user_id: UUID, day: date | None = None, now: datetime | None = None
    ) -> DailyAdvice:
        """Advice for one UTC day, today when ``day`` is not given."""
        target = day or utc_now(now).date()

        transactions = await self.repo.list_for_user(user_id, start_date=target, end_date=target)
        return await daily_advice(target, transactions, client=self.advice_client)
