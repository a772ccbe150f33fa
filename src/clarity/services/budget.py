"""Budget service: one rolling budget per user."""
import logging
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from clarity.analytics.budget import BudgetStatus, compute_budget_status
from clarity.analytics.periods import resolve_period_range
from clarity.repositories.budget import BudgetRepository
from clarity.repositories.transaction import TransactionRepository

logger = logging.getLogger(__name__)


class BudgetService:
    """Service layer for budget operations."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.budget_repo = BudgetRepository(db)
        self.transaction_repo = TransactionRepository(db)

    async def get_status(self, user_id: UUID, now: datetime | None = None) -> BudgetStatus | None:
        """Current budget status, or None when the user has no budget."""
        budget = await self.budget_repo.get_for_user(user_id)
        if budget is None:
            return None
        return await self._status(user_id, budget, now)

    async def upsert(
        self,
        user_id: UUID,
        amount: Decimal,
        period: str,
        now: datetime | None = None,
    ) -> BudgetStatus:
        """Create or replace the user's budget.

        The stored start date is the start of the period window at the time of
        the call; only "now" budgets keep using it afterwards.
        """
        window = resolve_period_range(period, now=now)
        budget = await self.budget_repo.upsert(user_id, amount, period, window.start)
        logger.info("Budget saved", extra={"user_id": str(user_id), "period": period})
        return await self._status(user_id, budget, now)

    async def clear(self, user_id: UUID) -> bool:
        removed = await self.budget_repo.delete_for_user(user_id)
        logger.info("Budget cleared", extra={"user_id": str(user_id), "removed": removed})
        return removed

    async def _status(self, user_id: UUID, budget, now: datetime | None) -> BudgetStatus:
        window = resolve_period_range(budget.period, budget.start_date, now=now)
        transactions = await self.transaction_repo.get_since(user_id, window.start.date())
        return compute_budget_status(budget, transactions, now=now)
