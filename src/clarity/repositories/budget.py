"""Budget repository: one budget row per user."""
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from clarity.models.base import utcnow
from clarity.models.budget import Budget
from clarity.repositories.base import BaseRepository

_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class BudgetRepository(BaseRepository[Budget]):
    """Repository for Budget model keyed by user."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Budget)

    async def get_for_user(self, user_id: UUID) -> Budget | None:
        result = await self.db.execute(
            select(Budget)
            .where(Budget.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def upsert(
        self, user_id: UUID, amount: Decimal, period: str, start_date: datetime
    ) -> Budget:
        """Create the user's budget or replace the existing one.

        A single INSERT ... ON CONFLICT (user_id) DO UPDATE, so concurrent
        first-time saves for the same user end with one row holding the
        last write.
        """
        insert = _UPSERT_INSERTS[self.db.get_bind().dialect.name]
        stmt = insert(Budget).values(
            user_id=user_id, amount=amount, period=period, start_date=start_date
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[Budget.user_id],
            set_={
                "amount": stmt.excluded.amount,
                "period": stmt.excluded.period,
                "start_date": stmt.excluded.start_date,
                "updated_at": utcnow(),
            },
        )
        await self.db.execute(stmt)
        await self.db.commit()
        return await self.get_for_user(user_id)

    async def delete_for_user(self, user_id: UUID) -> bool:
        """Delete the user's budget. Returns True when a row was removed."""
        result = await self.db.execute(delete(Budget).where(Budget.user_id == user_id))
        await self.db.commit()
        return result.rowcount > 0
