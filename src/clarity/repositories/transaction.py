"""Transaction repository with user-scoped filtering queries."""
from datetime import date
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from clarity.models.transaction import Transaction
from clarity.repositories.base import BaseRepository


class TransactionRepository(BaseRepository[Transaction]):
    """Repository for Transaction model with filtering queries."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Transaction)

    async def list_for_user(
        self,
        user_id: UUID,
        category: str | None = None,
        type: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[Transaction]:
        """List a user's transactions, newest first, with optional filters."""
        query = select(Transaction).where(Transaction.user_id == user_id)
        if category:
            query = query.where(Transaction.category == category)
        if type:
            query = query.where(Transaction.type == type)
        if start_date:
            query = query.where(Transaction.txn_date >= start_date)
        if end_date:
            query = query.where(Transaction.txn_date <= end_date)

        result = await self.db.execute(
            query.order_by(Transaction.txn_date.desc(), Transaction.created_at.desc())
        )
        return list(result.scalars().all())

    async def get_since(self, user_id: UUID, start_date: date) -> list[Transaction]:
        """All of a user's transactions dated on or after ``start_date``."""
        result = await self.db.execute(
            select(Transaction)
            .where(Transaction.user_id == user_id, Transaction.txn_date >= start_date)
            .order_by(Transaction.txn_date.asc(), Transaction.created_at.asc())
        )
        return list(result.scalars().all())
