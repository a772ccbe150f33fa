"""Transaction service: writes go through the category resolver."""
import logging
from datetime import date
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from clarity.analytics.totals import Totals, summarize
from clarity.categorization.rules import CategoryDecision, is_valid_category, resolve_category
from clarity.core.exceptions import InvalidCategoryError, NotFoundError
from clarity.models.transaction import Transaction
from clarity.repositories.transaction import TransactionRepository
from clarity.schemas.transaction import TransactionCreateRequest, TransactionUpdateRequest

logger = logging.getLogger(__name__)


class TransactionService:
    """Service layer for transaction operations."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = TransactionRepository(db)

    async def list_transactions(
        self,
        user_id: UUID,
        category: str | None = None,
        type: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[Transaction]:
        return await self.repo.list_for_user(
            user_id, category=category, type=type, start_date=start_date, end_date=end_date
        )

    async def create_transaction(
        self, user_id: UUID, payload: TransactionCreateRequest
    ) -> Transaction:
        """Create a transaction, letting the resolver pick the stored category.

        Args:
            user_id: Owner of the transaction
            payload: Validated request body

        Returns:
            The persisted transaction
        """
        decision = _resolve(payload.category, payload.description, payload.type)
        transaction = await self.repo.create(
            Transaction(
                user_id=user_id,
                type=payload.type,
                amount=payload.amount,
                category=decision.category,
                txn_date=payload.txn_date,
                description=payload.description,
                categorization_reason=decision.reason,
            )
        )
        logger.info(
            "Transaction created",
            extra={
                "user_id": str(user_id),
                "selected_category": payload.category,
                "category": decision.category,
            },
        )
        return transaction

    async def update_transaction(
        self, user_id: UUID, transaction_id: UUID, payload: TransactionUpdateRequest
    ) -> Transaction:
        """Apply a partial update.

        The category is re-resolved whenever the update touches the category,
        the description or the type; the stored category is the selection
        when the request does not name one.

        Raises:
            NotFoundError: If the transaction does not belong to the user
            InvalidCategoryError: If the category to re-resolve is outside the taxonomy
        """
        transaction = await self._get_owned(user_id, transaction_id)
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)

        decision = None
        if {"category", "description", "type"} & changes.keys():
            decision = _resolve(
                changes.get("category", transaction.category),
                changes.get("description", transaction.description),
                changes.get("type", transaction.type),
            )

        for field in ("type", "amount", "txn_date", "description"):
            if field in changes:
                setattr(transaction, field, changes[field])
        if decision is not None:
            transaction.category = decision.category
            transaction.categorization_reason = decision.reason

        return await self.repo.save(transaction)

    async def delete_transaction(self, user_id: UUID, transaction_id: UUID) -> None:
        transaction = await self._get_owned(user_id, transaction_id)
        await self.repo.delete(transaction)
        logger.info("Transaction deleted", extra={"user_id": str(user_id)})

    async def dashboard_totals(
        self,
        user_id: UUID,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> Totals:
        transactions = await self.repo.list_for_user(
            user_id, start_date=start_date, end_date=end_date
        )
        return summarize(transactions)

    async def _get_owned(self, user_id: UUID, transaction_id: UUID) -> Transaction:
        transaction = await self.repo.get_by_user(user_id, transaction_id)
        if transaction is None:
            raise NotFoundError("TXN_001", details={"transaction_id": str(transaction_id)})
        return transaction


def _resolve(category: str, description: str | None, transaction_type: str) -> CategoryDecision:
    # The resolver trusts its input; rows stored before the taxonomy closed can still hold others.
    if not is_valid_category(category):
        raise InvalidCategoryError(category)
    return resolve_category(category, description, transaction_type)
