"""Transaction endpoints: CRUD plus dashboard totals."""

from datetime import date
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from clarity.api.deps import CurrentUserId, get_db
from clarity.schemas.common import CategoryName, TransactionType
from clarity.schemas.transaction import (
    DashboardTotalsResponse,
    TransactionCreateRequest,
    TransactionListResult,
    TransactionResponse,
    TransactionUpdateRequest,
)
from clarity.services.transaction import TransactionService

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get(
    "",
    response_model=TransactionListResult,
    summary="List transactions with filters",
    description="""
    List the authenticated user's transactions, newest first.

    ## Filters
    - **category**: Only this category
    - **type**: income or expense
    - **start_date**, **end_date**: Inclusive date range
    """,
)
async def list_transactions(
    user_id: CurrentUserId,
    category: Annotated[CategoryName | None, Query(description="Filter by category")] = None,
    type: Annotated[TransactionType | None, Query(description="income or expense")] = None,
    start_date: Annotated[date | None, Query(description="Filter from date (inclusive)")] = None,
    end_date: Annotated[date | None, Query(description="Filter to date (inclusive)")] = None,
    db: AsyncSession = Depends(get_db),
) -> TransactionListResult:
    transactions = await TransactionService(db).list_transactions(
        user_id, category=category, type=type, start_date=start_date, end_date=end_date
    )
    return TransactionListResult(
        transactions=[TransactionResponse.model_validate(t) for t in transactions],
        total=len(transactions),
    )


@router.get(
    "/dashboard",
    response_model=DashboardTotalsResponse,
    summary="Income and expense totals",
    description="Totals and per-category expense for an optional date range.",
)
async def dashboard_totals(
    user_id: CurrentUserId,
    start_date: Annotated[date | None, Query(description="From date (inclusive)")] = None,
    end_date: Annotated[date | None, Query(description="To date (inclusive)")] = None,
    db: AsyncSession = Depends(get_db),
) -> DashboardTotalsResponse:
    totals = await TransactionService(db).dashboard_totals(
        user_id, start_date=start_date, end_date=end_date
    )
    return DashboardTotalsResponse(
        total_income=totals.total_income,
        total_expense=totals.total_expense,
        balance=totals.balance,
        by_category=totals.by_category,
    )


@router.post(
    "",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a transaction",
    description="""
    Log an income or expense entry.

    The stored category is decided by the categorization resolver: an explicit
    category other than "Other" is kept, otherwise the description is matched
    against the keyword table. The decision is returned in
    `categorization_reason`.
    """,
)
async def create_transaction(
    payload: TransactionCreateRequest,
    user_id: CurrentUserId,
    db: AsyncSession = Depends(get_db),
) -> TransactionResponse:
    transaction = await TransactionService(db).create_transaction(user_id, payload)
    return TransactionResponse.model_validate(transaction)


@router.put(
    "/{transaction_id}",
    response_model=TransactionResponse,
    summary="Update a transaction",
)
async def update_transaction(
    transaction_id: UUID,
    payload: TransactionUpdateRequest,
    user_id: CurrentUserId,
    db: AsyncSession = Depends(get_db),
) -> TransactionResponse:
    """
    Partially update a transaction the user owns.

    Args:
        transaction_id: Transaction to update
        payload: Fields to change
        user_id: Authenticated user
        db: Database session

    Returns:
        The updated transaction
    """
    transaction = await TransactionService(db).update_transaction(user_id, transaction_id, payload)
    return TransactionResponse.model_validate(transaction)


@router.delete(
    "/{transaction_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a transaction",
)
async def delete_transaction(
    transaction_id: UUID,
    user_id: CurrentUserId,
    db: AsyncSession = Depends(get_db),
) -> None:
    await TransactionService(db).delete_transaction(user_id, transaction_id)
