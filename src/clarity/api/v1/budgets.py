"""Budget endpoints: one rolling budget per user."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from clarity.api.deps import CurrentUserId, get_db
from clarity.schemas.budget import BudgetEnvelope, BudgetStatusResponse, BudgetUpsertRequest
from clarity.schemas.common import MessageResponse
from clarity.services.budget import BudgetService

router = APIRouter(prefix="/budgets", tags=["budgets"])


@router.get(
    "/current",
    response_model=BudgetEnvelope,
    summary="Current budget status",
    description="""
    The user's budget evaluated up to the end of today (UTC).

    Returns `{"budget": null}` when no budget is set.
    """,
)
async def get_current_budget(
    user_id: CurrentUserId,
    db: AsyncSession = Depends(get_db),
) -> BudgetEnvelope:
    budget_status = await BudgetService(db).get_status(user_id)
    if budget_status is None:
        return BudgetEnvelope(budget=None)
    return BudgetEnvelope(budget=BudgetStatusResponse.model_validate(budget_status))


@router.post(
    "/current",
    response_model=BudgetEnvelope,
    summary="Create or replace the budget",
    description="""
    Store a budget for the period `now`, `week` or `month`.

    - **now**: spending since the moment the budget is saved
    - **week**: spending since Monday of the current week
    - **month**: spending since the first of the current month
    """,
)
async def upsert_budget(
    payload: BudgetUpsertRequest,
    user_id: CurrentUserId,
    db: AsyncSession = Depends(get_db),
) -> BudgetEnvelope:
    budget_status = await BudgetService(db).upsert(user_id, payload.amount, payload.period)
    return BudgetEnvelope(budget=BudgetStatusResponse.model_validate(budget_status))


@router.delete(
    "/current",
    response_model=MessageResponse,
    summary="Remove the budget",
)
async def clear_budget(
    user_id: CurrentUserId,
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    removed = await BudgetService(db).clear(user_id)
    return MessageResponse(message="Budget cleared" if removed else "No budget set")
