"""Daily preset endpoints: saved templates for recurring entries."""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from clarity.api.deps import CurrentUserId, get_db
from clarity.schemas.daily_preset import (
    DailyPresetApplyRequest,
    DailyPresetCreateRequest,
    DailyPresetListResult,
    DailyPresetResponse,
    DailyPresetUpdateRequest,
)
from clarity.schemas.transaction import TransactionResponse
from clarity.services.daily_preset import DailyPresetService

router = APIRouter(prefix="/daily-presets", tags=["daily-presets"])


@router.get(
    "",
    response_model=DailyPresetListResult,
    summary="List presets",
    description="Active presets first, then most recently updated.",
)
async def list_presets(
    user_id: CurrentUserId,
    db: AsyncSession = Depends(get_db),
) -> DailyPresetListResult:
    presets = await DailyPresetService(db).list_presets(user_id)
    return DailyPresetListResult(presets=[DailyPresetResponse.model_validate(p) for p in presets])


@router.post(
    "",
    response_model=DailyPresetResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a preset",
)
async def create_preset(
    payload: DailyPresetCreateRequest,
    user_id: CurrentUserId,
    db: AsyncSession = Depends(get_db),
) -> DailyPresetResponse:
    preset = await DailyPresetService(db).create_preset(user_id, payload)
    return DailyPresetResponse.model_validate(preset)


@router.put(
    "/{preset_id}",
    response_model=DailyPresetResponse,
    summary="Update a preset",
)
async def update_preset(
    preset_id: UUID,
    payload: DailyPresetUpdateRequest,
    user_id: CurrentUserId,
    db: AsyncSession = Depends(get_db),
) -> DailyPresetResponse:
    preset = await DailyPresetService(db).update_preset(user_id, preset_id, payload)
    return DailyPresetResponse.model_validate(preset)


@router.delete(
    "/{preset_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a preset",
)
async def delete_preset(
    preset_id: UUID,
    user_id: CurrentUserId,
    db: AsyncSession = Depends(get_db),
) -> None:
    await DailyPresetService(db).delete_preset(user_id, preset_id)


@router.post(
    "/{preset_id}/apply",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Log a transaction from a preset",
    description="""
    Create a transaction from an active preset.

    The transaction date defaults to today (UTC). Its category is resolved the
    same way as a manually created transaction.
    """,
)
async def apply_preset(
    preset_id: UUID,
    user_id: CurrentUserId,
    payload: DailyPresetApplyRequest | None = None,
    db: AsyncSession = Depends(get_db),
) -> TransactionResponse:
    txn_date = payload.txn_date if payload else None
    transaction = await DailyPresetService(db).apply_preset(user_id, preset_id, txn_date=txn_date)
    return TransactionResponse.model_validate(transaction)
