"""Daily preset service: saved templates that become transactions on demand."""
import logging
from datetime import date, datetime
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from clarity.analytics.ledger import utc_now
from clarity.core.exceptions import NotFoundError, ValidationError
from clarity.models.daily_preset import DailyPreset
from clarity.models.transaction import Transaction
from clarity.repositories.daily_preset import DailyPresetRepository
from clarity.schemas.daily_preset import DailyPresetCreateRequest, DailyPresetUpdateRequest
from clarity.schemas.transaction import TransactionCreateRequest
from clarity.services.transaction import TransactionService

logger = logging.getLogger(__name__)


class DailyPresetService:
    """Service layer for daily presets."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = DailyPresetRepository(db)
        self.transactions = TransactionService(db)

    async def list_presets(self, user_id: UUID) -> list[DailyPreset]:
        return await self.repo.list_for_user(user_id)

    async def create_preset(self, user_id: UUID, payload: DailyPresetCreateRequest) -> DailyPreset:
        name = payload.name.strip()
        if not name:
            raise ValidationError("PRE_003", details={"field": "name"})

        return await self.repo.create(
            DailyPreset(
                user_id=user_id,
                name=name,
                type=payload.type,
                amount=payload.amount,
                category=payload.category,
                description=payload.description.strip(),
                active=payload.active,
            )
        )

    async def update_preset(
        self, user_id: UUID, preset_id: UUID, payload: DailyPresetUpdateRequest
    ) -> DailyPreset:
        """Apply a partial update after validating the merged preset.

        Raises:
            NotFoundError: If the preset does not belong to the user
            ValidationError: If the merged name ends up empty
        """
        preset = await self.repo.get_by_user(user_id, preset_id)
        if preset is None:
            raise NotFoundError("PRE_001", details={"preset_id": str(preset_id)})

        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        if "name" in changes:
            changes["name"] = changes["name"].strip()
            if not changes["name"]:
                raise ValidationError("PRE_003", details={"field": "name"})
        if "description" in changes:
            changes["description"] = changes["description"].strip()

        return await self.repo.update(preset, changes)

    async def delete_preset(self, user_id: UUID, preset_id: UUID) -> None:
        preset = await self.repo.get_by_user(user_id, preset_id)
        if preset is None:
            raise NotFoundError("PRE_001", details={"preset_id": str(preset_id)})
        await self.repo.delete(preset)

    async def apply_preset(
        self,
        user_id: UUID,
        preset_id: UUID,
        txn_date: date | None = None,
        now: datetime | None = None,
    ) -> Transaction:
        """Log a transaction from an active preset.

        The description is the preset's description, or its name when the
        description is empty; the category goes through the resolver like any
        other write.

        Raises:
            NotFoundError: If no active preset with that id belongs to the user
        """
        preset = await self.repo.get_active(user_id, preset_id)
        if preset is None:
            raise NotFoundError("PRE_002", details={"preset_id": str(preset_id)})

        transaction = await self.transactions.create_transaction(
            user_id,
            TransactionCreateRequest(
                type=preset.type,
                amount=preset.amount,
                category=preset.category,
                txn_date=txn_date or utc_now(now).date(),
                description=preset.description or preset.name,
            ),
        )
        logger.info("Preset applied", extra={"user_id": str(user_id), "preset_id": str(preset_id)})
        return transaction
