"""Daily preset repository with user-scoped queries."""
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from clarity.models.daily_preset import DailyPreset
from clarity.repositories.base import BaseRepository


class DailyPresetRepository(BaseRepository[DailyPreset]):
    """Repository for DailyPreset model."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, DailyPreset)

    async def list_for_user(self, user_id: UUID) -> list[DailyPreset]:
        """Active presets first, then most recently updated."""
        result = await self.db.execute(
            select(DailyPreset)
            .where(DailyPreset.user_id == user_id)
            .order_by(DailyPreset.active.desc(), DailyPreset.updated_at.desc())
        )
        return list(result.scalars().all())

    async def get_active(self, user_id: UUID, preset_id: UUID) -> DailyPreset | None:
        result = await self.db.execute(
            select(DailyPreset).where(
                DailyPreset.id == preset_id,
                DailyPreset.user_id == user_id,
                DailyPreset.active.is_(True),
            )
        )
        return result.scalar_one_or_none()
