"""
Waiver repository - data access for SkillWaiver entity.
"""
from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from career_ladder.models.skill_waiver import SkillWaiver
from career_ladder.repositories.base import BaseRepository


class WaiverRepository(BaseRepository[SkillWaiver]):
    def __init__(self):
        super().__init__(SkillWaiver)

    async def list_for_user(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> List[SkillWaiver]:
        """A user's waivers, newest first."""
        return await self.find_by(
            db,
            order_by=SkillWaiver.waived_at.desc(),
            user_id=user_id,
        )

    async def list_for_users(
        self,
        db: AsyncSession,
        user_ids: List[UUID],
    ) -> List[SkillWaiver]:
        if not user_ids:
            return []
        result = await db.execute(
            select(SkillWaiver)
            .where(SkillWaiver.user_id.in_(user_ids))
            .order_by(SkillWaiver.waived_at.desc())
        )
        return list(result.scalars().all())
