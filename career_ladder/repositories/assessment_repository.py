"""
Assessment repository - data access for Assessment entity.
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from career_ladder.models.assessment import Assessment
from career_ladder.models.base import utcnow
from career_ladder.repositories.base import BaseRepository


class AssessmentRepository(BaseRepository[Assessment]):
    def __init__(self):
        super().__init__(Assessment)

    async def list_for_user(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> List[Assessment]:
        """A user's assessments, most recently assessed first."""
        return await self.find_by(
            db,
            order_by=Assessment.assessed_at.desc(),
            user_id=user_id,
        )

    async def list_for_users(
        self,
        db: AsyncSession,
        user_ids: List[UUID],
    ) -> List[Assessment]:
        """Assessments for several users in one query."""
        if not user_ids:
            return []
        result = await db.execute(
            select(Assessment)
            .where(Assessment.user_id.in_(user_ids))
            .order_by(Assessment.assessed_at.desc())
        )
        return list(result.scalars().all())

    async def find_for_user_and_skill(
        self,
        db: AsyncSession,
        user_id: UUID,
        skill_id: UUID,
    ) -> Optional[Assessment]:
        """First assessment for the (user, skill) pair, if any."""
        result = await db.execute(
            select(Assessment)
            .where(
                Assessment.user_id == user_id,
                Assessment.skill_id == skill_id,
            )
            .order_by(Assessment.created_at)
            .limit(1)
        )
        return result.scalars().first()

    async def upsert(
        self,
        db: AsyncSession,
        *,
        user_id: UUID,
        skill_id: UUID,
        level: str,
        assessed_by: UUID,
        notes: Optional[str] = None,
    ) -> Assessment:
        """
        Insert or overwrite the assessment for (user, skill).

        Read-then-write: the unique constraint on (user_id, skill_id) turns a
        concurrent duplicate insert into an IntegrityError at flush.
        """
        existing = await self.find_for_user_and_skill(db, user_id, skill_id)
        now = utcnow()

        if existing is None:
            return await self.create(
                db,
                user_id=user_id,
                skill_id=skill_id,
                level=level,
                assessed_by=assessed_by,
                notes=notes,
                assessed_at=now,
            )

        return await self.update(
            db,
            existing,
            level=level,
            assessed_by=assessed_by,
            notes=notes,
            assessed_at=now,
        )
