"""
Skill repository - data access for the skill catalog.
"""
from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from career_ladder.models.assessment import Assessment
from career_ladder.models.ladder_config import LadderConfig
from career_ladder.models.skill import Skill
from career_ladder.models.skill_waiver import SkillWaiver
from career_ladder.repositories.base import BaseRepository


@dataclass(frozen=True)
class CascadeDeleteResult:
    skill_deleted: bool
    assessments_deleted: int
    waivers_deleted: int
    ladders_updated: int = 0

    @property
    def anything_deleted(self) -> bool:
        return (
            self.skill_deleted
            or self.assessments_deleted > 0
            or self.waivers_deleted > 0
            or self.ladders_updated > 0
        )


class SkillRepository(BaseRepository[Skill]):
    def __init__(self):
        super().__init__(Skill)

    async def list_filtered(
        self,
        db: AsyncSession,
        *,
        category: Optional[str] = None,
        domain: Optional[str] = None,
        team_id: Optional[UUID] = None,
    ) -> List[Skill]:
        """Catalog, optionally narrowed by category / domain / team. Alphabetical."""
        return await self.find_by(
            db,
            order_by=Skill.name,
            category=category,
            domain=domain,
            team_id=team_id,
        )

    async def existing_ids(
        self,
        db: AsyncSession,
        skill_ids: List[UUID],
    ) -> set[UUID]:
        """Which of the given ids exist in the catalog."""
        if not skill_ids:
            return set()
        result = await db.execute(
            select(Skill.id).where(Skill.id.in_(skill_ids))
        )
        return set(result.scalars().all())

    async def delete_cascade(
        self,
        db: AsyncSession,
        skill_id: UUID,
    ) -> CascadeDeleteResult:
        """
        Delete a skill with every assessment and waiver that references it,
        and drop its id from every ladder configuration.

        Runs in the caller's transaction; nothing is visible to other
        sessions until the caller commits. Safe to re-run.
        """
        assessments = await db.execute(
            delete(Assessment).where(Assessment.skill_id == skill_id)
        )
        waivers = await db.execute(
            delete(SkillWaiver).where(SkillWaiver.skill_id == skill_id)
        )
        ladders_updated = await self._strip_from_ladders(db, skill_id)
        skill_deleted = await self.delete(db, skill_id)

        return CascadeDeleteResult(
            skill_deleted=skill_deleted,
            assessments_deleted=assessments.rowcount or 0,
            waivers_deleted=waivers.rowcount or 0,
            ladders_updated=ladders_updated,
        )

    async def _strip_from_ladders(self, db: AsyncSession, skill_id: UUID) -> int:
        """Remove the id from every level group of every ladder. Returns ladders changed."""
        target = str(skill_id)
        result = await db.execute(select(LadderConfig))
        updated = 0
        for ladder in result.scalars().all():
            levels = ladder.skills_by_level or {}
            cleaned = {
                level: {
                    group: [sid for sid in (ids or []) if str(sid) != target]
                    for group, ids in (entry or {}).items()
                }
                for level, entry in levels.items()
            }
            if cleaned != levels:
                # Reassign so the JSON column is flagged dirty
                ladder.skills_by_level = cleaned
                updated += 1
        if updated:
            await db.flush()
        return updated
