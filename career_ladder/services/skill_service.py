"""
Skill service - catalog management.
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from career_ladder.core.exceptions import (
    BadRequestException,
    SkillNotFoundException,
    TeamNotFoundException,
)
from career_ladder.core.logging import get_logger
from career_ladder.models.skill import Skill, SkillCategory
from career_ladder.repositories.skill_repository import SkillRepository
from career_ladder.repositories.team_repository import TeamRepository
from career_ladder.schemas.skill import (
    SkillCreate,
    SkillDeleteResponse,
    SkillResponse,
    SkillUpdate,
    check_category_fields,
)
from career_ladder.services.access_service import AccessService, SessionContext

logger = get_logger(__name__)


class SkillService:
    """Handles reading and administering the skill catalog."""

    def __init__(self):
        self.skill_repo = SkillRepository()
        self.team_repo = TeamRepository()
        self.access = AccessService()

    async def list_skills(
        self,
        db: AsyncSession,
        *,
        category: Optional[SkillCategory] = None,
        domain: Optional[str] = None,
        team_id: Optional[UUID] = None,
    ) -> List[SkillResponse]:
        skills = await self.skill_repo.list_filtered(
            db,
            category=category.value if category else None,
            domain=domain.lower() if domain else None,
            team_id=team_id,
        )
        return [SkillResponse.model_validate(s) for s in skills]

    async def get_skill(
        self,
        db: AsyncSession,
        skill_id: UUID,
    ) -> Skill:
        skill = await self.skill_repo.get_by_id(db, skill_id)
        if not skill:
            raise SkillNotFoundException()
        return skill

    async def create_skill(
        self,
        db: AsyncSession,
        session: SessionContext,
        data: SkillCreate,
    ) -> SkillResponse:
        self.access.ensure_admin(session)
        if data.team_id is not None:
            await self._ensure_team_exists(db, data.team_id)

        skill = await self.skill_repo.create(
            db,
            name=data.name,
            description=data.description,
            category=data.category.value,
            domain=data.domain,
            team_id=data.team_id,
            applicable_levels=data.applicable_levels,
        )
        await db.commit()

        logger.info("skill_created", skill_id=str(skill.id), category=skill.category)
        return SkillResponse.model_validate(skill)

    async def update_skill(
        self,
        db: AsyncSession,
        session: SessionContext,
        skill_id: UUID,
        data: SkillUpdate,
    ) -> SkillResponse:
        """
        Partial update. The merged record must still satisfy the category
        rules (e.g. switching to ``team`` requires a team and drops the domain).
        """
        self.access.ensure_admin(session)
        skill = await self.get_skill(db, skill_id)

        updates = data.model_dump(exclude_unset=True)
        for field in ("name", "description", "category", "applicable_levels"):
            if field in updates and updates[field] is None:
                del updates[field]
        if "domain" in updates and updates["domain"] is not None:
            updates["domain"] = updates["domain"].strip().lower() or None

        category = SkillCategory(updates.get("category", skill.category))
        domain = updates["domain"] if "domain" in updates else skill.domain
        team_id = updates["team_id"] if "team_id" in updates else skill.team_id
        try:
            check_category_fields(category, domain, team_id)
        except ValueError as e:
            raise BadRequestException(str(e))

        if "team_id" in updates and updates["team_id"] is not None:
            await self._ensure_team_exists(db, updates["team_id"])
        if "category" in updates:
            updates["category"] = category.value

        skill = await self.skill_repo.update(db, skill, **updates)
        await db.commit()
        return SkillResponse.model_validate(skill)

    async def delete_skill(
        self,
        db: AsyncSession,
        session: SessionContext,
        skill_id: UUID,
    ) -> SkillDeleteResponse:
        """
        Delete a skill and every assessment, waiver and ladder entry that
        references it, in one transaction.

        Re-running for a skill that is already gone still clears orphans; it
        is only "not found" when there was nothing at all to remove.
        """
        self.access.ensure_admin(session)

        result = await self.skill_repo.delete_cascade(db, skill_id)
        if not result.anything_deleted:
            await db.rollback()
            raise SkillNotFoundException()
        await db.commit()

        logger.info(
            "skill_deleted",
            skill_id=str(skill_id),
            skill_deleted=result.skill_deleted,
            assessments_deleted=result.assessments_deleted,
            waivers_deleted=result.waivers_deleted,
            ladders_updated=result.ladders_updated,
        )
        return SkillDeleteResponse(
            skill_id=skill_id,
            assessments_deleted=result.assessments_deleted,
            waivers_deleted=result.waivers_deleted,
            ladders_updated=result.ladders_updated,
        )

    async def _ensure_team_exists(self, db: AsyncSession, team_id: UUID) -> None:
        if not await self.team_repo.get_by_id(db, team_id):
            raise TeamNotFoundException()
