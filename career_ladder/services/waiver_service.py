"""
Waiver service - excusing a user from a skill at and above a level.
"""
from typing import Dict, List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from career_ladder.core.exceptions import (
    SkillNotFoundException,
    UserNotFoundException,
    WaiverNotFoundException,
)
from career_ladder.core.logging import get_logger
from career_ladder.models.base import utcnow
from career_ladder.models.skill_waiver import SkillWaiver
from career_ladder.models.user import User
from career_ladder.repositories.skill_repository import SkillRepository
from career_ladder.repositories.user_repository import UserRepository
from career_ladder.repositories.waiver_repository import WaiverRepository
from career_ladder.schemas.assessment import WaiverCreate, WaiverResponse
from career_ladder.services.access_service import AccessService, SessionContext

logger = get_logger(__name__)


def to_waiver_response(waiver: SkillWaiver, skill_names: Dict[UUID, str]) -> WaiverResponse:
    response = WaiverResponse.model_validate(waiver)
    response.skill_name = skill_names.get(waiver.skill_id)
    return response


class WaiverService:
    def __init__(self):
        self.waiver_repo = WaiverRepository()
        self.skill_repo = SkillRepository()
        self.user_repo = UserRepository()
        self.access = AccessService()

    async def _get_member(self, db: AsyncSession, user_id: UUID) -> User:
        user = await self.user_repo.get_by_id(db, user_id)
        if not user:
            raise UserNotFoundException()
        return user

    async def list_for_user(
        self,
        db: AsyncSession,
        session: SessionContext,
        user_id: UUID,
    ) -> List[WaiverResponse]:
        """A user's waivers with skill names attached."""
        member = await self._get_member(db, user_id)
        await self.access.ensure_can_view_member(db, session, member)

        waivers = await self.waiver_repo.list_for_user(db, user_id)
        skills = await self.skill_repo.find_by(db)
        names = {s.id: s.name for s in skills}
        return [to_waiver_response(w, names) for w in waivers]

    async def create_waiver(
        self,
        db: AsyncSession,
        session: SessionContext,
        user_id: UUID,
        data: WaiverCreate,
    ) -> WaiverResponse:
        member = await self._get_member(db, user_id)
        await self.access.ensure_can_manage_member(db, session, member)

        skill = await self.skill_repo.get_by_id(db, data.skill_id)
        if not skill:
            raise SkillNotFoundException()

        waiver = await self.waiver_repo.create(
            db,
            user_id=user_id,
            skill_id=skill.id,
            level=data.level,
            waived_by=session.user_id,
            reason=data.reason,
            waived_at=utcnow(),
        )
        await db.commit()

        logger.info(
            "waiver_created",
            user_id=str(user_id),
            skill_id=str(skill.id),
            level=data.level,
            waived_by=str(session.user_id),
        )
        return to_waiver_response(waiver, {skill.id: skill.name})

    async def delete_waiver(
        self,
        db: AsyncSession,
        session: SessionContext,
        waiver_id: UUID,
    ) -> None:
        waiver = await self.waiver_repo.get_by_id(db, waiver_id)
        if not waiver:
            raise WaiverNotFoundException()

        member = await self._get_member(db, waiver.user_id)
        await self.access.ensure_can_manage_member(db, session, member)

        await self.waiver_repo.delete(db, waiver_id)
        await db.commit()

        logger.info("waiver_deleted", waiver_id=str(waiver_id), user_id=str(waiver.user_id))
