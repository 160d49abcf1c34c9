"""
Assessment service - proficiency tags on (user, skill) pairs.
"""
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from career_ladder.core.exceptions import SkillNotFoundException, UserNotFoundException
from career_ladder.core.logging import get_logger
from career_ladder.models.user import User
from career_ladder.repositories.assessment_repository import AssessmentRepository
from career_ladder.repositories.skill_repository import SkillRepository
from career_ladder.repositories.user_repository import UserRepository
from career_ladder.schemas.assessment import AssessmentResponse, AssessmentUpsert
from career_ladder.services.access_service import AccessService, SessionContext

logger = get_logger(__name__)


class AssessmentService:
    def __init__(self):
        self.assessment_repo = AssessmentRepository()
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
    ) -> List[AssessmentResponse]:
        member = await self._get_member(db, user_id)
        await self.access.ensure_can_view_member(db, session, member)

        assessments = await self.assessment_repo.list_for_user(db, user_id)
        return [AssessmentResponse.model_validate(a) for a in assessments]

    async def upsert(
        self,
        db: AsyncSession,
        session: SessionContext,
        user_id: UUID,
        skill_id: UUID,
        data: AssessmentUpsert,
    ) -> AssessmentResponse:
        """
        Record the assessor's tag for one skill, replacing any earlier one.

        A concurrent first assessment of the same pair surfaces as a
        retryable 409 from the unique constraint.
        """
        member = await self._get_member(db, user_id)
        await self.access.ensure_can_manage_member(db, session, member)

        if not await self.skill_repo.get_by_id(db, skill_id):
            raise SkillNotFoundException()

        assessment = await self.assessment_repo.upsert(
            db,
            user_id=user_id,
            skill_id=skill_id,
            level=data.level.value,
            assessed_by=session.user_id,
            notes=data.notes,
        )
        await db.commit()

        logger.info(
            "assessment_upserted",
            user_id=str(user_id),
            skill_id=str(skill_id),
            level=data.level.value,
            assessed_by=str(session.user_id),
        )
        return AssessmentResponse.model_validate(assessment)
