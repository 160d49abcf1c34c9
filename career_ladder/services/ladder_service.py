"""
Ladder service - per (team, domain) level requirements.
"""
from typing import Dict, List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from career_ladder.core.exceptions import (
    BadRequestException,
    LadderConfigExistsException,
    LadderConfigNotFoundException,
)
from career_ladder.core.logging import get_logger
from career_ladder.models.ladder_config import LadderConfig
from career_ladder.models.team import Team
from career_ladder.repositories.ladder_repository import LadderRepository
from career_ladder.repositories.skill_repository import SkillRepository
from career_ladder.schemas.ladder import (
    LadderConfigCreate,
    LadderConfigResponse,
    LadderConfigUpdate,
    LevelSkills,
)
from career_ladder.services.access_service import AccessService, SessionContext
from career_ladder.services.progress import LEVEL_SKILL_GROUPS
from career_ladder.services.team_service import TeamService

logger = get_logger(__name__)


def serialize_levels(skills_by_level: Dict[int, LevelSkills]) -> Dict[str, Dict[str, List[str]]]:
    """To the JSON column layout: string level keys, string skill ids."""
    return {
        str(level): {
            group: [str(skill_id) for skill_id in getattr(skills, group)]
            for group in LEVEL_SKILL_GROUPS
        }
        for level, skills in sorted(skills_by_level.items())
    }


def to_ladder_response(ladder: LadderConfig) -> LadderConfigResponse:
    levels: Dict[int, LevelSkills] = {}
    for key, entry in (ladder.skills_by_level or {}).items():
        levels[int(key)] = LevelSkills(**{
            group: (entry or {}).get(group) or [] for group in LEVEL_SKILL_GROUPS
        })
    return LadderConfigResponse(
        id=ladder.id,
        team_id=ladder.team_id,
        domain=ladder.domain,
        skills_by_level=dict(sorted(levels.items())),
        created_at=ladder.created_at,
        updated_at=ladder.updated_at,
    )


class LadderService:
    def __init__(self):
        self.ladder_repo = LadderRepository()
        self.skill_repo = SkillRepository()
        self.team_service = TeamService()
        self.access = AccessService()

    async def list_for_team(
        self,
        db: AsyncSession,
        team_id: UUID,
    ) -> List[LadderConfigResponse]:
        await self.team_service.get_team(db, team_id)
        ladders = await self.ladder_repo.list_for_team(db, team_id)
        return [to_ladder_response(ladder) for ladder in ladders]

    async def get_ladder(
        self,
        db: AsyncSession,
        ladder_id: UUID,
    ) -> LadderConfig:
        ladder = await self.ladder_repo.get_by_id(db, ladder_id)
        if not ladder:
            raise LadderConfigNotFoundException()
        return ladder

    async def get_for_team_and_domain(
        self,
        db: AsyncSession,
        team_id: UUID,
        domain: str,
    ) -> LadderConfigResponse:
        ladder = await self.ladder_repo.find_for_team_and_domain(db, team_id, domain.lower())
        if not ladder:
            raise LadderConfigNotFoundException()
        return to_ladder_response(ladder)

    async def create_ladder(
        self,
        db: AsyncSession,
        session: SessionContext,
        data: LadderConfigCreate,
    ) -> LadderConfigResponse:
        """
        Raises:
            TeamNotFoundException: Unknown team.
            BadRequestException: Domain not declared by the team, or unknown skill ids.
            LadderConfigExistsException: The pair already has a ladder.
        """
        self.access.ensure_admin(session)
        team = await self.team_service.get_team(db, data.team_id)
        self._check_domain(team, data.domain)

        if await self.ladder_repo.find_for_team_and_domain(db, team.id, data.domain):
            raise LadderConfigExistsException()
        await self._check_skills_exist(db, data.skills_by_level)

        ladder = await self.ladder_repo.create(
            db,
            team_id=team.id,
            domain=data.domain,
            skills_by_level=serialize_levels(data.skills_by_level),
        )
        await db.commit()

        logger.info("ladder_created", ladder_id=str(ladder.id), team_id=str(team.id), domain=data.domain)
        return to_ladder_response(ladder)

    async def update_ladder(
        self,
        db: AsyncSession,
        session: SessionContext,
        ladder_id: UUID,
        data: LadderConfigUpdate,
    ) -> LadderConfigResponse:
        self.access.ensure_admin(session)
        ladder = await self.get_ladder(db, ladder_id)
        await self._check_skills_exist(db, data.skills_by_level)

        ladder = await self.ladder_repo.update(
            db,
            ladder,
            skills_by_level=serialize_levels(data.skills_by_level),
        )
        await db.commit()

        logger.info("ladder_updated", ladder_id=str(ladder_id))
        return to_ladder_response(ladder)

    async def delete_ladder(
        self,
        db: AsyncSession,
        session: SessionContext,
        ladder_id: UUID,
    ) -> None:
        self.access.ensure_admin(session)
        if not await self.ladder_repo.delete(db, ladder_id):
            raise LadderConfigNotFoundException()
        await db.commit()
        logger.info("ladder_deleted", ladder_id=str(ladder_id))

    @staticmethod
    def _check_domain(team: Team, domain: str) -> None:
        if domain not in (team.domains or []):
            raise BadRequestException(f"Domain '{domain}' is not one of the team's domains")

    async def _check_skills_exist(
        self,
        db: AsyncSession,
        skills_by_level: Dict[int, LevelSkills],
    ) -> None:
        wanted = {skill_id for skills in skills_by_level.values() for skill_id in skills.all_ids()}
        existing = await self.skill_repo.existing_ids(db, list(wanted))
        missing = sorted(str(skill_id) for skill_id in wanted - existing)
        if missing:
            raise BadRequestException(f"Unknown skill ids: {', '.join(missing)}")
