"""
Team service - team listing and admin management.
"""
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from career_ladder.core.exceptions import TeamNotFoundException, UserNotFoundException
from career_ladder.core.logging import get_logger
from career_ladder.models.team import Team
from career_ladder.repositories.team_repository import TeamRepository
from career_ladder.repositories.user_repository import UserRepository
from career_ladder.schemas.team import TeamCreate, TeamResponse, TeamUpdate
from career_ladder.services.access_service import AccessService, SessionContext

logger = get_logger(__name__)


class TeamService:
    """Handles team listing and management."""

    def __init__(self):
        self.team_repo = TeamRepository()
        self.user_repo = UserRepository()
        self.access = AccessService()

    async def get_team(
        self,
        db: AsyncSession,
        team_id: UUID,
    ) -> Team:
        team = await self.team_repo.get_by_id(db, team_id)
        if not team:
            raise TeamNotFoundException()
        return team

    async def list_teams(
        self,
        db: AsyncSession,
    ) -> List[TeamResponse]:
        """
        All teams with member counts.

        Teams are a small, bounded set, so there is no pagination.
        """
        teams = await self.team_repo.list_all(db)
        counts = await self.user_repo.count_by_team(db)
        return [self.to_response(team, counts.get(team.id, 0)) for team in teams]

    async def get_team_response(
        self,
        db: AsyncSession,
        team_id: UUID,
    ) -> TeamResponse:
        team = await self.get_team(db, team_id)
        counts = await self.user_repo.count_by_team(db)
        return self.to_response(team, counts.get(team.id, 0))

    async def create_team(
        self,
        db: AsyncSession,
        session: SessionContext,
        data: TeamCreate,
    ) -> TeamResponse:
        self.access.ensure_admin(session)
        if data.leader_id is not None:
            await self._ensure_user_exists(db, data.leader_id)

        team = await self.team_repo.create(
            db,
            name=data.name,
            leader_id=data.leader_id,
            domains=data.domains,
        )
        await db.commit()

        logger.info("team_created", team_id=str(team.id), name=team.name)
        return self.to_response(team, 0)

    async def update_team(
        self,
        db: AsyncSession,
        session: SessionContext,
        team_id: UUID,
        data: TeamUpdate,
    ) -> TeamResponse:
        """
        Partial update. Changing ``domains`` does not move existing members;
        a member whose domain was dropped keeps it until reassigned.
        """
        self.access.ensure_admin(session)
        team = await self.get_team(db, team_id)

        updates = data.model_dump(exclude_unset=True)
        if updates.get("leader_id") is not None:
            await self._ensure_user_exists(db, updates["leader_id"])
        if "name" in updates and updates["name"] is None:
            del updates["name"]
        if "domains" in updates and updates["domains"] is None:
            del updates["domains"]

        if updates:
            team = await self.team_repo.update(db, team, **updates)
            await db.commit()

        counts = await self.user_repo.count_by_team(db)
        return self.to_response(team, counts.get(team.id, 0))

    async def _ensure_user_exists(self, db: AsyncSession, user_id: UUID) -> None:
        if not await self.user_repo.get_by_id(db, user_id):
            raise UserNotFoundException()

    @staticmethod
    def to_response(team: Team, member_count: int = 0) -> TeamResponse:
        return TeamResponse(
            id=team.id,
            name=team.name,
            leader_id=team.leader_id,
            domains=list(team.domains or []),
            created_at=team.created_at,
            updated_at=team.updated_at,
            member_count=member_count,
        )
