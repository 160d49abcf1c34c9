"""
User service - profiles and admin-side user management.

Routes never touch the database directly - they call methods here.
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from career_ladder.core.exceptions import (
    BadRequestException,
    TeamNotFoundException,
    UserNotFoundException,
)
from career_ladder.core.logging import get_logger
from career_ladder.models.user import Role, User
from career_ladder.repositories.team_repository import TeamRepository
from career_ladder.repositories.user_repository import UserRepository
from career_ladder.schemas.user import UserProfileResponse, UserResponse
from career_ladder.services.access_service import AccessService, SessionContext

logger = get_logger(__name__)


class UserService:
    """Handles user profile and assignment operations."""

    def __init__(self):
        self.user_repo = UserRepository()
        self.team_repo = TeamRepository()
        self.access = AccessService()

    async def get_user(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> User:
        """
        Raises:
            UserNotFoundException: If no such user.
        """
        user = await self.user_repo.get_by_id(db, user_id)
        if not user:
            raise UserNotFoundException()
        return user

    async def get_profile(
        self,
        db: AsyncSession,
        user: User,
    ) -> UserProfileResponse:
        """User plus team name, so clients don't need a second fetch."""
        team_name = None
        if user.team_id is not None:
            team = await self.team_repo.get_by_id(db, user.team_id)
            team_name = team.name if team else None

        return UserProfileResponse(
            **UserResponse.model_validate(user).model_dump(),
            team_name=team_name,
            is_configured=user.is_configured,
        )

    async def list_users(
        self,
        db: AsyncSession,
        session: SessionContext,
        *,
        team_id: Optional[UUID] = None,
    ) -> List[UserResponse]:
        """All users (admin), or one team's members."""
        self.access.ensure_admin(session)
        if team_id is not None:
            users = await self.user_repo.list_by_team(db, team_id)
        else:
            users = await self.user_repo.list_all(db)
        return [UserResponse.model_validate(u) for u in users]

    async def update_role(
        self,
        db: AsyncSession,
        session: SessionContext,
        user_id: UUID,
        role: Role,
    ) -> UserResponse:
        self.access.ensure_admin(session)
        user = await self.get_user(db, user_id)

        user = await self.user_repo.update(db, user, role=role.value)
        await db.commit()

        logger.info("user_role_updated", user_id=str(user_id), role=role.value)
        return UserResponse.model_validate(user)

    async def assign_team(
        self,
        db: AsyncSession,
        session: SessionContext,
        user_id: UUID,
        *,
        team_id: Optional[UUID],
        domain: Optional[str] = None,
    ) -> UserResponse:
        """
        Put a user on a team in one of the team's domains.

        The domain defaults to the team's first declared domain. A None
        team clears both team and domain.

        Raises:
            TeamNotFoundException: Unknown team.
            BadRequestException: Team has no domains, or domain not in team.
        """
        self.access.ensure_admin(session)
        user = await self.get_user(db, user_id)

        if team_id is None:
            user = await self.user_repo.update(db, user, team_id=None, domain=None)
            await db.commit()
            logger.info("user_team_cleared", user_id=str(user_id))
            return UserResponse.model_validate(user)

        team = await self.team_repo.get_by_id(db, team_id)
        if not team:
            raise TeamNotFoundException()

        team_domains = list(team.domains or [])
        if not team_domains:
            raise BadRequestException("Team has no domains; add one before assigning members")

        if domain is None:
            chosen = team_domains[0]
        else:
            chosen = domain.strip().lower()
            if chosen not in team_domains:
                raise BadRequestException(
                    f"Domain '{chosen}' is not one of the team's domains: {', '.join(team_domains)}"
                )

        user = await self.user_repo.update(db, user, team_id=team.id, domain=chosen)
        await db.commit()

        logger.info("user_team_assigned", user_id=str(user_id), team_id=str(team.id), domain=chosen)
        return UserResponse.model_validate(user)

    async def set_level(
        self,
        db: AsyncSession,
        session: SessionContext,
        user_id: UUID,
        level: int,
    ) -> UserResponse:
        """Promote (or correct) a user's level. Admins or the user's team leader."""
        user = await self.get_user(db, user_id)
        await self.access.ensure_can_manage_member(db, session, user)

        previous = user.current_level
        user = await self.user_repo.update(db, user, current_level=level)
        await db.commit()

        logger.info(
            "user_level_updated",
            user_id=str(user_id),
            previous_level=previous,
            level=level,
            updated_by=str(session.user_id),
        )
        return UserResponse.model_validate(user)
