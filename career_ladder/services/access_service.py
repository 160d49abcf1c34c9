"""
Access service - who may see or change whose ladder data.

Handlers never read auth state from anywhere global: every call receives
a SessionContext built for the current request (see api/deps.py).

Every check switches on the full Role enum, so adding a role forces a
decision at each of these boundaries.
"""
from dataclasses import dataclass
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from career_ladder.core.exceptions import ForbiddenException
from career_ladder.models.team import Team
from career_ladder.models.user import Role, User
from career_ladder.repositories.team_repository import TeamRepository


@dataclass(frozen=True)
class SessionContext:
    """The signed-in user for one request."""

    user: User

    @property
    def user_id(self) -> UUID:
        return self.user.id

    @property
    def role(self) -> Role:
        return self.user.role_enum

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


def _unhandled(role: Role) -> ForbiddenException:
    return ForbiddenException(f"No access rule for role '{role.value}'")


class AccessService:
    """Authorization checks that need data (team leadership) to decide."""

    def __init__(self):
        self.team_repo = TeamRepository()

    def ensure_admin(self, session: SessionContext) -> None:
        role = session.role
        if role is Role.ADMIN:
            return
        if role in (Role.TEAM_LEADER, Role.EMPLOYEE):
            raise ForbiddenException("Admin access required")
        raise _unhandled(role)

    async def leads_team_of(
        self,
        db: AsyncSession,
        session: SessionContext,
        member: User,
    ) -> bool:
        """True if the session user leads the member's team (and is not the member)."""
        if member.team_id is None or member.id == session.user_id:
            return False
        team = await self.team_repo.get_by_id(db, member.team_id)
        return team is not None and team.leader_id == session.user_id

    async def ensure_can_view_member(
        self,
        db: AsyncSession,
        session: SessionContext,
        member: User,
    ) -> None:
        """Anyone may see their own data; leaders see their team; admins see all."""
        if member.id == session.user_id:
            return
        await self.ensure_can_manage_member(db, session, member)

    async def ensure_can_manage_member(
        self,
        db: AsyncSession,
        session: SessionContext,
        member: User,
    ) -> None:
        """Assess, waive or re-level a user."""
        role = session.role
        if role is Role.ADMIN:
            return
        if role is Role.TEAM_LEADER:
            if await self.leads_team_of(db, session, member):
                return
            raise ForbiddenException("You can only manage members of teams you lead")
        if role is Role.EMPLOYEE:
            raise ForbiddenException("Team leader or admin access required")
        raise _unhandled(role)

    def ensure_can_view_team(
        self,
        session: SessionContext,
        team: Team,
    ) -> None:
        role = session.role
        if role is Role.ADMIN:
            return
        if role is Role.TEAM_LEADER:
            if team.leader_id == session.user_id:
                return
            raise ForbiddenException("You can only view teams you lead")
        if role is Role.EMPLOYEE:
            raise ForbiddenException("Team leader or admin access required")
        raise _unhandled(role)
