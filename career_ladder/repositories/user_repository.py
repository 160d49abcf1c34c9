"""
User repository - data access for User entity.
"""
from typing import Dict, List, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from career_ladder.models.user import User
from career_ladder.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    def __init__(self):
        super().__init__(User)

    async def get_by_subject(
        self,
        db: AsyncSession,
        subject: str,
    ) -> Optional[User]:
        """Find a user by identity provider subject."""
        result = await db.execute(
            select(User).where(User.subject == subject)
        )
        return result.scalar_one_or_none()

    async def list_all(
        self,
        db: AsyncSession,
    ) -> List[User]:
        """All users, alphabetical."""
        return await self.find_by(db, order_by=User.name)

    async def list_by_team(
        self,
        db: AsyncSession,
        team_id: UUID,
    ) -> List[User]:
        """Members of a team, alphabetical."""
        return await self.find_by(db, order_by=User.name, team_id=team_id)

    async def count_by_team(
        self,
        db: AsyncSession,
    ) -> Dict[UUID, int]:
        """Member count per team id; teams without members are absent."""
        result = await db.execute(
            select(User.team_id, func.count(User.id))
            .where(User.team_id.isnot(None))
            .group_by(User.team_id)
        )
        return {team_id: count for team_id, count in result.all()}
