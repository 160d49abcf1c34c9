"""
Team repository - data access for Team entity.
"""
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from career_ladder.models.team import Team
from career_ladder.repositories.base import BaseRepository


class TeamRepository(BaseRepository[Team]):
    def __init__(self):
        super().__init__(Team)

    async def list_all(
        self,
        db: AsyncSession,
    ) -> List[Team]:
        return await self.find_by(db, order_by=Team.name)

    async def list_led_by(
        self,
        db: AsyncSession,
        leader_id: UUID,
    ) -> List[Team]:
        """Teams whose leader is the given user."""
        return await self.find_by(db, order_by=Team.name, leader_id=leader_id)
