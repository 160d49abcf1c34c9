"""
Ladder repository - data access for LadderConfig entity.
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from career_ladder.models.ladder_config import LadderConfig
from career_ladder.repositories.base import BaseRepository


class LadderRepository(BaseRepository[LadderConfig]):
    def __init__(self):
        super().__init__(LadderConfig)

    async def find_for_team_and_domain(
        self,
        db: AsyncSession,
        team_id: UUID,
        domain: str,
    ) -> Optional[LadderConfig]:
        """The ladder for a (team, domain) pair, if one is configured."""
        result = await db.execute(
            select(LadderConfig)
            .where(
                LadderConfig.team_id == team_id,
                LadderConfig.domain == domain,
            )
            .limit(1)
        )
        return result.scalars().first()

    async def list_for_team(
        self,
        db: AsyncSession,
        team_id: UUID,
    ) -> List[LadderConfig]:
        return await self.find_by(db, order_by=LadderConfig.domain, team_id=team_id)
