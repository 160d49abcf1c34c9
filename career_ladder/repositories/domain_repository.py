"""
Domain repository - data access for Domain entity.
"""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from career_ladder.models.domain import Domain
from career_ladder.repositories.base import BaseRepository


class DomainRepository(BaseRepository[Domain]):
    def __init__(self):
        super().__init__(Domain)

    async def get_by_slug(
        self,
        db: AsyncSession,
        slug: str,
    ) -> Optional[Domain]:
        result = await db.execute(
            select(Domain).where(Domain.slug == slug)
        )
        return result.scalar_one_or_none()

    async def list_all(
        self,
        db: AsyncSession,
    ) -> List[Domain]:
        return await self.find_by(db, order_by=Domain.name)
