"""
Domain service - the discipline reference list.
"""
import re
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from career_ladder.core.exceptions import BadRequestException, DomainAlreadyExistsException
from career_ladder.repositories.domain_repository import DomainRepository
from career_ladder.schemas.domain import DomainCreate, DomainResponse
from career_ladder.services.access_service import AccessService, SessionContext


def slugify(name: str) -> str:
    """'Data Engineering' -> 'data-engineering'"""
    return re.sub(r"[^a-z0-9]+", "-", name.strip().lower()).strip("-")


class DomainService:
    def __init__(self):
        self.domain_repo = DomainRepository()
        self.access = AccessService()

    async def list_domains(
        self,
        db: AsyncSession,
    ) -> List[DomainResponse]:
        domains = await self.domain_repo.list_all(db)
        return [DomainResponse.model_validate(d) for d in domains]

    async def create_domain(
        self,
        db: AsyncSession,
        session: SessionContext,
        data: DomainCreate,
    ) -> DomainResponse:
        self.access.ensure_admin(session)

        slug = slugify(data.slug or data.name)
        if not slug:
            raise BadRequestException("Domain name must contain letters or digits")
        if await self.domain_repo.get_by_slug(db, slug):
            raise DomainAlreadyExistsException()

        domain = await self.domain_repo.create(
            db,
            name=data.name,
            slug=slug,
            description=data.description,
        )
        await db.commit()
        return DomainResponse.model_validate(domain)
