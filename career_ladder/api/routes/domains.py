"""
Domain routes.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from career_ladder.api.deps import get_session_context, require_admin
from career_ladder.core.database import get_db
from career_ladder.schemas.domain import DomainCreate, DomainResponse
from career_ladder.services.access_service import SessionContext
from career_ladder.services.domain_service import DomainService

router = APIRouter(prefix="/domains", tags=["domains"])

domain_service = DomainService()


@router.get("", response_model=List[DomainResponse])
async def list_domains(
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    return await domain_service.list_domains(db)


@router.post("", response_model=DomainResponse, status_code=status.HTTP_201_CREATED)
async def create_domain(
    body: DomainCreate,
    session: SessionContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await domain_service.create_domain(db, session, body)
