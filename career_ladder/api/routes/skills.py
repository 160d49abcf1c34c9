"""
Skill catalog routes.
"""
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from career_ladder.api.deps import get_session_context, require_admin
from career_ladder.core.database import get_db
from career_ladder.models.skill import SkillCategory
from career_ladder.schemas.skill import (
    SkillCreate,
    SkillDeleteResponse,
    SkillResponse,
    SkillUpdate,
)
from career_ladder.services.access_service import SessionContext
from career_ladder.services.skill_service import SkillService

router = APIRouter(prefix="/skills", tags=["skills"])

skill_service = SkillService()


@router.get("", response_model=List[SkillResponse])
async def list_skills(
    category: Optional[SkillCategory] = Query(None),
    domain: Optional[str] = Query(None),
    team_id: Optional[UUID] = Query(None),
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    """Skill catalog with optional filters, alphabetical."""
    return await skill_service.list_skills(
        db,
        category=category,
        domain=domain,
        team_id=team_id,
    )


@router.get("/{skill_id}", response_model=SkillResponse)
async def get_skill(
    skill_id: UUID,
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    return await skill_service.get_skill(db, skill_id)


@router.post("", response_model=SkillResponse, status_code=status.HTTP_201_CREATED)
async def create_skill(
    body: SkillCreate,
    session: SessionContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await skill_service.create_skill(db, session, body)


@router.patch("/{skill_id}", response_model=SkillResponse)
async def update_skill(
    skill_id: UUID,
    body: SkillUpdate,
    session: SessionContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await skill_service.update_skill(db, session, skill_id, body)


@router.delete("/{skill_id}", response_model=SkillDeleteResponse)
async def delete_skill(
    skill_id: UUID,
    session: SessionContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """
    Delete a skill with all its assessments and waivers, atomically.

    Safe to retry: a second call clears anything left behind and only
    404s when there is nothing left to remove.
    """
    return await skill_service.delete_skill(db, session, skill_id)
