"""
Ladder configuration routes.
"""
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from career_ladder.api.deps import get_session_context, require_admin
from career_ladder.core.database import get_db
from career_ladder.schemas.ladder import (
    LadderConfigCreate,
    LadderConfigResponse,
    LadderConfigUpdate,
)
from career_ladder.services.access_service import SessionContext
from career_ladder.services.ladder_service import LadderService, to_ladder_response

router = APIRouter(prefix="/ladders", tags=["ladders"])

ladder_service = LadderService()


@router.get("", response_model=LadderConfigResponse)
async def find_ladder(
    team_id: UUID = Query(...),
    domain: str = Query(..., min_length=1),
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    """The ladder for one (team, domain) pair."""
    return await ladder_service.get_for_team_and_domain(db, team_id, domain)


@router.get("/{ladder_id}", response_model=LadderConfigResponse)
async def get_ladder(
    ladder_id: UUID,
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    return to_ladder_response(await ladder_service.get_ladder(db, ladder_id))


@router.post("", response_model=LadderConfigResponse, status_code=status.HTTP_201_CREATED)
async def create_ladder(
    body: LadderConfigCreate,
    session: SessionContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await ladder_service.create_ladder(db, session, body)


@router.put("/{ladder_id}", response_model=LadderConfigResponse)
async def update_ladder(
    ladder_id: UUID,
    body: LadderConfigUpdate,
    session: SessionContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """Replace the level mapping of a ladder."""
    return await ladder_service.update_ladder(db, session, ladder_id, body)


@router.delete("/{ladder_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_ladder(
    ladder_id: UUID,
    session: SessionContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    await ladder_service.delete_ladder(db, session, ladder_id)
