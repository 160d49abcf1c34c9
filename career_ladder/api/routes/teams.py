"""
Team routes.
"""
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from career_ladder.api.deps import get_session_context, require_admin
from career_ladder.core.database import get_db
from career_ladder.schemas.dashboard import TeamMembersView
from career_ladder.schemas.ladder import LadderConfigResponse
from career_ladder.schemas.team import TeamCreate, TeamResponse, TeamUpdate
from career_ladder.services.access_service import SessionContext
from career_ladder.services.dashboard_service import DashboardService
from career_ladder.services.ladder_service import LadderService
from career_ladder.services.team_service import TeamService

router = APIRouter(prefix="/teams", tags=["teams"])

team_service = TeamService()
ladder_service = LadderService()
dashboard_service = DashboardService()


@router.get("", response_model=List[TeamResponse])
async def list_teams(
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    return await team_service.list_teams(db)


@router.post("", response_model=TeamResponse, status_code=status.HTTP_201_CREATED)
async def create_team(
    body: TeamCreate,
    session: SessionContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await team_service.create_team(db, session, body)


@router.get("/{team_id}", response_model=TeamResponse)
async def get_team(
    team_id: UUID,
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    return await team_service.get_team_response(db, team_id)


@router.patch("/{team_id}", response_model=TeamResponse)
async def update_team(
    team_id: UUID,
    body: TeamUpdate,
    session: SessionContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await team_service.update_team(db, session, team_id, body)


@router.get("/{team_id}/members", response_model=TeamMembersView)
async def team_members(
    team_id: UUID,
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    """
    Team member view: each member with current and next level progress.

    Only the team's leader or an admin.
    """
    return await dashboard_service.team_members(db, session, team_id)


@router.get("/{team_id}/ladders", response_model=List[LadderConfigResponse])
async def list_team_ladders(
    team_id: UUID,
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    """Ladder configurations for every domain of the team."""
    return await ladder_service.list_for_team(db, team_id)
