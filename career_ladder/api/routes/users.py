"""
User routes.

Thin controllers - profile and admin assignment live in UserService,
per-member ladder data in AssessmentService / WaiverService.
"""
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from career_ladder.api.deps import get_session_context, require_admin
from career_ladder.core.database import get_db
from career_ladder.schemas.assessment import (
    AssessmentResponse,
    AssessmentUpsert,
    WaiverCreate,
    WaiverResponse,
)
from career_ladder.schemas.user import (
    LevelUpdate,
    RoleUpdate,
    TeamAssignment,
    UserProfileResponse,
    UserResponse,
)
from career_ladder.services.access_service import SessionContext
from career_ladder.services.assessment_service import AssessmentService
from career_ladder.services.user_service import UserService
from career_ladder.services.waiver_service import WaiverService

router = APIRouter(prefix="/users", tags=["users"])

user_service = UserService()
assessment_service = AssessmentService()
waiver_service = WaiverService()


@router.get("/me", response_model=UserProfileResponse)
async def get_current_user_profile(
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    """Get current user's profile with team name."""
    return await user_service.get_profile(db, session.user)


@router.get("", response_model=List[UserResponse])
async def list_users(
    team_id: Optional[UUID] = Query(None),
    session: SessionContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """All users, optionally one team's. Admin only."""
    return await user_service.list_users(db, session, team_id=team_id)


@router.put("/{user_id}/role", response_model=UserResponse)
async def update_role(
    user_id: UUID,
    body: RoleUpdate,
    session: SessionContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await user_service.update_role(db, session, user_id, body.role)


@router.put("/{user_id}/team", response_model=UserResponse)
async def assign_team(
    user_id: UUID,
    body: TeamAssignment,
    session: SessionContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """Assign team and domain. Domain defaults to the team's first one."""
    return await user_service.assign_team(
        db,
        session,
        user_id,
        team_id=body.team_id,
        domain=body.domain,
    )


@router.put("/{user_id}/level", response_model=UserResponse)
async def set_level(
    user_id: UUID,
    body: LevelUpdate,
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    """Set a user's career level. Admin or the user's team leader."""
    return await user_service.set_level(db, session, user_id, body.current_level)


# ============== Assessments ==============


@router.get("/{user_id}/assessments", response_model=List[AssessmentResponse])
async def list_assessments(
    user_id: UUID,
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    return await assessment_service.list_for_user(db, session, user_id)


@router.put("/{user_id}/assessments/{skill_id}", response_model=AssessmentResponse)
async def upsert_assessment(
    user_id: UUID,
    skill_id: UUID,
    body: AssessmentUpsert,
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    """Create or overwrite the user's assessment for one skill."""
    return await assessment_service.upsert(db, session, user_id, skill_id, body)


# ============== Waivers ==============


@router.get("/{user_id}/waivers", response_model=List[WaiverResponse])
async def list_waivers(
    user_id: UUID,
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    return await waiver_service.list_for_user(db, session, user_id)


@router.post(
    "/{user_id}/waivers",
    response_model=WaiverResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_waiver(
    user_id: UUID,
    body: WaiverCreate,
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    return await waiver_service.create_waiver(db, session, user_id, body)
