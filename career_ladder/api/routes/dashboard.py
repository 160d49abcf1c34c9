"""
Dashboard routes - the employee and admin views.

The team view lives under /teams/{team_id}/members.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from career_ladder.api.deps import get_session_context, require_admin
from career_ladder.core.database import get_db
from career_ladder.schemas.dashboard import AdminDashboard, EmployeeDashboard
from career_ladder.services.access_service import SessionContext
from career_ladder.services.dashboard_service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

dashboard_service = DashboardService()


@router.get("/me", response_model=EmployeeDashboard)
async def employee_dashboard(
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    """
    The signed-in user's ladder: level info, progress, skills, waivers.

    409 CONFIGURATION_INCOMPLETE until an admin assigns a team and domain.
    """
    return await dashboard_service.employee_dashboard(db, session)


@router.get("/admin", response_model=AdminDashboard)
async def admin_dashboard(
    session: SessionContext = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await dashboard_service.admin_dashboard(db, session)
