"""
Waiver routes.
"""
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from career_ladder.api.deps import get_session_context
from career_ladder.core.database import get_db
from career_ladder.services.access_service import SessionContext
from career_ladder.services.waiver_service import WaiverService

router = APIRouter(prefix="/waivers", tags=["waivers"])

waiver_service = WaiverService()


@router.delete("/{waiver_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_waiver(
    waiver_id: UUID,
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    """Remove a waiver. Admin or the waived user's team leader."""
    await waiver_service.delete_waiver(db, session, waiver_id)
