"""
Authentication routes.

Sign-in exchanges an identity provider ID token for the service's own
tokens. Thin controllers - the work happens in AuthService.
"""
from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from career_ladder.api.deps import get_session_context
from career_ladder.core.database import get_db
from career_ladder.core.rate_limit import RATE_SIGN_IN, limiter
from career_ladder.schemas.auth import (
    RefreshTokenRequest,
    SessionResponse,
    SignInRequest,
    TokenResponse,
)
from career_ladder.schemas.base import MessageResponse
from career_ladder.schemas.user import UserProfileResponse
from career_ladder.services.access_service import SessionContext
from career_ladder.services.auth_service import AuthService
from career_ladder.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["auth"])

auth_service = AuthService()
user_service = UserService()


@router.post("/session", response_model=SessionResponse)
@limiter.limit(RATE_SIGN_IN)
async def sign_in(
    request: Request,
    body: SignInRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Sign in with an identity provider ID token.

    First sign-in creates the user as an employee at level 1 with no team.
    """
    return await auth_service.sign_in(db, id_token=body.id_token)


@router.get("/session", response_model=UserProfileResponse)
async def get_session(
    session: SessionContext = Depends(get_session_context),
    db: AsyncSession = Depends(get_db),
):
    """Re-read the signed-in user's profile after a change affecting it."""
    return await user_service.get_profile(db, session.user)


@router.post("/refresh", response_model=TokenResponse)
async def refresh_token(
    body: RefreshTokenRequest,
    db: AsyncSession = Depends(get_db),
):
    """
    Refresh access token using refresh token.
    """
    return await auth_service.refresh(db, refresh_token=body.refresh_token)


@router.post("/logout", response_model=MessageResponse)
async def logout():
    """
    Sign out.

    Tokens are stateless; the client discards them.
    """
    return MessageResponse(message="Logged out successfully")
