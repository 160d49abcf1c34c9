"""
API dependencies for dependency injection.
"""
from typing import Optional

import structlog
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from career_ladder.core.database import get_db
from career_ladder.core.security import decode_token, verify_token_type
from career_ladder.core.exceptions import (
    UnauthorizedException,
    InvalidTokenException,
)
from career_ladder.models.user import User
from career_ladder.repositories.user_repository import UserRepository
from career_ladder.services.access_service import AccessService, SessionContext
from career_ladder.services.auth_service import parse_subject


# Security scheme
security = HTTPBearer(auto_error=False)

user_repo = UserRepository()
access = AccessService()


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> User:
    """
    Get the current authenticated user.

    Raises:
        UnauthorizedException: If no token provided
        InvalidTokenException: If token is invalid or expired
    """
    if not credentials:
        raise UnauthorizedException("Authentication required")

    payload = decode_token(credentials.credentials)

    if not payload:
        raise InvalidTokenException()

    if not verify_token_type(payload, "access"):
        raise InvalidTokenException()

    user = await user_repo.get_by_id(db, parse_subject(payload.get("sub")))
    if not user:
        raise InvalidTokenException()

    return user


async def get_session_context(
    request: Request,
    current_user: User = Depends(get_current_user),
) -> SessionContext:
    """
    The per-request session every handler receives.

    Also stored on ``request.state`` so the rate limiter can key on the user,
    and bound into the log context so service events carry who acted.
    """
    session = SessionContext(user=current_user)
    request.state.session = session
    structlog.contextvars.bind_contextvars(
        user_id=str(session.user_id),
        role=session.role.value,
    )
    return session


async def require_admin(
    session: SessionContext = Depends(get_session_context),
) -> SessionContext:
    """
    Raises:
        ForbiddenException: If the user is not an admin
    """
    access.ensure_admin(session)
    return session
