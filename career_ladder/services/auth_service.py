"""
Authentication service - identity sign-in, lazy user provisioning, tokens.
"""
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from career_ladder.core.config import settings
from career_ladder.core.exceptions import InvalidTokenException
from career_ladder.core.identity import IdentityClaims, IdentityVerifier, identity_verifier
from career_ladder.core.logging import get_logger
from career_ladder.core.security import (
    create_access_token,
    create_refresh_token,
    decode_token,
    verify_token_type,
)
from career_ladder.models.base import utcnow
from career_ladder.models.user import Role, User
from career_ladder.repositories.user_repository import UserRepository
from career_ladder.schemas.auth import SessionResponse, TokenResponse
from career_ladder.schemas.user import UserResponse

logger = get_logger(__name__)


class AuthService:
    """Handles all authentication business logic."""

    def __init__(self, verifier: Optional[IdentityVerifier] = None):
        self.user_repo = UserRepository()
        self.verifier = verifier or identity_verifier

    async def sign_in(
        self,
        db: AsyncSession,
        *,
        id_token: str,
    ) -> SessionResponse:
        """
        Exchange a provider ID token for service tokens.

        First sign-in provisions the user: lowest role, level 1, no team or
        domain until an admin assigns them.

        Raises:
            InvalidIdentityTokenException: If the ID token does not verify.
        """
        claims = await self.verifier.verify(id_token)
        user, is_new = await self.find_or_create_user(db, claims)

        user = await self.user_repo.update(db, user, last_seen_at=utcnow())
        await db.commit()

        tokens = self._generate_tokens(user)
        return SessionResponse(
            **tokens.model_dump(),
            user=UserResponse.model_validate(user),
            is_new_user=is_new,
        )

    async def find_or_create_user(
        self,
        db: AsyncSession,
        claims: IdentityClaims,
    ) -> tuple[User, bool]:
        """Look the subject up; create the user record if it is new."""
        user = await self.user_repo.get_by_subject(db, claims.subject)
        if user is not None:
            return user, False

        user = await self.user_repo.create(
            db,
            subject=claims.subject,
            email=claims.email or "",
            name=claims.name or "",
            team_id=None,
            domain=None,
            current_level=1,
            role=Role.EMPLOYEE.value,
        )
        logger.info("user_provisioned", user_id=str(user.id), subject=claims.subject)
        return user, True

    async def refresh(
        self,
        db: AsyncSession,
        *,
        refresh_token: str,
    ) -> TokenResponse:
        """
        Issue new tokens using a valid refresh token.

        Raises:
            InvalidTokenException: If refresh token is invalid or expired.
        """
        payload = decode_token(refresh_token)

        if not payload or not verify_token_type(payload, "refresh"):
            raise InvalidTokenException()

        user_id = parse_subject(payload.get("sub"))
        user = await self.user_repo.get_by_id(db, user_id)
        if not user:
            raise InvalidTokenException()

        return self._generate_tokens(user)

    def _generate_tokens(self, user: User) -> TokenResponse:
        """Generate access and refresh tokens for a user."""
        access_token = create_access_token({"sub": str(user.id)})
        refresh_token = create_refresh_token({"sub": str(user.id)})

        return TokenResponse(
            access_token=access_token,
            refresh_token=refresh_token,
            expires_in=settings.access_token_expire_minutes * 60,
        )


def parse_subject(subject: Optional[str]) -> UUID:
    """Service tokens carry the user's UUID as ``sub``."""
    if not subject:
        raise InvalidTokenException()
    try:
        return UUID(subject)
    except (TypeError, ValueError):
        raise InvalidTokenException()
