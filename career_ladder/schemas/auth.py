"""
Authentication schemas.
"""
from pydantic import Field
from career_ladder.schemas.base import BaseSchema
from career_ladder.schemas.user import UserResponse


class SignInRequest(BaseSchema):
    """Identity provider ID token to exchange for a session."""

    id_token: str = Field(..., min_length=1)


class TokenResponse(BaseSchema):
    """Token response after successful authentication."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds


class SessionResponse(TokenResponse):
    """Tokens plus the signed-in user's profile."""

    user: UserResponse
    is_new_user: bool = False


class RefreshTokenRequest(BaseSchema):
    """Refresh token request body."""

    refresh_token: str
