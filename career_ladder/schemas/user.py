"""
User schemas.
"""
from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import Field
from career_ladder.core.levels import MAX_LEVEL, MIN_LEVEL
from career_ladder.models.user import Role
from career_ladder.schemas.base import BaseSchema, TimestampSchema, IDSchema


class UserResponse(IDSchema, TimestampSchema):
    """User response schema."""

    subject: str
    email: str
    name: str
    team_id: Optional[UUID] = None
    domain: Optional[str] = None
    current_level: int
    role: Role
    last_seen_at: Optional[datetime] = None


class UserProfileResponse(UserResponse):
    """User plus the resolved team name."""

    team_name: Optional[str] = None
    is_configured: bool = False


class RoleUpdate(BaseSchema):
    role: Role


class TeamAssignment(BaseSchema):
    """
    Put a user on a team.

    ``domain`` must be one of the team's domains; omitted means the team's
    first domain. ``team_id`` None removes the user from any team.
    """

    team_id: Optional[UUID] = None
    domain: Optional[str] = None


class LevelUpdate(BaseSchema):
    current_level: int = Field(..., ge=MIN_LEVEL, le=MAX_LEVEL)
