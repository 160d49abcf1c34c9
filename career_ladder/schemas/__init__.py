"""
Pydantic schemas for API validation and serialization.
"""
from career_ladder.schemas.base import (
    BaseSchema,
    MessageResponse,
    ErrorResponse,
)
from career_ladder.schemas.user import (
    UserResponse,
    UserProfileResponse,
    RoleUpdate,
    TeamAssignment,
    LevelUpdate,
)
from career_ladder.schemas.auth import (
    SignInRequest,
    TokenResponse,
    SessionResponse,
    RefreshTokenRequest,
)
from career_ladder.schemas.team import (
    TeamCreate,
    TeamUpdate,
    TeamResponse,
)
from career_ladder.schemas.domain import (
    DomainCreate,
    DomainResponse,
)
from career_ladder.schemas.skill import (
    SkillCreate,
    SkillUpdate,
    SkillResponse,
    SkillDeleteResponse,
)
from career_ladder.schemas.assessment import (
    AssessmentUpsert,
    AssessmentResponse,
    WaiverCreate,
    WaiverResponse,
)
from career_ladder.schemas.ladder import (
    LevelSkills,
    LadderConfigCreate,
    LadderConfigUpdate,
    LadderConfigResponse,
)
from career_ladder.schemas.dashboard import (
    ViewState,
    CareerLevelInfo,
    LevelProgressResponse,
    EmployeeDashboard,
    TeamMembersView,
    AdminDashboard,
)

__all__ = [
    # Base
    "BaseSchema",
    "MessageResponse",
    "ErrorResponse",
    # User
    "UserResponse",
    "UserProfileResponse",
    "RoleUpdate",
    "TeamAssignment",
    "LevelUpdate",
    # Auth
    "SignInRequest",
    "TokenResponse",
    "SessionResponse",
    "RefreshTokenRequest",
    # Team
    "TeamCreate",
    "TeamUpdate",
    "TeamResponse",
    # Domain
    "DomainCreate",
    "DomainResponse",
    # Skill
    "SkillCreate",
    "SkillUpdate",
    "SkillResponse",
    "SkillDeleteResponse",
    # Assessment / waiver
    "AssessmentUpsert",
    "AssessmentResponse",
    "WaiverCreate",
    "WaiverResponse",
    # Ladder
    "LevelSkills",
    "LadderConfigCreate",
    "LadderConfigUpdate",
    "LadderConfigResponse",
    # Dashboard
    "ViewState",
    "CareerLevelInfo",
    "LevelProgressResponse",
    "EmployeeDashboard",
    "TeamMembersView",
    "AdminDashboard",
]
