"""
View models for the role-gated dashboards.

Each view is produced by one bulk fetch. ``state`` is
``authorized_empty`` when there is nothing to show yet and
``authorized_populated`` otherwise. Failures come back as an error body
with ``state: "error"``. ``loading`` only ever exists on the client.
"""
import enum
from typing import List, Optional
from career_ladder.schemas.base import BaseSchema
from career_ladder.schemas.assessment import AssessmentResponse, WaiverResponse
from career_ladder.schemas.domain import DomainResponse
from career_ladder.schemas.skill import SkillResponse
from career_ladder.schemas.team import TeamResponse
from career_ladder.schemas.user import UserProfileResponse, UserResponse


class ViewState(str, enum.Enum):
    LOADING = "loading"
    ERROR = "error"
    AUTHORIZED_EMPTY = "authorized_empty"
    AUTHORIZED_POPULATED = "authorized_populated"


class CareerLevelInfo(BaseSchema):
    level: int
    title: str
    focus: str
    description: str


class LevelProgressResponse(BaseSchema):
    level: int
    met: int
    required: int
    percent: float
    is_complete: bool


class SkillWithAssessment(BaseSchema):
    skill: SkillResponse
    assessment: Optional[AssessmentResponse] = None
    proficiency_label: str = "None"


class CategorizedSkills(BaseSchema):
    generic: List[SkillWithAssessment] = []
    domain: List[SkillWithAssessment] = []
    team: List[SkillWithAssessment] = []


class EmployeeDashboard(BaseSchema):
    state: ViewState
    user: UserProfileResponse
    level_info: Optional[CareerLevelInfo] = None
    has_ladder: bool
    current_progress: LevelProgressResponse
    next_progress: Optional[LevelProgressResponse] = None
    ready_for_promotion: bool = False
    skills: CategorizedSkills
    waivers: List[WaiverResponse] = []


class MemberProgress(BaseSchema):
    user: UserResponse
    has_ladder: bool
    current_progress: LevelProgressResponse
    next_progress: Optional[LevelProgressResponse] = None
    ready_for_promotion: bool = False


class TeamMembersView(BaseSchema):
    state: ViewState
    team: TeamResponse
    members: List[MemberProgress] = []


class CatalogByCategory(BaseSchema):
    generic: List[SkillResponse] = []
    domain: List[SkillResponse] = []
    team: List[SkillResponse] = []


class AdminDashboard(BaseSchema):
    state: ViewState
    skills: CatalogByCategory
    domains: List[DomainResponse] = []
    users: List[UserResponse] = []
    teams: List[TeamResponse] = []
