"""
Service layer - business logic and orchestration.

Services contain the application's business logic, coordinate between
repositories, and make the authorization decisions.

RULE: Routes call services. Services call repositories. Never the reverse.
"""
from career_ladder.services.access_service import AccessService, SessionContext
from career_ladder.services.auth_service import AuthService
from career_ladder.services.user_service import UserService
from career_ladder.services.team_service import TeamService
from career_ladder.services.domain_service import DomainService
from career_ladder.services.skill_service import SkillService
from career_ladder.services.assessment_service import AssessmentService
from career_ladder.services.waiver_service import WaiverService
from career_ladder.services.ladder_service import LadderService
from career_ladder.services.dashboard_service import DashboardService

__all__ = [
    "AccessService",
    "SessionContext",
    "AuthService",
    "UserService",
    "TeamService",
    "DomainService",
    "SkillService",
    "AssessmentService",
    "WaiverService",
    "LadderService",
    "DashboardService",
]
