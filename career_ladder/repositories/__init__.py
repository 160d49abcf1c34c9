"""
Repository layer - data access abstraction.

Repositories handle all database queries, keeping SQL/ORM logic
out of the service and route layers.
"""
from career_ladder.repositories.base import BaseRepository
from career_ladder.repositories.user_repository import UserRepository
from career_ladder.repositories.team_repository import TeamRepository
from career_ladder.repositories.domain_repository import DomainRepository
from career_ladder.repositories.skill_repository import SkillRepository, CascadeDeleteResult
from career_ladder.repositories.assessment_repository import AssessmentRepository
from career_ladder.repositories.waiver_repository import WaiverRepository
from career_ladder.repositories.ladder_repository import LadderRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "TeamRepository",
    "DomainRepository",
    "SkillRepository",
    "CascadeDeleteResult",
    "AssessmentRepository",
    "WaiverRepository",
    "LadderRepository",
]
