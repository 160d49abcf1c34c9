"""
Database models for the career ladder.

All models use UUID primary keys and include created_at/updated_at timestamps.
"""
from career_ladder.models.base import BaseModel, TimestampMixin, UUIDMixin
from career_ladder.models.user import User, Role
from career_ladder.models.team import Team
from career_ladder.models.domain import Domain
from career_ladder.models.skill import Skill, SkillCategory
from career_ladder.models.assessment import Assessment, Proficiency, PROFICIENCY_LABELS
from career_ladder.models.skill_waiver import SkillWaiver
from career_ladder.models.ladder_config import LadderConfig

__all__ = [
    "BaseModel",
    "TimestampMixin",
    "UUIDMixin",
    "User",
    "Role",
    "Team",
    "Domain",
    "Skill",
    "SkillCategory",
    "Assessment",
    "Proficiency",
    "PROFICIENCY_LABELS",
    "SkillWaiver",
    "LadderConfig",
]
