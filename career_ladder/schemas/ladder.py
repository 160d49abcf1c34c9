"""
Ladder configuration schemas.
"""
from typing import Dict, List
from uuid import UUID
from pydantic import Field, field_validator
from career_ladder.core.levels import MAX_LEVEL, MIN_LEVEL
from career_ladder.schemas.base import BaseSchema, TimestampSchema, IDSchema


class LevelSkills(BaseSchema):
    """Skill ids required at one level, split by where they come from."""

    generic_skills: List[UUID] = Field(default_factory=list)
    domain_skills: List[UUID] = Field(default_factory=list)
    team_skills: List[UUID] = Field(default_factory=list)

    def all_ids(self) -> List[UUID]:
        return [*self.generic_skills, *self.domain_skills, *self.team_skills]


def _check_levels(value: Dict[int, LevelSkills]) -> Dict[int, LevelSkills]:
    for level in value:
        if not MIN_LEVEL <= level <= MAX_LEVEL:
            raise ValueError(f"Ladder levels must be between {MIN_LEVEL} and {MAX_LEVEL}")
    return value


class LadderConfigCreate(BaseSchema):
    team_id: UUID
    domain: str = Field(..., min_length=1, max_length=50)
    skills_by_level: Dict[int, LevelSkills] = Field(default_factory=dict)

    @field_validator("domain")
    @classmethod
    def _lower_domain(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("skills_by_level")
    @classmethod
    def _levels_in_range(cls, value: Dict[int, LevelSkills]) -> Dict[int, LevelSkills]:
        return _check_levels(value)


class LadderConfigUpdate(BaseSchema):
    """Replaces the whole level mapping."""

    skills_by_level: Dict[int, LevelSkills]

    @field_validator("skills_by_level")
    @classmethod
    def _levels_in_range(cls, value: Dict[int, LevelSkills]) -> Dict[int, LevelSkills]:
        return _check_levels(value)


class LadderConfigResponse(IDSchema, TimestampSchema):
    team_id: UUID
    domain: str
    skills_by_level: Dict[int, LevelSkills]
