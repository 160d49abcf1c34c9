"""
Skill schemas.
"""
from typing import List, Optional
from uuid import UUID
from pydantic import Field, field_validator, model_validator
from career_ladder.core.levels import ALL_LEVELS, MAX_LEVEL, MIN_LEVEL
from career_ladder.models.skill import SkillCategory
from career_ladder.schemas.base import BaseSchema, TimestampSchema, IDSchema


def _clean_levels(levels: List[int]) -> List[int]:
    for level in levels:
        if not MIN_LEVEL <= level <= MAX_LEVEL:
            raise ValueError(f"Levels must be between {MIN_LEVEL} and {MAX_LEVEL}")
    cleaned = sorted(set(levels))
    if not cleaned:
        raise ValueError("At least one applicable level is required")
    return cleaned


def check_category_fields(
    category: SkillCategory,
    domain: Optional[str],
    team_id: Optional[UUID],
) -> None:
    """Domain skills need a domain, team skills need a team, nothing else takes either."""
    if category is SkillCategory.GENERIC:
        if domain or team_id:
            raise ValueError("Generic skills cannot have a domain or team")
    elif category is SkillCategory.DOMAIN:
        if not domain:
            raise ValueError("Domain skills require a domain")
        if team_id:
            raise ValueError("Domain skills cannot have a team")
    elif category is SkillCategory.TEAM:
        if not team_id:
            raise ValueError("Team skills require a team")
        if domain:
            raise ValueError("Team skills cannot have a domain")
    else:
        raise ValueError(f"Unknown skill category: {category}")


class SkillBase(BaseSchema):
    name: str = Field(..., min_length=1, max_length=150)
    description: str = Field(..., min_length=1)
    category: SkillCategory
    domain: Optional[str] = None
    team_id: Optional[UUID] = None
    applicable_levels: List[int] = Field(default_factory=lambda: list(ALL_LEVELS))


class SkillCreate(SkillBase):
    @field_validator("domain")
    @classmethod
    def _lower_domain(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip().lower() or None

    @field_validator("applicable_levels")
    @classmethod
    def _levels_in_range(cls, value: List[int]) -> List[int]:
        return _clean_levels(value)

    @model_validator(mode="after")
    def _category_fields(self) -> "SkillCreate":
        check_category_fields(self.category, self.domain, self.team_id)
        return self


class SkillUpdate(BaseSchema):
    """
    Partial update. Category rules are re-checked against the merged
    record in SkillService.
    """

    name: Optional[str] = Field(None, min_length=1, max_length=150)
    description: Optional[str] = Field(None, min_length=1)
    category: Optional[SkillCategory] = None
    domain: Optional[str] = None
    team_id: Optional[UUID] = None
    applicable_levels: Optional[List[int]] = None

    @field_validator("applicable_levels")
    @classmethod
    def _levels_in_range(cls, value: Optional[List[int]]) -> Optional[List[int]]:
        return _clean_levels(value) if value is not None else None


class SkillResponse(SkillBase, IDSchema, TimestampSchema):
    pass


class SkillDeleteResponse(BaseSchema):
    skill_id: UUID
    assessments_deleted: int
    waivers_deleted: int
    ladders_updated: int = 0
