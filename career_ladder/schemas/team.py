"""
Team schemas.
"""
from typing import List, Optional
from uuid import UUID
from pydantic import Field, field_validator
from career_ladder.schemas.base import BaseSchema, TimestampSchema, IDSchema


def _normalize_domains(domains: List[str]) -> List[str]:
    seen = []
    for domain in domains:
        slug = domain.strip().lower()
        if slug and slug not in seen:
            seen.append(slug)
    return seen


class TeamBase(BaseSchema):
    name: str = Field(..., min_length=1, max_length=100)
    leader_id: Optional[UUID] = None
    domains: List[str] = Field(default_factory=list)

    @field_validator("domains")
    @classmethod
    def _clean_domains(cls, value: List[str]) -> List[str]:
        return _normalize_domains(value)


class TeamCreate(TeamBase):
    pass


class TeamUpdate(BaseSchema):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    leader_id: Optional[UUID] = None
    domains: Optional[List[str]] = None

    @field_validator("domains")
    @classmethod
    def _clean_domains(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        return _normalize_domains(value) if value is not None else None


class TeamResponse(TeamBase, IDSchema, TimestampSchema):
    member_count: int = 0
