"""
Assessment and waiver schemas.
"""
from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import Field
from career_ladder.core.levels import MAX_LEVEL, MIN_LEVEL
from career_ladder.models.assessment import Proficiency
from career_ladder.schemas.base import BaseSchema, IDSchema


class AssessmentUpsert(BaseSchema):
    """Body for PUT /users/{user_id}/assessments/{skill_id}."""

    level: Proficiency
    notes: Optional[str] = Field(None, max_length=2000)


class AssessmentResponse(IDSchema):
    user_id: UUID
    skill_id: UUID
    level: Proficiency
    assessed_by: UUID
    assessed_at: datetime
    notes: Optional[str] = None


class WaiverCreate(BaseSchema):
    skill_id: UUID
    level: int = Field(..., ge=MIN_LEVEL, le=MAX_LEVEL)
    reason: str = Field(..., min_length=1, max_length=2000)


class WaiverResponse(IDSchema):
    user_id: UUID
    skill_id: UUID
    level: int
    waived_by: UUID
    reason: str
    waived_at: datetime
    skill_name: Optional[str] = None
