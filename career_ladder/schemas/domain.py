"""
Domain schemas.
"""
from typing import Optional
from pydantic import Field
from career_ladder.schemas.base import BaseSchema, TimestampSchema, IDSchema


class DomainCreate(BaseSchema):
    name: str = Field(..., min_length=1, max_length=100)
    slug: Optional[str] = Field(None, max_length=50)  # derived from name when omitted
    description: Optional[str] = None


class DomainResponse(IDSchema, TimestampSchema):
    name: str
    slug: str
    description: Optional[str] = None
