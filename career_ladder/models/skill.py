"""
Skill model - the skill catalog.
"""
import enum
import uuid
from typing import List, Optional
from sqlalchemy import JSON, String, Text, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from career_ladder.models.base import BaseModel


class SkillCategory(str, enum.Enum):
    GENERIC = "generic"
    DOMAIN = "domain"
    TEAM = "team"


class Skill(BaseModel):
    """
    Skill entity.

    ``domain`` is set only for domain skills and ``team_id`` only for team
    skills. Deleting a skill removes its assessments and waivers too (see
    SkillRepository.delete_cascade).
    """

    __tablename__ = "skills"

    name: Mapped[str] = mapped_column(String(150), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    category: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        index=True,
    )  # 'generic', 'domain', 'team'
    domain: Mapped[Optional[str]] = mapped_column(String(50), nullable=True, index=True)
    team_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("teams.id"),
        nullable=True,
        index=True,
    )
    applicable_levels: Mapped[List[int]] = mapped_column(JSON, nullable=False, default=list)

    def __repr__(self) -> str:
        return f"<Skill {self.name} ({self.category})>"
