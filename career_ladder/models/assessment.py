"""
Assessment model - a team leader's rating of one user on one skill.
"""
import enum
import uuid
from datetime import datetime
from typing import Optional
from sqlalchemy import String, Text, DateTime, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from career_ladder.models.base import BaseModel, utcnow


class Proficiency(str, enum.Enum):
    NONE = "none"
    LEARNING = "learning"
    PROFICIENT = "proficient"
    FLUENT = "fluent"


PROFICIENCY_LABELS = {
    Proficiency.NONE: "None",
    Proficiency.LEARNING: "Learning",
    Proficiency.PROFICIENT: "Proficient",
    Proficiency.FLUENT: "Fluent",
}


class Assessment(BaseModel):
    """
    Assessment entity.

    At most one row per (user, skill); updates overwrite it in place.
    """

    __tablename__ = "assessments"

    __table_args__ = (
        UniqueConstraint("user_id", "skill_id", name="uq_assessment_user_skill"),
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    skill_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("skills.id"),
        nullable=False,
        index=True,
    )

    level: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=Proficiency.NONE.value,
    )  # 'none', 'learning', 'proficient', 'fluent'
    assessed_by: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id"),
        nullable=False,
    )
    assessed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Assessment {self.level} skill_id={self.skill_id} user_id={self.user_id}>"
