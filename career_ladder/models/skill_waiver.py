"""
SkillWaiver model - removes a skill from a user's requirements.
"""
import uuid
from datetime import datetime
from sqlalchemy import Integer, Text, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from career_ladder.models.base import BaseModel, utcnow


class SkillWaiver(BaseModel):
    """
    Skill waiver entity.

    A waiver at level N drops the skill from the requirements of level N
    and every level above it.
    Several waivers may exist for the same (user, skill).
    """

    __tablename__ = "skill_waivers"

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
    level: Mapped[int] = mapped_column(Integer, nullable=False)
    waived_by: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id"),
        nullable=False,
    )
    reason: Mapped[str] = mapped_column(Text, nullable=False)
    waived_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    def __repr__(self) -> str:
        return f"<SkillWaiver L{self.level} skill_id={self.skill_id} user_id={self.user_id}>"
