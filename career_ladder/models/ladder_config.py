"""
LadderConfig model - which skills a (team, domain) requires at each level.
"""
import uuid
from sqlalchemy import JSON, String, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from career_ladder.models.base import BaseModel


class LadderConfig(BaseModel):
    """
    Ladder configuration entity.

    ``skills_by_level`` is stored as JSON keyed by the level as a string:

        {
          "1": {"generic_skills": [...], "domain_skills": [...], "team_skills": [...]},
          "2": {...}
        }

    Skill ids inside are strings.
    """

    __tablename__ = "ladder_configs"

    __table_args__ = (
        UniqueConstraint("team_id", "domain", name="uq_ladder_team_domain"),
    )

    team_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("teams.id"),
        nullable=False,
        index=True,
    )
    domain: Mapped[str] = mapped_column(String(50), nullable=False)
    skills_by_level: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)

    def __repr__(self) -> str:
        return f"<LadderConfig team_id={self.team_id} domain={self.domain}>"
