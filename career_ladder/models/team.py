"""
Team model.
"""
import uuid
from typing import List, Optional
from sqlalchemy import JSON, String, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from career_ladder.models.base import BaseModel


class Team(BaseModel):
    """
    Team entity.

    Membership is not stored here: a user belongs to a team when
    ``users.team_id`` points at it.
    """

    __tablename__ = "teams"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    leader_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("users.id", use_alter=True, name="fk_teams_leader_id"),
        nullable=True,
    )
    # Domain slugs members of this team may work in
    domains: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)

    def __repr__(self) -> str:
        return f"<Team {self.name}>"
