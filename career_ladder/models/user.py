"""
User model - an employee, team leader or admin.
"""
import enum
import uuid
from datetime import datetime
from typing import Optional
from sqlalchemy import String, Integer, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from career_ladder.models.base import BaseModel


class Role(str, enum.Enum):
    """Closed set of roles. Authorization code must handle every member."""

    EMPLOYEE = "employee"
    TEAM_LEADER = "team_leader"
    ADMIN = "admin"


class User(BaseModel):
    """
    User entity.

    Created on first sign-in from the identity provider's claims. Team,
    domain and role are assigned later by an admin.
    """

    __tablename__ = "users"

    # Identity
    subject: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )  # identity provider's stable subject id
    email: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")

    # Ladder placement
    team_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid,
        ForeignKey("teams.id"),
        nullable=True,
        index=True,
    )
    domain: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    current_level: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    # Permissions
    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=Role.EMPLOYEE.value,
    )

    # Activity tracking
    last_seen_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    @property
    def role_enum(self) -> Role:
        return Role(self.role)

    @property
    def is_configured(self) -> bool:
        """True once the user has both a team and a domain."""
        return self.team_id is not None and bool(self.domain)

    def __repr__(self) -> str:
        return f"<User {self.email or self.subject}>"
