"""
Domain model - predefined disciplines (frontend, backend, devops...).
"""
from typing import Optional
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from career_ladder.models.base import BaseModel


class Domain(BaseModel):
    __tablename__ = "domains"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    slug: Mapped[str] = mapped_column(String(50), unique=True, nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Domain {self.slug}>"
