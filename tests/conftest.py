import os
import tempfile
import uuid
from datetime import datetime, timedelta, timezone

# Settings are read at import time; point everything at local test backends first.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(tempfile.gettempdir(), "career_ladder_import.db")
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["RATE_LIMIT_STORAGE_URI"] = "memory://"
os.environ["ENVIRONMENT"] = "test"

import httpx
import pytest
from jose import jwt
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from career_ladder.core.config import settings
from career_ladder.core.database import Base, get_db
from career_ladder.core.security import create_access_token
from career_ladder.main import app
import career_ladder.models  # noqa: F401
from career_ladder.models.assessment import Assessment
from career_ladder.models.base import utcnow
from career_ladder.models.ladder_config import LadderConfig
from career_ladder.models.skill import Skill, SkillCategory
from career_ladder.models.skill_waiver import SkillWaiver
from career_ladder.models.team import Team
from career_ladder.models.user import Role, User


@pytest.fixture
async def session_maker(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)

    await engine.dispose()


@pytest.fixture
async def db(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
async def client(session_maker):
    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


def auth_headers(user: User) -> dict:
    token = create_access_token({"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}


def identity_token(subject: str, email: str = "ada@example.com", name: str = "Ada", **overrides) -> str:
    claims = {
        "sub": subject,
        "email": email,
        "name": name,
        "aud": settings.identity_audience,
        "exp": datetime.now(timezone.utc) + timedelta(minutes=5),
    }
    claims.update(overrides)
    return jwt.encode(claims, settings.identity_shared_secret, algorithm="HS256")


async def make_user(db, *, role=Role.EMPLOYEE, team=None, domain=None, level=1, name="User"):
    user = User(
        subject=f"sub-{uuid.uuid4()}",
        email=f"{name.lower()}@example.com",
        name=name,
        role=role.value,
        team_id=team.id if team else None,
        domain=domain,
        current_level=level,
    )
    db.add(user)
    await db.commit()
    return user


async def make_team(db, *, name="Platform", domains=("frontend", "backend"), leader=None):
    team = Team(name=name, domains=list(domains), leader_id=leader.id if leader else None)
    db.add(team)
    await db.commit()
    return team


async def make_skill(db, name, *, category=SkillCategory.GENERIC, domain=None, team=None, levels=None):
    skill = Skill(
        name=name,
        description=f"{name} description",
        category=category.value,
        domain=domain,
        team_id=team.id if team else None,
        applicable_levels=levels or [1, 2, 3, 4, 5, 6, 7],
    )
    db.add(skill)
    await db.commit()
    return skill


async def make_assessment(db, user, skill, level, *, assessor=None, at=None):
    assessment = Assessment(
        user_id=user.id,
        skill_id=skill.id,
        level=level,
        assessed_by=(assessor or user).id,
        assessed_at=at or utcnow(),
    )
    db.add(assessment)
    await db.commit()
    return assessment


async def make_waiver(db, user, skill, level, *, waived_by=None):
    waiver = SkillWaiver(
        user_id=user.id,
        skill_id=skill.id,
        level=level,
        waived_by=(waived_by or user).id,
        reason="Covered by prior experience",
        waived_at=utcnow(),
    )
    db.add(waiver)
    await db.commit()
    return waiver


async def make_ladder(db, team, domain, skills_by_level):
    """``skills_by_level`` maps level -> list of skills (all filed as generic)."""
    ladder = LadderConfig(
        team_id=team.id,
        domain=domain,
        skills_by_level={
            str(level): {
                "generic_skills": [str(s.id) for s in skills],
                "domain_skills": [],
                "team_skills": [],
            }
            for level, skills in skills_by_level.items()
        },
    )
    db.add(ladder)
    await db.commit()
    return ladder
