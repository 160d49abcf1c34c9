from sqlalchemy import func, select

from career_ladder.models.domain import Domain
from career_ladder.models.ladder_config import LadderConfig
from career_ladder.models.skill import Skill
from career_ladder.models.team import Team
from career_ladder.models.user import User
from career_ladder.services.progress import configured_skill_ids
from scripts.seed import DOMAIN_SKILLS, GENERIC_SKILLS, TEAM_SKILLS, seed_database


async def _count(db, model):
    return (await db.execute(select(func.count()).select_from(model))).scalar()


async def test_seed_creates_reference_data(db):
    created = await seed_database(db)

    expected_skills = len(GENERIC_SKILLS) + sum(len(s) for s in DOMAIN_SKILLS.values()) + len(TEAM_SKILLS)
    assert created == {"users": 1, "domains": 6, "skills": expected_skills, "teams": 1, "ladders": 1}
    assert await _count(db, Skill) == expected_skills

    admin = (await db.execute(select(User))).scalar_one()
    assert admin.role == "admin"


async def test_seed_is_idempotent(db):
    await seed_database(db)
    again = await seed_database(db)

    assert set(again.values()) == {0}
    assert await _count(db, Domain) == 6
    assert await _count(db, Team) == 1
    assert await _count(db, LadderConfig) == 1


async def test_seeded_ladder_grows_with_level(db):
    await seed_database(db)
    ladder = (await db.execute(select(LadderConfig))).scalar_one()

    sizes = [len(configured_skill_ids(ladder, level)) for level in range(1, 8)]

    assert sizes == [5, 9, 13, 15, 16, 17, 17]
