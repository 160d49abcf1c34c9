import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from career_ladder.models.assessment import Assessment
from career_ladder.models.base import utcnow
from career_ladder.models.skill import Skill
from career_ladder.models.skill_waiver import SkillWaiver
from career_ladder.repositories.assessment_repository import AssessmentRepository
from career_ladder.repositories.skill_repository import SkillRepository
from career_ladder.repositories.user_repository import UserRepository

from conftest import make_assessment, make_ladder, make_skill, make_team, make_user, make_waiver


async def _count(db, model, **filters):
    query = select(func.count()).select_from(model)
    for field, value in filters.items():
        query = query.where(getattr(model, field) == value)
    return (await db.execute(query)).scalar()


async def test_cascade_delete_removes_skill_assessments_and_waivers(db):
    alice = await make_user(db, name="Alice")
    bob = await make_user(db, name="Bob")
    doomed = await make_skill(db, "Doomed")
    kept = await make_skill(db, "Kept")

    await make_assessment(db, alice, doomed, "fluent")
    await make_assessment(db, bob, doomed, "learning")
    await make_assessment(db, alice, kept, "fluent")
    await make_waiver(db, alice, doomed, 2)
    await make_waiver(db, alice, doomed, 4)
    await make_waiver(db, bob, kept, 3)

    result = await SkillRepository().delete_cascade(db, doomed.id)
    await db.commit()

    assert result.skill_deleted
    assert (result.assessments_deleted, result.waivers_deleted) == (2, 2)
    assert await _count(db, Skill, id=doomed.id) == 0
    assert await _count(db, Assessment, skill_id=doomed.id) == 0
    assert await _count(db, SkillWaiver, skill_id=doomed.id) == 0
    assert await _count(db, Assessment, skill_id=kept.id) == 1
    assert await _count(db, SkillWaiver, skill_id=kept.id) == 1


async def test_cascade_delete_rerun_is_a_noop(db):
    skill = await make_skill(db, "Once")
    repo = SkillRepository()

    await repo.delete_cascade(db, skill.id)
    await db.commit()
    again = await repo.delete_cascade(db, skill.id)

    assert not again.anything_deleted


async def test_cascade_delete_clears_orphans_of_missing_skill(db):
    user = await make_user(db)
    skill = await make_skill(db, "Gone")
    await make_assessment(db, user, skill, "fluent")
    await db.execute(Skill.__table__.delete().where(Skill.id == skill.id))
    await db.commit()

    result = await SkillRepository().delete_cascade(db, skill.id)
    await db.commit()

    assert not result.skill_deleted
    assert result.assessments_deleted == 1
    assert result.anything_deleted


async def test_upsert_twice_keeps_one_record_with_latest_values(db):
    user = await make_user(db, name="Member")
    leader = await make_user(db, name="Leader")
    skill = await make_skill(db, "Testing")
    repo = AssessmentRepository()

    first = await repo.upsert(db, user_id=user.id, skill_id=skill.id, level="learning", assessed_by=user.id)
    await db.commit()
    second = await repo.upsert(
        db,
        user_id=user.id,
        skill_id=skill.id,
        level="fluent",
        assessed_by=leader.id,
        notes="Ships reliable suites",
    )
    await db.commit()

    assert second.id == first.id
    assert await _count(db, Assessment, user_id=user.id, skill_id=skill.id) == 1

    stored = await repo.find_for_user_and_skill(db, user.id, skill.id)
    assert stored.level == "fluent"
    assert stored.assessed_by == leader.id
    assert stored.notes == "Ships reliable suites"


async def test_list_filtered_by_category(db):
    await make_skill(db, "Zeta")
    await make_skill(db, "Alpha")

    skills = await SkillRepository().list_filtered(db, category="generic")

    assert [s.name for s in skills] == ["Alpha", "Zeta"]


async def test_cascade_delete_strips_skill_from_ladders(db):
    team = await make_team(db)
    kept = await make_skill(db, "Kept")
    doomed = await make_skill(db, "Doomed")
    ladder = await make_ladder(db, team, "frontend", {3: [kept, doomed], 4: [doomed]})

    result = await SkillRepository().delete_cascade(db, doomed.id)
    await db.commit()
    await db.refresh(ladder)

    assert result.ladders_updated == 1
    assert ladder.skills_by_level["3"]["generic_skills"] == [str(kept.id)]
    assert ladder.skills_by_level["4"]["generic_skills"] == []


async def test_concurrent_first_assessment_loses_on_unique_constraint(session_maker):
    async with session_maker() as setup:
        user = await make_user(setup, name="Member")
        skill = await make_skill(setup, "Testing")
    repo = AssessmentRepository()
    fields = dict(user_id=user.id, skill_id=skill.id, assessed_by=user.id)

    async with session_maker() as first, session_maker() as second:
        assert await repo.find_for_user_and_skill(first, user.id, skill.id) is None
        assert await repo.find_for_user_and_skill(second, user.id, skill.id) is None

        winner = await repo.create(first, level="learning", assessed_at=utcnow(), **fields)
        await first.commit()

        with pytest.raises(IntegrityError):
            await repo.create(second, level="fluent", assessed_at=utcnow(), **fields)
        await second.rollback()

        retried = await repo.upsert(second, level="fluent", **fields)
        await second.commit()

    assert retried.id == winner.id
    assert retried.level == "fluent"
    async with session_maker() as check:
        assert await _count(check, Assessment, user_id=user.id, skill_id=skill.id) == 1


async def test_count_by_team(db):
    platform = await make_team(db)
    empty = await make_team(db, name="Empty")
    await make_user(db, team=platform, domain="frontend", name="A")
    await make_user(db, team=platform, domain="backend", name="B")
    await make_user(db, name="Unassigned")

    counts = await UserRepository().count_by_team(db)

    assert counts == {platform.id: 2}
    assert empty.id not in counts
