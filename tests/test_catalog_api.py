import pytest

from career_ladder.models.skill import SkillCategory
from career_ladder.models.user import Role

from conftest import auth_headers, make_assessment, make_skill, make_team, make_user, make_waiver


@pytest.fixture
async def admin(db):
    return await make_user(db, role=Role.ADMIN, name="Admin")


async def test_create_skill_applies_category_rules(client, db, admin):
    ok = await client.post(
        "/api/v1/skills",
        json={
            "name": "React",
            "description": "Modern React",
            "category": "domain",
            "domain": "Frontend",
            "applicable_levels": [3, 1, 1],
        },
        headers=auth_headers(admin),
    )
    missing_domain = await client.post(
        "/api/v1/skills",
        json={"name": "Vue", "description": "Vue", "category": "domain"},
        headers=auth_headers(admin),
    )

    assert ok.status_code == 201
    assert ok.json()["domain"] == "frontend"
    assert ok.json()["applicable_levels"] == [1, 3]
    assert missing_domain.status_code == 422


async def test_create_team_skill_requires_existing_team(client, admin):
    response = await client.post(
        "/api/v1/skills",
        json={
            "name": "Our Stack",
            "description": "Internal tooling",
            "category": "team",
            "team_id": "00000000-0000-0000-0000-000000000000",
        },
        headers=auth_headers(admin),
    )
    assert response.status_code == 404


async def test_update_skill_rechecks_category(client, db, admin):
    skill = await make_skill(db, "Communication")

    response = await client.patch(
        f"/api/v1/skills/{skill.id}",
        json={"category": "team"},
        headers=auth_headers(admin),
    )

    assert response.status_code == 400


async def test_list_skills_filters(client, db, admin):
    await make_skill(db, "Communication")
    await make_skill(db, "React", category=SkillCategory.DOMAIN, domain="frontend")

    response = await client.get("/api/v1/skills?category=domain&domain=frontend", headers=auth_headers(admin))

    assert [s["name"] for s in response.json()] == ["React"]


async def test_delete_skill_cascades_and_is_idempotent(client, db, admin):
    user = await make_user(db, name="Member")
    skill = await make_skill(db, "Doomed")
    await make_assessment(db, user, skill, "fluent")
    await make_waiver(db, user, skill, 2)

    first = await client.delete(f"/api/v1/skills/{skill.id}", headers=auth_headers(admin))
    second = await client.delete(f"/api/v1/skills/{skill.id}", headers=auth_headers(admin))
    assessments = await client.get(f"/api/v1/users/{user.id}/assessments", headers=auth_headers(admin))

    assert first.status_code == 200
    assert first.json()["assessments_deleted"] == 1
    assert first.json()["waivers_deleted"] == 1
    assert second.status_code == 404
    assert second.json()["error"] == "SKILL_NOT_FOUND"
    assert assessments.json() == []


async def test_employee_cannot_delete_skill(client, db):
    employee = await make_user(db)
    skill = await make_skill(db, "Kept")

    response = await client.delete(f"/api/v1/skills/{skill.id}", headers=auth_headers(employee))

    assert response.status_code == 403


async def test_create_domain_slugifies_and_rejects_duplicates(client, admin):
    first = await client.post(
        "/api/v1/domains",
        json={"name": "Data Engineering", "description": "Pipelines"},
        headers=auth_headers(admin),
    )
    duplicate = await client.post(
        "/api/v1/domains",
        json={"name": "Data  Engineering"},
        headers=auth_headers(admin),
    )

    assert first.json()["slug"] == "data-engineering"
    assert duplicate.status_code == 409
    assert duplicate.json()["error"] == "DOMAIN_EXISTS"


async def test_create_team_normalizes_domains(client, admin):
    response = await client.post(
        "/api/v1/teams",
        json={"name": "Web", "domains": ["Frontend", "frontend", " Backend "]},
        headers=auth_headers(admin),
    )

    assert response.status_code == 201
    assert response.json()["domains"] == ["frontend", "backend"]
    assert response.json()["member_count"] == 0


async def test_create_ladder_validates_domain_and_skills(client, db, admin):
    team = await make_team(db, domains=("frontend",))
    skill = await make_skill(db, "A")
    url = "/api/v1/ladders"
    headers = auth_headers(admin)

    wrong_domain = await client.post(
        url,
        json={"team_id": str(team.id), "domain": "mobile", "skills_by_level": {}},
        headers=headers,
    )
    unknown_skill = await client.post(
        url,
        json={
            "team_id": str(team.id),
            "domain": "frontend",
            "skills_by_level": {"1": {"generic_skills": ["00000000-0000-0000-0000-000000000000"]}},
        },
        headers=headers,
    )
    bad_level = await client.post(
        url,
        json={"team_id": str(team.id), "domain": "frontend", "skills_by_level": {"8": {}}},
        headers=headers,
    )
    created = await client.post(
        url,
        json={
            "team_id": str(team.id),
            "domain": "frontend",
            "skills_by_level": {"1": {"generic_skills": [str(skill.id)]}},
        },
        headers=headers,
    )
    duplicate = await client.post(
        url,
        json={"team_id": str(team.id), "domain": "frontend", "skills_by_level": {}},
        headers=headers,
    )

    assert wrong_domain.status_code == 400
    assert unknown_skill.status_code == 400
    assert bad_level.status_code == 422
    assert created.status_code == 201
    assert created.json()["skills_by_level"]["1"]["generic_skills"] == [str(skill.id)]
    assert duplicate.status_code == 409
    assert duplicate.json()["error"] == "LADDER_CONFIG_EXISTS"


async def test_update_and_find_ladder(client, db, admin):
    team = await make_team(db, domains=("frontend",))
    a = await make_skill(db, "A")
    b = await make_skill(db, "B")
    headers = auth_headers(admin)
    created = await client.post(
        "/api/v1/ladders",
        json={"team_id": str(team.id), "domain": "frontend", "skills_by_level": {"1": {"generic_skills": [str(a.id)]}}},
        headers=headers,
    )

    updated = await client.put(
        f"/api/v1/ladders/{created.json()['id']}",
        json={"skills_by_level": {"2": {"domain_skills": [str(b.id)]}}},
        headers=headers,
    )
    found = await client.get(f"/api/v1/ladders?team_id={team.id}&domain=frontend", headers=headers)

    assert updated.status_code == 200
    assert list(found.json()["skills_by_level"]) == ["2"]
    assert found.json()["skills_by_level"]["2"]["domain_skills"] == [str(b.id)]


async def test_ladder_round_trips_after_skill_delete(client, db, admin):
    team = await make_team(db, domains=("frontend",))
    a = await make_skill(db, "A")
    b = await make_skill(db, "B")
    headers = auth_headers(admin)
    created = await client.post(
        "/api/v1/ladders",
        json={
            "team_id": str(team.id),
            "domain": "frontend",
            "skills_by_level": {"3": {"generic_skills": [str(a.id), str(b.id)]}},
        },
        headers=headers,
    )
    ladder_id = created.json()["id"]

    deleted = await client.delete(f"/api/v1/skills/{b.id}", headers=headers)
    fetched = await client.get(f"/api/v1/ladders/{ladder_id}", headers=headers)
    resent = await client.put(
        f"/api/v1/ladders/{ladder_id}",
        json={"skills_by_level": fetched.json()["skills_by_level"]},
        headers=headers,
    )

    assert deleted.json()["ladders_updated"] == 1
    assert fetched.json()["skills_by_level"]["3"]["generic_skills"] == [str(a.id)]
    assert resent.status_code == 200
    assert resent.json()["skills_by_level"]["3"]["generic_skills"] == [str(a.id)]
