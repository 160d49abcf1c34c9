from career_ladder.models.skill import SkillCategory
from career_ladder.models.user import Role

from conftest import (
    auth_headers,
    make_assessment,
    make_ladder,
    make_skill,
    make_team,
    make_user,
    make_waiver,
)


async def test_unconfigured_user_gets_configuration_incomplete(client, db):
    user = await make_user(db)

    response = await client.get("/api/v1/dashboard/me", headers=auth_headers(user))

    assert response.status_code == 409
    body = response.json()
    assert body["error"] == "CONFIGURATION_INCOMPLETE"
    assert body["retryable"] is False
    assert body["state"] == "error"
    assert "administrator" in body["message"]


async def test_no_ladder_reports_zero_progress(client, db):
    team = await make_team(db)
    user = await make_user(db, team=team, domain="frontend", level=2)

    response = await client.get("/api/v1/dashboard/me", headers=auth_headers(user))

    assert response.status_code == 200
    body = response.json()
    assert body["state"] == "authorized_empty"
    assert body["has_ladder"] is False
    assert (body["current_progress"]["met"], body["current_progress"]["required"]) == (0, 0)
    assert (body["next_progress"]["met"], body["next_progress"]["required"]) == (0, 0)
    assert body["ready_for_promotion"] is False


async def test_dashboard_counts_fluent_and_waivers(client, db):
    team = await make_team(db)
    user = await make_user(db, team=team, domain="frontend", level=3)
    a = await make_skill(db, "A")
    b = await make_skill(db, "B")
    c = await make_skill(db, "C")
    await make_ladder(db, team, "frontend", {3: [a, b, c], 4: [a]})
    await make_assessment(db, user, a, "fluent")
    await make_assessment(db, user, b, "learning")
    await make_waiver(db, user, b, 3)

    response = await client.get("/api/v1/dashboard/me", headers=auth_headers(user))

    body = response.json()
    assert body["state"] == "authorized_populated"
    assert body["level_info"]["level"] == 3
    assert (body["current_progress"]["met"], body["current_progress"]["required"]) == (1, 2)
    assert body["next_progress"]["level"] == 4
    assert body["next_progress"]["is_complete"] is True
    assert body["ready_for_promotion"] is True
    assert [w["skill_name"] for w in body["waivers"]] == ["B"]

    labels = {s["skill"]["name"]: s["proficiency_label"] for s in body["skills"]["generic"]}
    assert labels == {"A": "Fluent", "B": "Learning", "C": "None"}


async def test_level_seven_has_no_next_level(client, db):
    team = await make_team(db)
    user = await make_user(db, team=team, domain="frontend", level=7)

    response = await client.get("/api/v1/dashboard/me", headers=auth_headers(user))

    assert response.json()["next_progress"] is None
    assert response.json()["ready_for_promotion"] is False


async def test_dashboard_only_shows_users_domain_and_team_skills(client, db):
    team = await make_team(db)
    other = await make_team(db, name="Other")
    user = await make_user(db, team=team, domain="frontend")
    await make_skill(db, "React", category=SkillCategory.DOMAIN, domain="frontend")
    await make_skill(db, "SQL", category=SkillCategory.DOMAIN, domain="backend")
    await make_skill(db, "Our Stack", category=SkillCategory.TEAM, team=team)
    await make_skill(db, "Their Stack", category=SkillCategory.TEAM, team=other)

    body = (await client.get("/api/v1/dashboard/me", headers=auth_headers(user))).json()

    assert [s["skill"]["name"] for s in body["skills"]["domain"]] == ["React"]
    assert [s["skill"]["name"] for s in body["skills"]["team"]] == ["Our Stack"]


async def test_team_view_for_leader(client, db):
    leader = await make_user(db, role=Role.TEAM_LEADER, name="Leader")
    team = await make_team(db, leader=leader)
    a = await make_skill(db, "A")
    await make_ladder(db, team, "frontend", {1: [a], 2: [a]})
    fe = await make_user(db, team=team, domain="frontend", name="Fe")
    await make_user(db, team=team, domain="backend", name="Be")
    await make_assessment(db, fe, a, "fluent")

    response = await client.get(f"/api/v1/teams/{team.id}/members", headers=auth_headers(leader))

    assert response.status_code == 200
    body = response.json()
    assert body["state"] == "authorized_populated"
    assert body["team"]["member_count"] == 2
    by_name = {m["user"]["name"]: m for m in body["members"]}
    assert by_name["Fe"]["has_ladder"] is True
    assert by_name["Fe"]["current_progress"]["met"] == 1
    assert by_name["Be"]["has_ladder"] is False
    assert by_name["Be"]["current_progress"]["required"] == 0


async def test_team_view_denied_to_other_leaders_and_employees(client, db):
    team = await make_team(db)
    other_leader = await make_user(db, role=Role.TEAM_LEADER, name="Other")
    employee = await make_user(db, team=team, domain="frontend", name="Emp")

    as_leader = await client.get(f"/api/v1/teams/{team.id}/members", headers=auth_headers(other_leader))
    as_employee = await client.get(f"/api/v1/teams/{team.id}/members", headers=auth_headers(employee))

    assert as_leader.status_code == 403
    assert as_employee.status_code == 403


async def test_empty_team_view(client, db):
    admin = await make_user(db, role=Role.ADMIN, name="Admin")
    team = await make_team(db)

    body = (await client.get(f"/api/v1/teams/{team.id}/members", headers=auth_headers(admin))).json()

    assert body["state"] == "authorized_empty"
    assert body["members"] == []


async def test_admin_dashboard_groups_catalog(client, db):
    admin = await make_user(db, role=Role.ADMIN, name="Admin")
    team = await make_team(db)
    await make_skill(db, "Communication")
    await make_skill(db, "React", category=SkillCategory.DOMAIN, domain="frontend")
    await make_skill(db, "Our Stack", category=SkillCategory.TEAM, team=team)

    response = await client.get("/api/v1/dashboard/admin", headers=auth_headers(admin))

    body = response.json()
    assert body["state"] == "authorized_populated"
    assert {k: len(v) for k, v in body["skills"].items()} == {"generic": 1, "domain": 1, "team": 1}
    assert [t["name"] for t in body["teams"]] == ["Platform"]
    assert [u["name"] for u in body["users"]] == ["Admin"]


async def test_admin_dashboard_denied_to_leaders(client, db):
    leader = await make_user(db, role=Role.TEAM_LEADER, name="Leader")
    response = await client.get("/api/v1/dashboard/admin", headers=auth_headers(leader))
    assert response.status_code == 403
