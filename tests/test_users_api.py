import pytest

from career_ladder.models.user import Role

from conftest import auth_headers, make_skill, make_team, make_user


@pytest.fixture
async def admin(db):
    return await make_user(db, role=Role.ADMIN, name="Admin")


async def test_assign_team_defaults_to_first_domain(client, db, admin):
    team = await make_team(db, domains=("frontend", "backend"))
    member = await make_user(db, name="Member")

    response = await client.put(
        f"/api/v1/users/{member.id}/team",
        json={"team_id": str(team.id)},
        headers=auth_headers(admin),
    )

    assert response.status_code == 200
    assert response.json()["team_id"] == str(team.id)
    assert response.json()["domain"] == "frontend"


async def test_assign_team_accepts_listed_domain(client, db, admin):
    team = await make_team(db, domains=("frontend", "backend"))
    member = await make_user(db, name="Member")

    response = await client.put(
        f"/api/v1/users/{member.id}/team",
        json={"team_id": str(team.id), "domain": "Backend"},
        headers=auth_headers(admin),
    )

    assert response.json()["domain"] == "backend"


async def test_assign_team_rejects_unlisted_domain(client, db, admin):
    team = await make_team(db, domains=("frontend",))
    member = await make_user(db, name="Member")

    response = await client.put(
        f"/api/v1/users/{member.id}/team",
        json={"team_id": str(team.id), "domain": "mobile"},
        headers=auth_headers(admin),
    )

    assert response.status_code == 400
    assert response.json()["error"] == "BAD_REQUEST"


async def test_assign_team_without_domains_is_rejected(client, db, admin):
    team = await make_team(db, domains=())
    member = await make_user(db, name="Member")

    response = await client.put(
        f"/api/v1/users/{member.id}/team",
        json={"team_id": str(team.id)},
        headers=auth_headers(admin),
    )

    assert response.status_code == 400


async def test_clearing_team_clears_domain(client, db, admin):
    team = await make_team(db)
    member = await make_user(db, team=team, domain="frontend", name="Member")

    response = await client.put(
        f"/api/v1/users/{member.id}/team",
        json={"team_id": None},
        headers=auth_headers(admin),
    )

    assert response.json()["team_id"] is None
    assert response.json()["domain"] is None


async def test_unknown_team_is_not_found(client, db, admin):
    member = await make_user(db, name="Member")

    response = await client.put(
        f"/api/v1/users/{member.id}/team",
        json={"team_id": "00000000-0000-0000-0000-000000000000"},
        headers=auth_headers(admin),
    )

    assert response.status_code == 404
    assert response.json()["error"] == "TEAM_NOT_FOUND"


@pytest.mark.parametrize("role", ["employee", "team_leader", "admin"])
async def test_admin_assigns_any_role(client, db, admin, role):
    member = await make_user(db, name="Member")

    response = await client.put(
        f"/api/v1/users/{member.id}/role",
        json={"role": role},
        headers=auth_headers(admin),
    )

    assert response.status_code == 200
    assert response.json()["role"] == role


async def test_unknown_role_is_rejected(client, db, admin):
    member = await make_user(db, name="Member")

    response = await client.put(
        f"/api/v1/users/{member.id}/role",
        json={"role": "owner"},
        headers=auth_headers(admin),
    )

    assert response.status_code == 422


@pytest.mark.parametrize("role", [Role.EMPLOYEE, Role.TEAM_LEADER])
async def test_non_admins_cannot_list_or_assign(client, db, role):
    caller = await make_user(db, role=role, name="Caller")
    member = await make_user(db, name="Member")

    listed = await client.get("/api/v1/users", headers=auth_headers(caller))
    assigned = await client.put(
        f"/api/v1/users/{member.id}/role",
        json={"role": "admin"},
        headers=auth_headers(caller),
    )

    assert listed.status_code == 403
    assert assigned.status_code == 403
    assert assigned.json()["error"] == "FORBIDDEN"


async def test_leader_sets_level_for_own_team_member(client, db):
    leader = await make_user(db, role=Role.TEAM_LEADER, name="Leader")
    team = await make_team(db, leader=leader)
    member = await make_user(db, team=team, domain="frontend", name="Member")

    response = await client.put(
        f"/api/v1/users/{member.id}/level",
        json={"current_level": 3},
        headers=auth_headers(leader),
    )

    assert response.status_code == 200
    assert response.json()["current_level"] == 3


async def test_leader_cannot_manage_other_teams(client, db):
    leader = await make_user(db, role=Role.TEAM_LEADER, name="Leader")
    await make_team(db, name="Mine", leader=leader)
    other_team = await make_team(db, name="Theirs")
    outsider = await make_user(db, team=other_team, domain="frontend", name="Outsider")

    response = await client.put(
        f"/api/v1/users/{outsider.id}/level",
        json={"current_level": 2},
        headers=auth_headers(leader),
    )

    assert response.status_code == 403


async def test_level_out_of_range_is_rejected(client, db, admin):
    member = await make_user(db, name="Member")

    response = await client.put(
        f"/api/v1/users/{member.id}/level",
        json={"current_level": 8},
        headers=auth_headers(admin),
    )

    assert response.status_code == 422


async def test_leader_assesses_member_and_upsert_overwrites(client, db):
    leader = await make_user(db, role=Role.TEAM_LEADER, name="Leader")
    team = await make_team(db, leader=leader)
    member = await make_user(db, team=team, domain="frontend", name="Member")
    skill = await make_skill(db, "Testing")
    url = f"/api/v1/users/{member.id}/assessments/{skill.id}"

    first = await client.put(url, json={"level": "learning"}, headers=auth_headers(leader))
    second = await client.put(url, json={"level": "fluent", "notes": "Great"}, headers=auth_headers(leader))
    listed = await client.get(f"/api/v1/users/{member.id}/assessments", headers=auth_headers(member))

    assert first.status_code == 200
    assert second.json()["id"] == first.json()["id"]
    assert second.json()["assessed_by"] == str(leader.id)
    assert [a["level"] for a in listed.json()] == ["fluent"]


async def test_employee_cannot_assess_themselves(client, db):
    team = await make_team(db)
    member = await make_user(db, team=team, domain="frontend", name="Member")
    skill = await make_skill(db, "Testing")

    response = await client.put(
        f"/api/v1/users/{member.id}/assessments/{skill.id}",
        json={"level": "fluent"},
        headers=auth_headers(member),
    )

    assert response.status_code == 403


async def test_employee_cannot_read_another_users_assessments(client, db):
    me = await make_user(db, name="Me")
    other = await make_user(db, name="Other")

    response = await client.get(f"/api/v1/users/{other.id}/assessments", headers=auth_headers(me))

    assert response.status_code == 403


async def test_assessment_for_unknown_skill_is_not_found(client, db, admin):
    member = await make_user(db, name="Member")

    response = await client.put(
        f"/api/v1/users/{member.id}/assessments/00000000-0000-0000-0000-000000000000",
        json={"level": "fluent"},
        headers=auth_headers(admin),
    )

    assert response.status_code == 404
    assert response.json()["error"] == "SKILL_NOT_FOUND"


async def test_waiver_create_list_delete(client, db):
    leader = await make_user(db, role=Role.TEAM_LEADER, name="Leader")
    team = await make_team(db, leader=leader)
    member = await make_user(db, team=team, domain="frontend", name="Member")
    skill = await make_skill(db, "Mentoring")

    created = await client.post(
        f"/api/v1/users/{member.id}/waivers",
        json={"skill_id": str(skill.id), "level": 3, "reason": "Not applicable to this role"},
        headers=auth_headers(leader),
    )
    listed = await client.get(f"/api/v1/users/{member.id}/waivers", headers=auth_headers(member))

    assert created.status_code == 201
    assert created.json()["skill_name"] == "Mentoring"
    assert created.json()["waived_by"] == str(leader.id)
    assert [w["skill_name"] for w in listed.json()] == ["Mentoring"]

    deleted = await client.delete(f"/api/v1/waivers/{created.json()['id']}", headers=auth_headers(leader))
    again = await client.delete(f"/api/v1/waivers/{created.json()['id']}", headers=auth_headers(leader))

    assert deleted.status_code == 204
    assert again.status_code == 404
    assert again.json()["error"] == "WAIVER_NOT_FOUND"
