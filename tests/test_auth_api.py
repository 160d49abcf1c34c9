from datetime import datetime, timedelta, timezone

from sqlalchemy import select

from career_ladder.models.user import User

from conftest import auth_headers, identity_token, make_user


async def test_first_sign_in_provisions_employee(client, db):
    response = await client.post(
        "/api/v1/auth/session",
        json={"id_token": identity_token("google-123", email="ada@example.com", name="Ada")},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["is_new_user"] is True
    assert body["token_type"] == "bearer"
    assert body["user"]["role"] == "employee"
    assert body["user"]["current_level"] == 1
    assert body["user"]["team_id"] is None
    assert body["user"]["domain"] is None
    assert body["user"]["email"] == "ada@example.com"

    user = (await db.execute(select(User).where(User.subject == "google-123"))).scalar_one()
    assert user.last_seen_at is not None


async def test_second_sign_in_reuses_user(client):
    token = identity_token("google-456")
    first = await client.post("/api/v1/auth/session", json={"id_token": token})
    second = await client.post("/api/v1/auth/session", json={"id_token": token})

    assert second.json()["is_new_user"] is False
    assert second.json()["user"]["id"] == first.json()["user"]["id"]


async def test_sign_in_rejects_bad_signature(client):
    forged = identity_token("google-789").rsplit(".", 1)[0] + ".forged"

    response = await client.post("/api/v1/auth/session", json={"id_token": forged})

    assert response.status_code == 401
    body = response.json()
    assert body["error"] == "INVALID_IDENTITY_TOKEN"
    assert body["state"] == "error"
    assert body["retryable"] is False


async def test_sign_in_rejects_wrong_audience(client):
    response = await client.post(
        "/api/v1/auth/session",
        json={"id_token": identity_token("google-1", aud="someone-else")},
    )
    assert response.status_code == 401


async def test_sign_in_rejects_expired_token(client):
    expired = datetime.now(timezone.utc) - timedelta(minutes=1)
    response = await client.post(
        "/api/v1/auth/session",
        json={"id_token": identity_token("google-2", exp=expired)},
    )
    assert response.status_code == 401


async def test_session_token_works_on_protected_routes(client):
    signed_in = await client.post("/api/v1/auth/session", json={"id_token": identity_token("google-3")})
    access = signed_in.json()["access_token"]

    response = await client.get("/api/v1/auth/session", headers={"Authorization": f"Bearer {access}"})

    assert response.status_code == 200
    assert response.json()["is_configured"] is False


async def test_refresh_issues_new_tokens(client):
    signed_in = await client.post("/api/v1/auth/session", json={"id_token": identity_token("google-4")})

    response = await client.post(
        "/api/v1/auth/refresh",
        json={"refresh_token": signed_in.json()["refresh_token"]},
    )

    assert response.status_code == 200
    assert response.json()["access_token"]


async def test_access_token_cannot_refresh(client, db):
    user = await make_user(db)
    access = auth_headers(user)["Authorization"].split(" ", 1)[1]

    response = await client.post("/api/v1/auth/refresh", json={"refresh_token": access})

    assert response.status_code == 401
    assert response.json()["error"] == "INVALID_TOKEN"


async def test_protected_route_requires_token(client):
    response = await client.get("/api/v1/users/me")
    assert response.status_code == 401
    assert response.json()["error"] == "UNAUTHORIZED"


async def test_logout_acknowledges(client):
    response = await client.post("/api/v1/auth/logout")
    assert response.status_code == 200
    assert response.json() == {"message": "Logged out successfully"}
