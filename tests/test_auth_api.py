from datetime import timedelta

from bureau.core.security import JwtTokenIssuer
from bureau.infrastructure.database.repositories import SqlAccountRepository

from .conftest import TEST_PASSWORD


async def _login(client, username, password=TEST_PASSWORD):
    return await client.post("/api/auth/login", json={"username": username, "password": password})


async def test_login_returns_token_and_profile(client, admin):
    response = await _login(client, "editor")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Login successful"
    assert body["data"]["token"]
    assert body["data"]["admin"] == {
        "id": admin.id,
        "username": "editor",
        "email": "editor@bureau.test",
        "name": "Editor",
        "role": "admin",
    }


async def test_login_failures_are_indistinguishable(client, admin):
    unknown = await _login(client, "ghost")
    wrong = await _login(client, "editor", "nope")

    assert unknown.status_code == wrong.status_code == 401
    assert unknown.json() == wrong.json() == {"success": False, "message": "Invalid credentials"}


async def test_login_locks_after_repeated_failures(client, admin, clock):
    for _ in range(5):
        assert (await _login(client, "editor", "nope")).status_code == 401

    locked = await _login(client, "editor")
    assert locked.status_code == 423
    assert locked.json()["success"] is False

    clock.advance(hours=2, minutes=1)
    assert (await _login(client, "editor")).status_code == 200


async def test_failed_login_is_persisted(client, admin, session_factory):
    assert (await _login(client, "editor", "nope")).status_code == 401
    assert (await _login(client, "editor", "nope")).status_code == 401

    async with session_factory() as session:
        stored = await SqlAccountRepository(session).get_by_id(admin.id)

    assert stored.failed_attempts == 2
    assert stored.locked_until is None


async def test_login_rejects_deactivated_account(client, make_account):
    await make_account(username="former", email="former@bureau.test", is_active=False)

    response = await _login(client, "former")

    assert response.status_code == 401
    assert response.json()["message"] == "Account is deactivated"


async def test_login_validation_error(client):
    response = await client.post("/api/auth/login", json={"username": "editor"})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Validation error"
    assert body["errors"][0]["field"] == "password"


async def test_verify_with_token_from_login(client, admin):
    token = (await _login(client, "editor")).json()["data"]["token"]

    response = await client.get("/api/auth/verify", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    data = response.json()["data"]["admin"]
    assert data["id"] == admin.id
    assert data["last_login_at"] is not None


async def test_verify_without_token(client):
    response = await client.get("/api/auth/verify")

    assert response.status_code == 401
    assert response.json()["message"] == "No token provided"


async def test_verify_with_tampered_token(client, admin, auth_headers):
    header, payload, signature = auth_headers(admin)["Authorization"].split(".")
    flipped = ("A" if signature[0] != "A" else "B") + signature[1:]
    headers = {"Authorization": ".".join([header, payload, flipped])}

    response = await client.get("/api/auth/verify", headers=headers)

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid token"


async def test_verify_with_expired_token(client, admin, settings, clock):
    stale = JwtTokenIssuer(settings.secret_key, clock=lambda: clock.now - timedelta(days=8))
    token = stale.sign(admin.id, timedelta(days=7))

    response = await client.get("/api/auth/verify", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["message"] == "Token expired"


async def test_logout(client):
    response = await client.post("/api/auth/logout")

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Logout successful"}


async def test_change_password(client, admin, auth_headers):
    headers = auth_headers(admin)

    rejected = await client.put(
        "/api/auth/change-password",
        json={"current_password": "nope", "new_password": "another-secret"},
        headers=headers,
    )
    assert rejected.status_code == 400
    assert rejected.json()["message"] == "Current password is incorrect"

    accepted = await client.put(
        "/api/auth/change-password",
        json={"current_password": TEST_PASSWORD, "new_password": "another-secret"},
        headers=headers,
    )
    assert accepted.status_code == 200

    assert (await _login(client, "editor", "another-secret")).status_code == 200
    assert (await _login(client, "editor")).status_code == 401


async def test_change_password_enforces_minimum_length(client, admin, auth_headers):
    response = await client.put(
        "/api/auth/change-password",
        json={"current_password": TEST_PASSWORD, "new_password": "short"},
        headers=auth_headers(admin),
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Validation error"


async def test_register_requires_super_admin(client, admin, auth_headers):
    payload = {
        "username": "newcomer",
        "email": "newcomer@bureau.test",
        "password": "secret-pass",
        "name": "Newcomer",
    }

    anonymous = await client.post("/api/auth/register", json=payload)
    assert anonymous.status_code == 401

    forbidden = await client.post("/api/auth/register", json=payload, headers=auth_headers(admin))
    assert forbidden.status_code == 403


async def test_register_creates_admin(client, super_admin, auth_headers):
    payload = {
        "username": "newcomer",
        "email": "NewComer@Bureau.test",
        "password": "secret-pass",
        "name": "Newcomer",
    }

    created = await client.post("/api/auth/register", json=payload, headers=auth_headers(super_admin))
    assert created.status_code == 201
    assert created.json()["data"]["admin"]["email"] == "newcomer@bureau.test"
    assert created.json()["data"]["admin"]["role"] == "admin"

    duplicate = await client.post("/api/auth/register", json=payload, headers=auth_headers(super_admin))
    assert duplicate.status_code == 400

    assert (await _login(client, "newcomer", "secret-pass")).status_code == 200


async def test_unlock_clears_lockout(client, admin, super_admin, auth_headers):
    for _ in range(5):
        await _login(client, "editor", "nope")
    assert (await _login(client, "editor")).status_code == 423

    response = await client.post(f"/api/auth/accounts/{admin.id}/unlock", headers=auth_headers(super_admin))

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["failed_attempts"] == 0
    assert data["locked_until"] is None
    assert (await _login(client, "editor")).status_code == 200


async def test_unlock_unknown_account(client, super_admin, auth_headers):
    response = await client.post("/api/auth/accounts/missing/unlock", headers=auth_headers(super_admin))

    assert response.status_code == 404
    assert response.json()["message"] == "Admin not found"


async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "OK"
