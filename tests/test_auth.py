# matches the password conftest.create_user hashes
PASSWORD = "secret123"


async def test_sign_up_creates_customer_without_roles(client):
    response = await client.post(
        "/auth/sign-up",
        json={"email": "New.User@Example.com", "password": "hunter22", "full_name": "New User"},
    )

    assert response.status_code == 201
    session = response.json()
    assert session["email"] == "new.user@example.com"
    assert session["roles"] == []
    assert session["is_admin"] is False
    assert session["profile"]["full_name"] == "New User"


async def test_duplicate_sign_up_is_rejected(client):
    body = {"email": "dup@example.com", "password": "hunter22"}
    await client.post("/auth/sign-up", json=body)

    response = await client.post("/auth/sign-up", json=body)
    assert response.status_code == 400


async def test_sign_in_reports_admin_flag(client, admin_user):
    response = await client.post("/auth/sign-in", json={"email": admin_user.email, "password": PASSWORD})

    assert response.status_code == 200
    assert response.json()["is_admin"] is True
    assert response.json()["token_type"] == "bearer"


async def test_wrong_password_is_rejected(client, admin_user):
    response = await client.post("/auth/sign-in", json={"email": admin_user.email, "password": "nope-nope"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid login credentials"


async def test_session_and_sign_out(client, admin_user):
    token = (
        await client.post("/auth/sign-in", json={"email": admin_user.email, "password": PASSWORD})
    ).json()["access_token"]
    headers = {"Authorization": f"Bearer {token}"}

    session = await client.get("/auth/session", headers=headers)
    assert session.json()["roles"] == ["admin"]

    signed_out = await client.post("/auth/sign-out", headers=headers)
    assert signed_out.status_code == 200

    assert (await client.get("/auth/session", headers=headers)).status_code == 401
    assert (await client.get("/admin/stats", headers=headers)).status_code == 401


async def test_garbage_token_is_rejected(client):
    response = await client.get("/auth/session", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
