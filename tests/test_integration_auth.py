from travel_journal.core.config import SESSION_COOKIE_NAME


def register_payload(**overrides):
    payload = {"name": "Test User", "email": "test@example.com", "password": "password123"}
    payload.update(overrides)
    return payload


def test_register_user(client):
    response = client.post("/api/auth/register", json=register_payload())
    assert response.status_code == 200
    assert "access_token" in response.json()
    assert response.json()["token_type"] == "bearer"
    assert SESSION_COOKIE_NAME in response.cookies


def test_register_duplicate_user(client):
    client.post("/api/auth/register", json=register_payload())
    # Attempt to register the same user again, with different casing
    response = client.post(
        "/api/auth/register", json=register_payload(email="Test@Example.com")
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Пользователь с таким email уже существует"


def test_register_invalid_email(client):
    response = client.post("/api/auth/register", json=register_payload(email="nope"))
    assert response.status_code == 400


def test_register_missing_name(client):
    payload = register_payload()
    del payload["name"]
    response = client.post("/api/auth/register", json=payload)
    assert response.status_code == 400
    assert response.json() == {"message": "Некорректные данные запроса"}


def test_login_user(client):
    client.post("/api/auth/register", json=register_payload())
    client.cookies.clear()

    response = client.post(
        "/api/auth/token",
        data={"username": "test@example.com", "password": "password123"},
    )
    assert response.status_code == 200
    assert "access_token" in response.json()
    assert SESSION_COOKIE_NAME in response.cookies


def test_login_wrong_password(client):
    client.post("/api/auth/register", json=register_payload())

    response = client.post(
        "/api/auth/token",
        data={"username": "test@example.com", "password": "wrongpassword"},
    )
    assert response.status_code == 401
    assert response.json() == {"message": "Неверный email или пароль"}


def test_login_unknown_user(client):
    response = client.post(
        "/api/auth/token",
        data={"username": "ghost@example.com", "password": "password123"},
    )
    assert response.status_code == 401


def test_me_flow(client):
    token = client.post("/api/auth/register", json=register_payload()).json()[
        "access_token"
    ]
    client.cookies.clear()
    headers = {"Authorization": f"Bearer {token}"}

    res = client.get("/api/auth/me", headers=headers)
    assert res.status_code == 200
    data = res.json()
    assert data["name"] == "Test User"
    assert data["email"] == "test@example.com"
    assert data["image"] is None
    assert "hashed_password" not in data

    assert client.get("/api/auth/me").status_code == 401


def test_logout_clears_session(client):
    client.post("/api/auth/register", json=register_payload())
    assert client.get("/api/auth/me").status_code == 200

    res = client.post("/api/auth/logout")
    assert res.status_code == 200
    assert client.get("/api/auth/me").status_code == 401


def test_token_for_oversized_user_id_is_anonymous(client):
    from travel_journal.services.auth import create_access_token

    headers = {"Authorization": f"Bearer {create_access_token(2**63)}"}
    assert client.get("/api/auth/me", headers=headers).status_code == 401
