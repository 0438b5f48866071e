from datetime import timedelta

from app.utils.jwt_handler import create_access_token


def test_register_login_and_me_flow(client) -> None:
    register_payload = {"email": "Tester@Example.com", "password": "SecretPass123", "name": "Test User"}
    register_response = client.post("/api/auth/register", json=register_payload)
    assert register_response.status_code == 201
    created_user = register_response.json()
    assert created_user["email"] == "tester@example.com"
    assert created_user["role"] == "user"
    assert "password" not in created_user

    login_response = client.post(
        "/api/auth/login", json={"email": "tester@example.com", "password": "SecretPass123"}
    )
    assert login_response.status_code == 200
    token_body = login_response.json()
    assert token_body["token_type"] == "bearer"
    assert token_body["user"]["role"] == "user"

    headers = {"Authorization": f"Bearer {token_body['access_token']}"}
    me = client.get("/api/users/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["email"] == "tester@example.com"


def test_register_ignores_role_field(client) -> None:
    payload = {"email": "evil@example.com", "password": "SecretPass123", "role": "admin"}
    r = client.post("/api/auth/register", json=payload)
    assert r.status_code == 201
    assert r.json()["role"] == "user"


def test_allowlisted_email_becomes_admin(client) -> None:
    r = client.post("/api/auth/register", json={"email": "admin@example.com", "password": "SecretPass123"})
    assert r.status_code == 201
    assert r.json()["role"] == "admin"


def test_duplicate_registration_rejected(client) -> None:
    payload = {"email": "dup@example.com", "password": "SecretPass123"}
    assert client.post("/api/auth/register", json=payload).status_code == 201
    r = client.post("/api/auth/register", json=payload)
    assert r.status_code == 400
    assert r.json() == {"message": "Email already registered"}


def test_login_wrong_password(client) -> None:
    client.post("/api/auth/register", json={"email": "someone@example.com", "password": "SecretPass123"})
    r = client.post("/api/auth/login", json={"email": "someone@example.com", "password": "nope-nope"})
    assert r.status_code == 401
    assert r.json()["message"] == "Invalid credentials"


def test_missing_token_rejected(client) -> None:
    r = client.get("/api/users/me")
    assert r.status_code == 401
    assert r.json() == {"message": "No token provided"}


def test_tampered_token_rejected(client, user_headers) -> None:
    token = user_headers["Authorization"].split(" ", 1)[1]
    r = client.get("/api/users/me", headers={"Authorization": f"Bearer {token[:-2]}xx"})
    assert r.status_code == 401


def test_expired_token_rejected(client, user_headers) -> None:
    token = create_access_token({"sub": "1"}, timedelta(minutes=-5))
    r = client.get("/api/subjects", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401
    assert r.json()["message"] == "Token expired"


def test_token_for_unknown_user_rejected(client) -> None:
    token = create_access_token({"sub": "999"}, timedelta(minutes=5))
    r = client.get("/api/subjects", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401
    assert r.json()["message"] == "User not found"
