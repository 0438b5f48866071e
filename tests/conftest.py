from __future__ import annotations

import os
from typing import Any

import pytest
from fastapi.testclient import TestClient


ADMIN_EMAIL = "admin@example.com"
USER_EMAIL = "student@example.com"
PASSWORD = "SecretPass123"


def pytest_configure() -> None:
    # Ensure the SQLAlchemy engine is created against sqlite for tests.
    os.environ["ORM_DB_URL"] = "sqlite:///./test.db"
    os.environ["ORM_USE_MYSQL"] = "false"
    os.environ["ADMIN_EMAILS"] = f'["{ADMIN_EMAIL}"]'
    os.environ["JWT_SECRET"] = "test-secret"

    # Ensure local .env cannot leak into tests.
    os.environ["ENVIRONMENT"] = "test"


@pytest.fixture()
def client() -> Any:
    from app.database import Base, engine
    from app.main import create_app

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    app = create_app()
    with TestClient(app) as c:
        yield c


def register_and_login(client: TestClient, email: str, password: str = PASSWORD) -> dict[str, str]:
    r = client.post("/api/auth/register", json={"email": email, "password": password})
    assert r.status_code == 201, r.text
    r = client.post("/api/auth/login", json={"email": email, "password": password})
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.json()['access_token']}"}


@pytest.fixture()
def admin_headers(client: TestClient) -> dict[str, str]:
    return register_and_login(client, ADMIN_EMAIL)


@pytest.fixture()
def user_headers(client: TestClient) -> dict[str, str]:
    return register_and_login(client, USER_EMAIL)
