from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app

TEST_SECRET = "test-secret"


@pytest.fixture()
def make_settings(tmp_path):
    def _make(**overrides) -> Settings:
        values = {
            "SECRET_KEY": TEST_SECRET,
            "DATABASE_URL": f"sqlite+aiosqlite:///{tmp_path / 'brands.db'}",
            "RATE_LIMIT_ENABLED": False,
            "SEED_DATA": True,
        }
        values.update(overrides)
        return Settings(**values)

    return _make


@pytest.fixture()
def client(make_settings):
    app = create_app(make_settings())
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def empty_client(make_settings):
    """App sin datos de ejemplo (ni admin ni marcas)."""
    app = create_app(make_settings(SEED_DATA=False))
    with TestClient(app) as c:
        yield c


def login_headers(c: TestClient, username: str = "admin", password: str = "admin123") -> dict:
    res = c.post("/api/auth/login", json={"username": username, "password": password})
    assert res.status_code == 200, res.text
    return {"Authorization": f"Bearer {res.json()['token']}"}


@pytest.fixture()
def auth_headers(client):
    return login_headers(client)


@pytest.fixture()
def empty_auth_headers(empty_client):
    res = empty_client.post(
        "/api/auth/register",
        json={"username": "tester", "email": "tester@example.com", "password": "secret123"},
    )
    assert res.status_code == 201, res.text
    return {"Authorization": f"Bearer {res.json()['token']}"}
