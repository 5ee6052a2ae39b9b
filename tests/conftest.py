"""Shared fixtures building an application backed by a temporary SQLite file."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.application.use_cases.roles import create_role  # noqa: E402
from app.application.use_cases.users import assign_role  # noqa: E402
from app.config import AuthSettings, DatabaseSettings, RedisSettings, Settings  # noqa: E402
from app.main import create_app  # noqa: E402

JWT_SECRET = "test-secret"


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        database=DatabaseSettings(url=f"sqlite:///{tmp_path / 'test.db'}"),
        redis=RedisSettings(enabled=False),
        auth=AuthSettings(jwt_secret=JWT_SECRET, token_expiry=30),
    )


@pytest.fixture()
def app(settings: Settings):
    return create_app(settings)


@pytest.fixture()
def client(app):
    """Return a test client whose lifespan has connected the database."""

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def session_factory(client: TestClient):
    return client.app.state.session_factory


@pytest.fixture()
def register_user(client: TestClient):
    """Register a user through the API and return the response body."""

    def _register(
        email: str = "jane@example.com",
        password: str = "Secret123!",
        name: str = "Jane Roe",
    ) -> dict:
        response = client.post(
            "/users",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture()
def login(client: TestClient):
    """Obtain a token and return ready-to-use authorization headers."""

    def _login(email: str, password: str) -> dict[str, str]:
        response = client.post(
            "/auth/token",
            data={"username": email, "password": password},
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _login


@pytest.fixture()
def auth_headers(register_user, login) -> dict[str, str]:
    register_user(email="member@example.com", password="MemberPass1")
    return login("member@example.com", "MemberPass1")


@pytest.fixture()
def admin_headers(register_user, login, session_factory) -> dict[str, str]:
    admin = register_user(email="admin@example.com", password="AdminPass1", name="Admin")
    with session_factory() as session:
        role = create_role(session, name="admin")
        assign_role(session, user_id=admin["id"], role_id=role.id)
    return login("admin@example.com", "AdminPass1")
