"""Integration tests for the user API endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import select

from app.infrastructure.models import user_role_table
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import verify_password


def test_register_user_returns_public_fields_only(client: TestClient, session_factory) -> None:
    payload = {
        "name": "John Doe",
        "email": "john.doe@example.com",
        "password": "supersecretpassword",
    }

    response = client.post("/users", json=payload)

    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 1
    assert body["name"] == "John Doe"
    assert body["email"] == "john.doe@example.com"
    assert "password" not in body
    assert body["roles"] == []

    with session_factory() as session:
        stored = UserRepository(session).get_by_email(payload["email"])
    assert stored is not None
    assert stored.email == payload["email"]
    assert stored.password != payload["password"]
    assert verify_password(payload["password"], stored.password)


def test_register_duplicate_email_is_rejected(client: TestClient, register_user) -> None:
    register_user(email="dup@example.com")

    response = client.post(
        "/users",
        json={"name": "Other", "email": "DUP@example.com", "password": "Another123"},
    )

    assert response.status_code == 409
    assert response.json()["detail"] == "Email is already registered"


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "No Email", "password": "Secret123!"},
        {"name": "Bad Email", "email": "not-an-email", "password": "Secret123!"},
        {"name": "Short", "email": "short@example.com", "password": "123"},
        {"name": "", "email": "empty@example.com", "password": "Secret123!"},
    ],
)
def test_register_invalid_payload_returns_400(client: TestClient, payload: dict) -> None:
    response = client.post("/users", json=payload)

    assert response.status_code == 400


def test_register_malformed_json_returns_400(client: TestClient) -> None:
    response = client.post(
        "/users",
        content=b'{"name": "John", ',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400


def test_get_unknown_user_returns_404_without_internals(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    response = client.get("/users/999", headers=auth_headers)

    assert response.status_code == 404
    assert response.json() == {"detail": "User not found"}


def test_read_current_user(client: TestClient, auth_headers: dict[str, str]) -> None:
    response = client.get("/users/me", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["email"] == "member@example.com"


def test_list_and_read_users(
    client: TestClient, register_user, auth_headers: dict[str, str]
) -> None:
    created = register_user(email="listed@example.com")

    list_response = client.get("/users", headers=auth_headers)
    assert list_response.status_code == 200
    emails = {user["email"] for user in list_response.json()}
    assert {"listed@example.com", "member@example.com"} <= emails
    assert all("password" not in user for user in list_response.json())

    detail_response = client.get(f"/users/{created['id']}", headers=auth_headers)
    assert detail_response.status_code == 200
    assert detail_response.json()["email"] == "listed@example.com"


def test_user_updates_own_profile_and_password(
    client: TestClient, register_user, login
) -> None:
    user = register_user(email="self@example.com", password="OldPass123")
    headers = login("self@example.com", "OldPass123")

    response = client.put(
        f"/users/{user['id']}",
        json={"name": "Renamed", "password": "NewPass456"},
        headers=headers,
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Renamed"
    assert response.json()["email"] == "self@example.com"

    rejected = client.post(
        "/auth/token", data={"username": "self@example.com", "password": "OldPass123"}
    )
    assert rejected.status_code == 401
    assert login("self@example.com", "NewPass456")


def test_update_email_to_existing_one_conflicts(
    client: TestClient, register_user, login
) -> None:
    register_user(email="taken@example.com")
    user = register_user(email="mover@example.com", password="MoverPass1")
    headers = login("mover@example.com", "MoverPass1")

    response = client.put(
        f"/users/{user['id']}", json={"email": "taken@example.com"}, headers=headers
    )

    assert response.status_code == 409


def test_update_rejects_unknown_fields(client: TestClient, auth_headers) -> None:
    me = client.get("/users/me", headers=auth_headers).json()

    response = client.put(
        f"/users/{me['id']}", json={"is_admin": True}, headers=auth_headers
    )

    assert response.status_code == 400


def test_user_cannot_update_someone_else(
    client: TestClient, register_user, auth_headers: dict[str, str]
) -> None:
    other = register_user(email="other@example.com")

    response = client.put(
        f"/users/{other['id']}", json={"name": "Hijacked"}, headers=auth_headers
    )

    assert response.status_code == 403


def test_admin_deletes_user(
    client: TestClient, register_user, admin_headers: dict[str, str]
) -> None:
    victim = register_user(email="victim@example.com")

    delete_response = client.delete(f"/users/{victim['id']}", headers=admin_headers)
    assert delete_response.status_code == 204

    missing = client.get(f"/users/{victim['id']}", headers=admin_headers)
    assert missing.status_code == 404

    again = client.delete(f"/users/{victim['id']}", headers=admin_headers)
    assert again.status_code == 404


@pytest.mark.parametrize("user_id", ["99999999999999999999", "2147483648", "0", "-1"])
def test_out_of_range_user_id_is_rejected(
    client: TestClient, auth_headers: dict[str, str], user_id: str
) -> None:
    response = client.get(f"/users/{user_id}", headers=auth_headers)

    assert response.status_code == 400


@pytest.mark.parametrize(
    "query",
    [
        "limit=99999999999999999999",
        "limit=0",
        "limit=501",
        "limit=-1",
        "skip=-1",
        "skip=99999999999999999999",
    ],
)
def test_invalid_pagination_is_rejected(
    client: TestClient, auth_headers: dict[str, str], query: str
) -> None:
    response = client.get(f"/users?{query}", headers=auth_headers)

    assert response.status_code == 400


def test_pagination_limits_results(
    client: TestClient, register_user, auth_headers: dict[str, str]
) -> None:
    register_user(email="second@example.com")
    register_user(email="third@example.com")

    response = client.get("/users?skip=1&limit=1", headers=auth_headers)

    assert response.status_code == 200
    assert [user["email"] for user in response.json()] == ["second@example.com"]


def test_concurrent_registration_with_same_email_conflicts(
    client: TestClient, register_user, monkeypatch: pytest.MonkeyPatch
) -> None:
    register_user(email="race@example.com")
    # Simulate a second request that checked for the email before the first one committed.
    monkeypatch.setattr(UserRepository, "get_by_email", lambda self, email: None)

    response = client.post(
        "/users",
        json={"name": "Racer", "email": "race@example.com", "password": "Secret123!"},
    )

    assert response.status_code == 409
    assert response.json() == {"detail": "Email is already registered"}


def test_deleting_user_removes_role_links(
    client: TestClient, register_user, admin_headers: dict[str, str], session_factory
) -> None:
    user = register_user(email="linked@example.com")
    role = client.post("/roles", json={"name": "staff"}, headers=admin_headers).json()
    client.post(
        f"/users/{user['id']}/roles", json={"role_id": role["id"]}, headers=admin_headers
    )

    response = client.delete(f"/users/{user['id']}", headers=admin_headers)

    assert response.status_code == 204
    with session_factory() as session:
        remaining = session.execute(
            select(user_role_table).where(user_role_table.c.user_id == user["id"])
        ).all()
    assert remaining == []
    assert client.get(f"/roles/{role['id']}", headers=admin_headers).status_code == 200
