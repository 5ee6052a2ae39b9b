"""Integration tests for role management and role assignment."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.application.use_cases.roles import create_role
from app.domain.exceptions import DomainError
from app.infrastructure.repositories import RoleRepository


def test_admin_manages_roles(client: TestClient, admin_headers: dict[str, str]) -> None:
    created = client.post("/roles", json={"name": "editor"}, headers=admin_headers)
    assert created.status_code == 201
    role = created.json()
    assert role["name"] == "editor"
    assert role["created_at"].endswith("Z")

    duplicate = client.post("/roles", json={"name": "EDITOR"}, headers=admin_headers)
    assert duplicate.status_code == 409

    listed = client.get("/roles", headers=admin_headers)
    assert listed.status_code == 200
    assert {item["name"] for item in listed.json()} == {"admin", "editor"}

    renamed = client.put(
        f"/roles/{role['id']}", json={"name": "publisher"}, headers=admin_headers
    )
    assert renamed.status_code == 200
    assert renamed.json()["name"] == "publisher"

    conflict = client.put(
        f"/roles/{role['id']}", json={"name": "admin"}, headers=admin_headers
    )
    assert conflict.status_code == 409

    deleted = client.delete(f"/roles/{role['id']}", headers=admin_headers)
    assert deleted.status_code == 204
    assert client.get(f"/roles/{role['id']}", headers=admin_headers).status_code == 404


def test_regular_user_can_read_roles(
    client: TestClient, admin_headers: dict[str, str], auth_headers: dict[str, str]
) -> None:
    response = client.get("/roles", headers=auth_headers)

    assert response.status_code == 200
    assert [role["name"] for role in response.json()] == ["admin"]


def test_assign_and_revoke_role(
    client: TestClient, register_user, admin_headers: dict[str, str]
) -> None:
    user = register_user(email="staff@example.com")
    role = client.post("/roles", json={"name": "staff"}, headers=admin_headers).json()

    assigned = client.post(
        f"/users/{user['id']}/roles", json={"role_id": role["id"]}, headers=admin_headers
    )
    assert assigned.status_code == 200
    assert assigned.json()["roles"] == ["staff"]

    repeated = client.post(
        f"/users/{user['id']}/roles", json={"role_id": role["id"]}, headers=admin_headers
    )
    assert repeated.json()["roles"] == ["staff"]

    revoked = client.delete(
        f"/users/{user['id']}/roles/{role['id']}", headers=admin_headers
    )
    assert revoked.status_code == 200
    assert revoked.json()["roles"] == []

    not_held = client.delete(
        f"/users/{user['id']}/roles/{role['id']}", headers=admin_headers
    )
    assert not_held.status_code == 404


def test_assign_unknown_role_or_user_returns_404(
    client: TestClient, register_user, admin_headers: dict[str, str]
) -> None:
    user = register_user(email="lonely@example.com")

    missing_role = client.post(
        f"/users/{user['id']}/roles", json={"role_id": 999}, headers=admin_headers
    )
    assert missing_role.status_code == 404
    assert missing_role.json() == {"detail": "Role not found"}

    missing_user = client.post("/users/999/roles", json={"role_id": 1}, headers=admin_headers)
    assert missing_user.status_code == 404
    assert missing_user.json() == {"detail": "User not found"}


def test_deleting_role_detaches_it_from_users(
    client: TestClient, register_user, admin_headers: dict[str, str]
) -> None:
    user = register_user(email="holder@example.com")
    role = client.post("/roles", json={"name": "temp"}, headers=admin_headers).json()
    client.post(
        f"/users/{user['id']}/roles", json={"role_id": role["id"]}, headers=admin_headers
    )

    client.delete(f"/roles/{role['id']}", headers=admin_headers)

    refreshed = client.get(f"/users/{user['id']}", headers=admin_headers)
    assert refreshed.json()["roles"] == []


def test_blank_role_name_is_rejected(client: TestClient, admin_headers: dict[str, str]) -> None:
    created = client.post("/roles", json={"name": "   "}, headers=admin_headers)
    assert created.status_code == 400

    role = client.post("/roles", json={"name": "  editor  "}, headers=admin_headers).json()
    assert role["name"] == "editor"

    renamed = client.put(f"/roles/{role['id']}", json={"name": " "}, headers=admin_headers)
    assert renamed.status_code == 400
    assert client.get(f"/roles/{role['id']}", headers=admin_headers).json()["name"] == "editor"


def test_create_role_use_case_rejects_blank_name(session_factory) -> None:
    with session_factory() as session:
        with pytest.raises(DomainError):
            create_role(session, name="   ")


def test_concurrent_role_creation_with_same_name_conflicts(
    client: TestClient, admin_headers: dict[str, str], monkeypatch: pytest.MonkeyPatch
) -> None:
    client.post("/roles", json={"name": "auditor"}, headers=admin_headers)
    monkeypatch.setattr(RoleRepository, "get_by_name", lambda self, name: None)

    response = client.post("/roles", json={"name": "auditor"}, headers=admin_headers)

    assert response.status_code == 409
    assert response.json() == {"detail": "Role name is already in use"}


@pytest.mark.parametrize("role_id", ["99999999999999999999", "2147483648", "0"])
def test_out_of_range_role_id_is_rejected(
    client: TestClient, admin_headers: dict[str, str], role_id: str
) -> None:
    assert client.get(f"/roles/{role_id}", headers=admin_headers).status_code == 400
    assert client.delete(f"/roles/{role_id}", headers=admin_headers).status_code == 400
    assigned = client.post(
        "/users/1/roles", json={"role_id": int(role_id)}, headers=admin_headers
    )
    assert assigned.status_code == 400
