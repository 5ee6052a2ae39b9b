"""Use cases for granting and revoking roles on a user."""

from dataclasses import replace

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import RoleRepository, UserRepository


def assign_role(session: Session, *, user_id: int, role_id: int) -> User:
    """Grant ``role_id`` to the user; granting an existing role is a no-op."""

    repository = UserRepository(session)
    user = repository.get(user_id)
    if user is None:
        raise NotFoundError("User", user_id)

    role = RoleRepository(session).get(role_id)
    if role is None:
        raise NotFoundError("Role", role_id)

    if any(existing.id == role.id for existing in user.roles):
        return user

    return repository.update(replace(user, roles=[*user.roles, role]))


def revoke_role(session: Session, *, user_id: int, role_id: int) -> User:
    """Remove ``role_id`` from the user's roles."""

    repository = UserRepository(session)
    user = repository.get(user_id)
    if user is None:
        raise NotFoundError("User", user_id)

    remaining = [role for role in user.roles if role.id != role_id]
    if len(remaining) == len(user.roles):
        raise NotFoundError("Role", role_id)

    return repository.update(replace(user, roles=remaining))
