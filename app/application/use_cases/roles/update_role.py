"""Use case for renaming a role."""

from dataclasses import replace

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.entities import Role
from app.domain.exceptions import ConflictError, DomainError, NotFoundError
from app.infrastructure.repositories import RoleRepository


def update_role(session: Session, *, role_id: int, name: str | None = None) -> Role:
    """Update the role identified by ``role_id``."""

    repository = RoleRepository(session)
    role = repository.get(role_id)
    if role is None:
        raise NotFoundError("Role", role_id)

    if name is None:
        return role

    normalized = name.strip()
    if not normalized:
        raise DomainError("Role name cannot be blank")
    existing = repository.get_by_name(normalized)
    if existing and existing.id != role_id:
        raise ConflictError("Role name is already in use")

    try:
        return repository.update(replace(role, name=normalized))
    except IntegrityError as exc:
        raise ConflictError("Role name is already in use") from exc
