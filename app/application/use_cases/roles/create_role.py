"""Use case for creating roles."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.entities import Role
from app.domain.exceptions import ConflictError, DomainError
from app.infrastructure.repositories import RoleRepository


def create_role(session: Session, *, name: str) -> Role:
    """Create a role whose name is not taken yet (case-insensitive)."""

    repository = RoleRepository(session)
    normalized = name.strip()
    if not normalized:
        raise DomainError("Role name cannot be blank")
    if repository.get_by_name(normalized):
        raise ConflictError("Role name is already in use")
    try:
        return repository.create(Role(id=None, name=normalized))
    except IntegrityError as exc:
        raise ConflictError("Role name is already in use") from exc
