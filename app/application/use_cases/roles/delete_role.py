"""Use case for deleting a role."""

from sqlalchemy.orm import Session

from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import RoleRepository


def delete_role(session: Session, role_id: int) -> None:
    """Delete the role and detach it from every user holding it."""

    repository = RoleRepository(session)
    if repository.get(role_id) is None:
        raise NotFoundError("Role", role_id)
    repository.delete(role_id)
