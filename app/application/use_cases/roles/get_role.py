"""Use case for retrieving a single role."""

from sqlalchemy.orm import Session

from app.domain.entities import Role
from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import RoleRepository


def get_role(session: Session, role_id: int) -> Role:
    role = RoleRepository(session).get(role_id)
    if role is None:
        raise NotFoundError("Role", role_id)
    return role
