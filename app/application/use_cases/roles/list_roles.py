"""Use case for listing roles."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Role
from app.infrastructure.repositories import RoleRepository


def list_roles(session: Session, *, skip: int = 0, limit: int = 100) -> Sequence[Role]:
    return RoleRepository(session).list(skip=skip, limit=limit)
