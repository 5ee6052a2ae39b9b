"""Routes to manage roles."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.roles import (
    create_role as create_role_uc,
    delete_role as delete_role_uc,
    get_role as get_role_uc,
    list_roles as list_roles_uc,
    update_role as update_role_uc,
)
from app.domain.entities import User
from app.domain.exceptions import DomainError
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_user, require_admin
from app.interfaces.api.presenters import present_role
from app.interfaces.api.routes_helpers import EntityId, Limit, Skip, to_http_exception
from app.interfaces.api.schemas import RoleCreate, RoleRead, RoleUpdate

router = APIRouter(prefix="/roles", tags=["roles"])


@router.post("", response_model=RoleRead, status_code=status.HTTP_201_CREATED)
def create_role(
    role_in: RoleCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    try:
        role = create_role_uc(db, name=role_in.name)
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    return present_role(role)


@router.get("", response_model=list[RoleRead])
def list_roles(
    skip: Skip = 0,
    limit: Limit = 100,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    return [present_role(role) for role in list_roles_uc(db, skip=skip, limit=limit)]


@router.get("/{role_id}", response_model=RoleRead)
def read_role(
    role_id: EntityId,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    try:
        role = get_role_uc(db, role_id)
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    return present_role(role)


@router.put("/{role_id}", response_model=RoleRead)
def update_role(
    role_id: EntityId,
    role_in: RoleUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    try:
        role = update_role_uc(db, role_id=role_id, name=role_in.name)
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    return present_role(role)


@router.delete("/{role_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_role(
    role_id: EntityId,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """Delete the role, removing it from every user that held it."""

    try:
        delete_role_uc(db, role_id)
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
