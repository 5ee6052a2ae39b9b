"""Routes to manage users and their roles."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.users import (
    assign_role as assign_role_uc,
    create_user as create_user_uc,
    delete_user as delete_user_uc,
    get_user as get_user_uc,
    list_users as list_users_uc,
    revoke_role as revoke_role_uc,
    update_user as update_user_uc,
)
from app.domain.entities import User
from app.domain.exceptions import DomainError
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_user, require_admin
from app.interfaces.api.presenters import present_user
from app.interfaces.api.routes_helpers import EntityId, Limit, Skip, to_http_exception
from app.interfaces.api.schemas import RoleAssignment, UserCreate, UserRead, UserUpdate

router = APIRouter(prefix="/users", tags=["users"])
logger = logging.getLogger(__name__)


def _forbidden() -> HTTPException:
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized")


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(user_in: UserCreate, db: Session = Depends(get_db)):
    """Register a new user account."""

    try:
        user = create_user_uc(
            db,
            name=user_in.name,
            email=user_in.email,
            password=user_in.password,
        )
    except DomainError as exc:
        raise to_http_exception(exc) from exc

    logger.info("Registered user %s", user.id)
    return present_user(user)


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_user)):
    """Return the authenticated user."""

    return present_user(current_user)


@router.get("", response_model=list[UserRead])
def list_users(
    skip: Skip = 0,
    limit: Limit = 100,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    users = list_users_uc(db, skip=skip, limit=limit)
    return [present_user(user) for user in users]


@router.get("/{user_id}", response_model=UserRead)
def read_user(
    user_id: EntityId,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    """Return the user identified by ``user_id``."""

    try:
        user = get_user_uc(db, user_id)
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    return present_user(user)


@router.put("/{user_id}", response_model=UserRead)
def update_user(
    user_id: EntityId,
    user_in: UserUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Update a user; only the user themself or an administrator may do so."""

    if user_id != current_user.id and not current_user.is_admin():
        raise _forbidden()

    update_data = user_in.model_dump(exclude_unset=True)
    try:
        user = update_user_uc(
            db,
            user_id=user_id,
            name=update_data.get("name"),
            email=update_data.get("email"),
            password=update_data.get("password"),
        )
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    return present_user(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: EntityId,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if user_id != current_user.id and not current_user.is_admin():
        raise _forbidden()

    try:
        delete_user_uc(db, user_id)
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{user_id}/roles", response_model=UserRead)
def assign_role(
    user_id: EntityId,
    assignment: RoleAssignment,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """Grant a role to the user."""

    try:
        user = assign_role_uc(db, user_id=user_id, role_id=assignment.role_id)
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    return present_user(user)


@router.delete("/{user_id}/roles/{role_id}", response_model=UserRead)
def revoke_role(
    user_id: EntityId,
    role_id: EntityId,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    try:
        user = revoke_role_uc(db, user_id=user_id, role_id=role_id)
    except DomainError as exc:
        raise to_http_exception(exc) from exc
    return present_user(user)
