"""Use case for updating user information."""

from dataclasses import replace

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.entities import User
from app.domain.exceptions import ConflictError, NotFoundError
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import get_password_hash


def update_user(
    session: Session,
    *,
    user_id: int,
    name: str | None = None,
    email: str | None = None,
    password: str | None = None,
) -> User:
    """Update the provided user with the new values."""

    repository = UserRepository(session)
    current_user = repository.get(user_id)
    if current_user is None:
        raise NotFoundError("User", user_id)

    new_email = current_user.email
    if email is not None and email.lower() != current_user.email.lower():
        existing_with_email = repository.get_by_email(email)
        if existing_with_email and existing_with_email.id != user_id:
            raise ConflictError("Email is already registered")
        new_email = email

    updated_user = replace(
        current_user,
        name=name if name is not None else current_user.name,
        email=new_email,
    )
    if password:
        updated_user = replace(updated_user, password=get_password_hash(password))

    try:
        return repository.update(updated_user)
    except IntegrityError as exc:
        raise ConflictError("Email is already registered") from exc
