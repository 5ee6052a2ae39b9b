"""Use case for creating users."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.entities import User
from app.domain.exceptions import ConflictError
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import get_password_hash


def create_user(
    session: Session,
    *,
    name: str,
    email: str,
    password: str,
) -> User:
    """Create a new user ensuring unique email addresses."""

    repository = UserRepository(session)

    if repository.get_by_email(email):
        raise ConflictError("Email is already registered")

    user = User(
        id=None,
        name=name,
        email=email,
        password=get_password_hash(password),
    )
    try:
        return repository.create(user)
    except IntegrityError as exc:
        # Another request registered the same email after the check above.
        raise ConflictError("Email is already registered") from exc
