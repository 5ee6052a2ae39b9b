"""Use case for authenticating a user."""

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.domain.exceptions import AuthenticationError
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import verify_password


def authenticate_user(session: Session, email: str, password: str) -> User:
    """Return the user owning ``email`` when ``password`` matches."""

    user = UserRepository(session).get_by_email(email)
    if user is None or not verify_password(password, user.password):
        raise AuthenticationError("Incorrect email or password")
    return user
