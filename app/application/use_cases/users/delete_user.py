"""Use case for deleting a user."""

from sqlalchemy.orm import Session

from app.domain.exceptions import NotFoundError
from app.infrastructure.repositories import UserRepository


def delete_user(session: Session, user_id: int) -> None:
    """Delete the specified user from the system."""

    repository = UserRepository(session)
    if repository.get(user_id) is None:
        raise NotFoundError("User", user_id)
    repository.delete(user_id)
