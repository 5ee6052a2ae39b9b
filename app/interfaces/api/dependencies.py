"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.config import Settings
from app.domain.entities import User
from app.domain.exceptions import AuthenticationError
from app.infrastructure.database import get_db
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import decode_access_token

# Answers 401 on its own when the header is missing or not a Bearer credential.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")


def _credentials_exception() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_settings(request: Request) -> Settings:
    """Return the settings the application was created with."""

    return request.app.state.settings


def resolve_current_user(token: str, db: Session, settings: Settings) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token, secret=settings.auth.jwt_secret)
    except AuthenticationError as exc:
        raise _credentials_exception() from exc

    subject = payload.get("sub")
    try:
        user_id = int(subject)
    except (TypeError, ValueError) as exc:
        raise _credentials_exception() from exc

    user = UserRepository(db).get(user_id)
    if user is None:
        raise _credentials_exception()
    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> User:
    """Return the authenticated user from the provided token."""

    return resolve_current_user(token, db, settings)


def require_role(name: str):
    """Build a dependency that only lets users holding role ``name`` through."""

    def dependency(current_user: User = Depends(get_current_user)) -> User:
        if not current_user.has_role(name):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Not authorized",
            )
        return current_user

    return dependency


require_admin = require_role("admin")
