"""Endpoints related to authentication."""

import logging
from datetime import timedelta

from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from app.application.use_cases.users import authenticate_user
from app.config import Settings
from app.domain.exceptions import AuthenticationError
from app.infrastructure.database import get_db
from app.infrastructure.security import create_access_token
from app.interfaces.api.dependencies import get_settings
from app.interfaces.api.routes_helpers import to_http_exception
from app.interfaces.api.schemas import Token

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Authenticate by email and password and return a signed JWT."""

    try:
        user = authenticate_user(db, form_data.username, form_data.password)
    except AuthenticationError as exc:
        logger.info("Rejected login for %s", form_data.username)
        raise to_http_exception(exc) from exc

    access_token = create_access_token(
        data={"sub": str(user.id)},
        secret=settings.auth.jwt_secret,
        expires_delta=timedelta(minutes=settings.auth.token_expiry),
    )
    return {"access_token": access_token, "token_type": "bearer"}
