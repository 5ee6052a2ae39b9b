"""Database engine construction and session management."""

from __future__ import annotations

from collections.abc import Generator, Iterator
from contextlib import contextmanager

import logging

from fastapi import Request
from sqlalchemy import Engine, create_engine, text
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from app.config import DatabaseSettings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


logger = logging.getLogger(__name__)


def create_database_engine(settings: DatabaseSettings) -> Engine:
    """Create the engine for the configured database."""

    url = settings.sqlalchemy_url()
    connect_args: dict[str, object] = {}
    if url.get_backend_name() == "sqlite":
        # Requests are served from a threadpool; connections move between threads.
        connect_args["check_same_thread"] = False

    logger.info(
        "Creating database engine for %s",
        url.render_as_string(hide_password=True),
    )
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def check_database_connection(engine: Engine) -> None:
    """Open a connection and run a trivial query, raising on failure."""

    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))


def initialize_database(engine: Engine) -> None:
    """Ensure all ORM models have corresponding database tables."""

    from app.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=engine, checkfirst=True)


@contextmanager
def transaction(session: Session) -> Iterator[Session]:
    """Commit everything done inside the block at once, or nothing at all."""

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise


def get_db(request: Request) -> Generator[Session, None, None]:
    """Yield a database session bound to the application's engine."""

    session_factory: sessionmaker[Session] = request.app.state.session_factory
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


__all__ = [
    "Base",
    "check_database_connection",
    "create_database_engine",
    "create_session_factory",
    "get_db",
    "initialize_database",
    "transaction",
]
