"""Application factory and startup sequence."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from redis import RedisError
from sqlalchemy.exc import SQLAlchemyError

from app.config import Settings, load_settings
from app.infrastructure.cache import connect_cache
from app.infrastructure.database import (
    check_database_connection,
    create_database_engine,
    create_session_factory,
    initialize_database,
)
from app.interfaces.api.errors import register_exception_handlers
from app.interfaces.api.middleware import RequestLoggingMiddleware
from app.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


class StartupError(RuntimeError):
    """A backend required at startup could not be reached."""


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect the database, then the cache; abort startup if either fails."""

    settings: Settings = app.state.settings

    engine = create_database_engine(settings.database)
    try:
        check_database_connection(engine)
        initialize_database(engine)
    except SQLAlchemyError as exc:
        engine.dispose()
        logger.critical("Could not connect to the database: %s", exc)
        raise StartupError("Database connection failed") from exc

    try:
        cache = connect_cache(settings.redis)
    except RedisError as exc:
        engine.dispose()
        logger.critical("Could not connect to Redis: %s", exc)
        raise StartupError("Cache connection failed") from exc

    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.cache = cache
    logger.info("Startup complete")
    try:
        yield
    finally:
        if cache is not None:
            cache.close()
        engine.dispose()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Infrastructure handles are created by the lifespan and kept on
    ``app.state``; nothing is opened at import time.
    """

    app = FastAPI(title="Users, roles and products API", lifespan=lifespan)
    app.state.settings = settings if settings is not None else load_settings()

    app.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(app)
    register_routes(app)
    return app
