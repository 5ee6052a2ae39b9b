"""Liveness endpoint reporting backend reachability."""

import logging

from fastapi import APIRouter, Request, Response, status
from sqlalchemy.exc import SQLAlchemyError

from app.infrastructure.cache import ping_cache
from app.infrastructure.database import check_database_connection
from app.interfaces.api.schemas import HealthRead

router = APIRouter(tags=["health"])
logger = logging.getLogger(__name__)


@router.get("/health", response_model=HealthRead)
def health(request: Request, response: Response) -> HealthRead:
    try:
        check_database_connection(request.app.state.engine)
        database_ok = True
    except SQLAlchemyError:
        logger.warning("Database health check failed", exc_info=True)
        database_ok = False

    cache_ok = ping_cache(request.app.state.cache)
    healthy = database_ok and cache_ok is not False
    if not healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HealthRead(
        status="ok" if healthy else "degraded",
        database=database_ok,
        cache=cache_ok,
    )
