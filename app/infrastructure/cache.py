"""Redis client bootstrap."""

from __future__ import annotations

import logging

import redis

from app.config import RedisSettings

logger = logging.getLogger(__name__)


def connect_cache(settings: RedisSettings) -> redis.Redis | None:
    """Return a connected Redis client, or ``None`` when the cache is disabled.

    The connection is verified with a single ``PING``; any failure propagates
    to the caller so startup can abort.
    """

    if not settings.enabled:
        logger.info("Redis cache disabled, no client created")
        return None

    logger.info("Connecting to Redis at %s:%s", settings.host, settings.port)
    client = redis.Redis(
        host=settings.host,
        port=settings.port,
        db=settings.db,
        decode_responses=True,
    )
    try:
        client.ping()
    except redis.RedisError:
        client.close()
        raise
    return client


def ping_cache(client: redis.Redis | None) -> bool | None:
    """Report cache reachability; ``None`` means no cache is configured."""

    if client is None:
        return None
    try:
        return bool(client.ping())
    except redis.RedisError:
        logger.warning("Redis ping failed", exc_info=True)
        return False


__all__ = ["connect_cache", "ping_cache"]
