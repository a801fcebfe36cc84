"""
Store connection helper.

This module centralizes how the Redis client is created. The client
holds its own connection pool, so callers build it once per process and
inject it into `RecognitionRepo`.

Usage:
    from db import get_client
    client = get_client()
    client.ping()
"""

import redis
from settings import settings


def get_client() -> redis.Redis:
    """Return a Redis client for `settings.redis_url`.

    Responses are decoded to `str` so the codec works with plain strings.
    The timeouts keep HTTP requests from hanging when the store is down.
    """

    return redis.Redis.from_url(
        settings.redis_url,
        decode_responses=True,
        socket_connect_timeout=settings.redis_timeout,
        socket_timeout=settings.redis_timeout,
    )
