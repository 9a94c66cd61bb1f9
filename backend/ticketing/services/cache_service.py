"""
Redis caching service for venue listings.

CACHING STRATEGY
================

What we cache:
  - Venue listing responses per tenant (JSON-serialized)
  - Cache key pattern: "venues:list:tenant={tenant_id}"

Why:
  - Venue lists back every show-scheduling form and change rarely

Invalidation strategy:
  - On venue create/update/delete: delete that tenant's key
  - TTL-based expiry as safety net (REDIS_CACHE_TTL)

What we never cache:
  - Show capacity and ticket offers. The capacity ledger must read
    allocation fresh inside its transaction; a cached value is exactly the
    stale read that lets two writers overbook a show.

Redis is optional. Every operation fails open: on any Redis error the
caller falls through to the database.
"""

import json
from typing import Optional

import redis.asyncio as redis
from ticketing.core.config import get_settings
from ticketing.core.logging import get_logger
from ticketing.core.metrics import record_cache_operation

logger = get_logger(__name__)
settings = get_settings()

_redis_client: Optional[redis.Redis] = None


async def get_redis() -> Optional[redis.Redis]:
    """Get or create Redis connection. Returns None if Redis is disabled or unreachable."""
    global _redis_client

    if not settings.REDIS_ENABLED:
        return None

    if _redis_client is None:
        try:
            _redis_client = redis.from_url(
                settings.REDIS_URL,
                encoding="utf-8",
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5,
                retry_on_timeout=True,
            )
            await _redis_client.ping()
            logger.info("redis_connected", url=settings.REDIS_URL)
        except Exception as e:
            logger.error("redis_connection_failed", error=str(e))
            _redis_client = None
            return None

    return _redis_client


async def close_redis() -> None:
    """Close Redis connection on shutdown."""
    global _redis_client
    if _redis_client:
        await _redis_client.close()
        _redis_client = None


def _make_venue_list_key(tenant_id: int) -> str:
    return f"venues:list:tenant={tenant_id}"


async def get_cached_venues(tenant_id: int) -> Optional[list]:
    client = await get_redis()
    if not client:
        return None

    key = _make_venue_list_key(tenant_id)
    try:
        data = await client.get(key)
        record_cache_operation("get", hit=bool(data))
        if data:
            logger.debug("cache_hit", key=key)
            return json.loads(data)
        logger.debug("cache_miss", key=key)
    except Exception as e:
        logger.error("cache_get_error", key=key, error=str(e))

    return None


async def set_cached_venues(tenant_id: int, data: list) -> None:
    client = await get_redis()
    if not client:
        return

    key = _make_venue_list_key(tenant_id)
    try:
        await client.setex(key, settings.REDIS_CACHE_TTL, json.dumps(data, default=str))
        logger.debug("cache_set", key=key, ttl=settings.REDIS_CACHE_TTL)
    except Exception as e:
        logger.error("cache_set_error", key=key, error=str(e))


async def invalidate_venue_cache(tenant_id: int) -> None:
    client = await get_redis()
    if not client:
        return

    key = _make_venue_list_key(tenant_id)
    try:
        await client.delete(key)
        logger.info("cache_invalidated", key=key)
    except Exception as e:
        logger.error("cache_invalidation_error", key=key, error=str(e))


async def get_cache_stats() -> dict:
    """Get Redis cache statistics for monitoring."""
    client = await get_redis()
    if not client:
        return {"status": "disabled"}

    try:
        info = await client.info("stats")
        hits = info.get("keyspace_hits", 0)
        misses = info.get("keyspace_misses", 0)
        return {
            "status": "connected",
            "hits": hits,
            "misses": misses,
            "hit_rate": round(hits / max(hits + misses, 1) * 100, 2),
        }
    except Exception as e:
        return {"status": "error", "error": str(e)}
