"""
Redis cache for the analytics report.
If Redis unavailable, caching is disabled and all ops no-op.

Reports are stored under a generation-scoped key (analytics_report:<n>). Recording an
action bumps the generation, so a report that was built before the bump and written
after it lands under a key nobody reads anymore.
"""
import json
from typing import Any

from backend.app.core.config import ANALYTICS_CACHE_KEY, settings
from backend.app.core.logging_config import get_logger

logger = get_logger("utils.cache")
_client = None

REPORT_GENERATION_KEY = f"{ANALYTICS_CACHE_KEY}:generation"


async def connect() -> None:
    global _client
    url = settings.redis_url
    if not url:
        logger.warning("redis_url not set; analytics report caching disabled")
        return
    try:
        from redis import asyncio as aioredis
        _client = aioredis.Redis.from_url(
            url, encoding="utf-8", decode_responses=True
        )
        await _client.ping()
        logger.info("Redis connected; analytics report caching enabled")
    except Exception as e:
        _client = None
        logger.warning("Redis connect failed: %s; analytics report caching disabled", e)


async def close() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None


async def get(key: str) -> Any:
    if not _client:
        return None
    try:
        val = await _client.get(key)
        return json.loads(val) if val else None
    except Exception as e:
        logger.debug("cache get failed key=%s: %s", key, e)
        return None


async def set(key: str, value: Any, ttl: int | None = None) -> None:
    if not _client:
        return
    ttl_val = ttl if ttl is not None else settings.analytics_cache_ttl
    try:
        await _client.set(key, json.dumps(value, default=str), ex=ttl_val)
    except Exception as e:
        logger.debug("cache set failed key=%s: %s", key, e)


async def incr(key: str) -> None:
    if not _client:
        return
    try:
        await _client.incr(key)
    except Exception as e:
        logger.debug("cache incr failed key=%s: %s", key, e)


# --- Analytics report ---

def report_key(generation: int) -> str:
    return f"{ANALYTICS_CACHE_KEY}:{generation}"


async def report_generation() -> int:
    """Current report generation; read it before building a report and store under it."""
    value = await get(REPORT_GENERATION_KEY)
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


async def get_report(generation: int) -> dict | None:
    return await get(report_key(generation))


async def store_report(generation: int, report: dict) -> None:
    await set(report_key(generation), report, ttl=settings.analytics_cache_ttl)


async def invalidate_report() -> None:
    """Called after every recorded action."""
    await incr(REPORT_GENERATION_KEY)
