"""
Result cache for expensive clrsKit computations (benchmark runs).

An in-process TTL store is always consulted first. Redis is used when a
server is reachable; otherwise the cache silently stays in-process.
"""

import hashlib
import logging
import os
import pickle
import time
import zlib
from typing import Any, Dict, Optional, Tuple

import redis

logger = logging.getLogger(__name__)

_CLIENT: Optional[redis.Redis] = None
_CLIENT_FAILED = False
_MEM: Dict[str, Tuple[float, bytes]] = {}

KEY_PREFIX = "clrskit:"


def get_redis_client() -> Optional[redis.Redis]:
    """Return a connected Redis client, or None when Redis is unavailable.

    Reads `CLRSKIT_REDIS_URL` (or `REDIS_URL`), else `REDIS_HOST`,
    `REDIS_PORT` and `REDIS_DB`. Setting `CLRSKIT_CACHE_BACKEND=memory`
    skips Redis entirely. A failed connection is not retried.
    """
    global _CLIENT, _CLIENT_FAILED
    if _CLIENT is not None:
        return _CLIENT
    if _CLIENT_FAILED or os.getenv("CLRSKIT_CACHE_BACKEND", "").lower() == "memory":
        return None
    url = os.getenv("CLRSKIT_REDIS_URL") or os.getenv("REDIS_URL")
    try:
        if url:
            client = redis.Redis.from_url(url, socket_connect_timeout=1)
        else:
            client = redis.Redis(
                host=os.getenv("REDIS_HOST", "127.0.0.1"),
                port=int(os.getenv("REDIS_PORT", "6379")),
                db=int(os.getenv("REDIS_DB", "0")),
                socket_connect_timeout=1,
            )
        client.ping()
    except (redis.RedisError, ValueError) as e:
        logger.debug("Redis unavailable, using in-memory cache only: %s", e)
        _CLIENT_FAILED = True
        return None
    _CLIENT = client
    return _CLIENT


def reset_cache() -> None:
    """Drop the in-memory entries and forget the Redis client."""
    global _CLIENT, _CLIENT_FAILED
    _MEM.clear()
    _CLIENT = None
    _CLIENT_FAILED = False


def default_ttl(kind: str = "heavy") -> int:
    if kind == "short":
        return int(os.getenv("CLRSKIT_CACHE_TTL_SHORT_SECONDS", "600"))
    # heavy default
    return int(os.getenv("CLRSKIT_CACHE_TTL_SECONDS", "3600"))


def khash(*parts: Any) -> str:
    h = hashlib.sha256()
    for p in parts:
        if isinstance(p, bytes):
            h.update(p)
        else:
            h.update(str(p).encode("utf-8", errors="ignore"))
        h.update(b"|")
    return KEY_PREFIX + h.hexdigest()


def _sweep_expired(now: float) -> None:
    for stale in [k for k, (exp, _) in _MEM.items() if exp <= now]:
        del _MEM[stale]


def cache_get(key: str) -> Optional[Any]:
    # In-memory first
    now = time.time()
    exp, raw = _MEM.get(key, (0.0, b""))
    if exp > now and raw:
        return pickle.loads(zlib.decompress(raw))
    _MEM.pop(key, None)

    client = get_redis_client()
    if client is None:
        return None
    try:
        raw = client.get(key)
        if not raw:
            return None
        ttl = client.ttl(key)
    except redis.RedisError as e:
        logger.warning("Redis read failed for %s: %s", key, e)
        return None
    val = pickle.loads(zlib.decompress(raw))
    _MEM[key] = (now + (ttl if ttl and ttl > 0 else default_ttl("short")), raw)
    return val


def cache_set(key: str, value: Any, ttl: Optional[int] = None) -> None:
    raw = zlib.compress(pickle.dumps(value, protocol=pickle.HIGHEST_PROTOCOL))
    _ttl = int(ttl if ttl is not None else default_ttl("heavy"))
    now = time.time()
    _sweep_expired(now)
    _MEM[key] = (now + _ttl, raw)
    client = get_redis_client()
    if client is None:
        return
    try:
        client.set(key, raw, ex=_ttl)
    except redis.RedisError as e:
        logger.warning("Redis write failed for %s: %s", key, e)
