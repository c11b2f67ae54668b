"""
Read-through cache for catalog queries.

Redis when REDIS_URL is set and reachable, an in-process dict otherwise.
Values are stored as JSON in both backends, so a hit always returns a fresh
copy of what was set.
"""

import fnmatch
import json
import logging
import time
from typing import Any, Callable

import redis

from app.config import settings

logger = logging.getLogger(__name__)

_cache: "CacheService | None" = None


class CacheService:
    """Key/value cache with per-entry TTL and glob-pattern deletes."""

    def __init__(
        self,
        redis_url: str | None = None,
        default_ttl: int = 3600,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.default_ttl = default_ttl
        self.redis_client = None
        self._memory_cache: dict[str, tuple[float, str]] = {}
        self._clock = clock

        if redis_url:
            try:
                client = redis.from_url(redis_url, decode_responses=True)
                client.ping()
                self.redis_client = client
                logger.info("Connected to Redis")
            except redis.RedisError as e:
                logger.warning("Redis not available, using memory cache: %s", e)
        else:
            logger.info("No Redis URL configured, using memory cache")

    @property
    def backend(self) -> str:
        return "redis" if self.redis_client is not None else "memory"

    def get(self, key: str) -> Any | None:
        """Return the cached value, or None on a miss, expiry or backend error."""
        try:
            if self.redis_client is not None:
                raw = self.redis_client.get(key)
            else:
                entry = self._memory_cache.get(key)
                if entry is None:
                    return None
                expires_at, raw = entry
                if self._clock() >= expires_at:
                    del self._memory_cache[key]
                    return None
            if raw is None:
                return None
            return json.loads(raw)
        except (redis.RedisError, ValueError) as e:
            logger.warning("Cache get error for %s: %s", key, e)
            return None

    def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        ttl = ttl if ttl is not None else self.default_ttl
        try:
            raw = json.dumps(value, default=str)
            if self.redis_client is not None:
                # SETEX rejects a non-positive expiry
                if ttl > 0:
                    self.redis_client.setex(key, ttl, raw)
                else:
                    self.redis_client.delete(key)
            else:
                self._memory_cache[key] = (self._clock() + ttl, raw)
            return True
        except (redis.RedisError, TypeError, ValueError) as e:
            logger.warning("Cache set error for %s: %s", key, e)
            return False

    def delete(self, key: str) -> None:
        if self.redis_client is not None:
            self.redis_client.delete(key)
        else:
            self._memory_cache.pop(key, None)

    def delete_pattern(self, pattern: str) -> int:
        """Delete every key matching a glob pattern (tech:skills:*). Returns the count."""
        if self.redis_client is not None:
            keys = list(self.redis_client.scan_iter(match=pattern, count=500))
            if keys:
                self.redis_client.delete(*keys)
            return len(keys)

        keys = [k for k in self._memory_cache if fnmatch.fnmatchcase(k, pattern)]
        for k in keys:
            del self._memory_cache[k]
        return len(keys)

    def get_stats(self) -> dict:
        if self.redis_client is not None:
            return {"backend": "redis", "keys": self.redis_client.dbsize()}
        now = self._clock()
        live = sum(1 for expires_at, _ in self._memory_cache.values() if expires_at > now)
        return {"backend": "memory", "entries": live}


def get_cache() -> CacheService:
    global _cache
    if _cache is None:
        _cache = CacheService(redis_url=settings.redis_url or None)
    return _cache
