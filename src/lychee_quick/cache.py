"""API response cache backed by Upstash Redis.

Slow listings (Linear issues, Vercel projects, ...) are memoised in Redis for
a few minutes so interactive prompts open instantly. Values are stored as
JSON text. Without `REDIS_URL` / `REDIS_TOKEN` the cache is a pass-through.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter
from upstash_redis import Redis

from lychee_quick.config import LycheeSettings

logger = logging.getLogger(__name__)

T = TypeVar("T")

SECOND_MS = 1000
MINUTE_MS = 60 * SECOND_MS


class ResponseCache:
    """Memoise fetch results in Redis with a millisecond TTL."""

    def __init__(self, redis: Redis | None) -> None:
        self._redis = redis

    @classmethod
    def from_settings(cls, settings: LycheeSettings) -> ResponseCache:
        if not settings.redis_url or not settings.redis_token:
            logger.debug("REDIS_URL/REDIS_TOKEN not set; response cache disabled")
            return cls(None)
        return cls(Redis(url=settings.redis_url, token=settings.redis_token))

    @property
    def enabled(self) -> bool:
        return self._redis is not None

    def get(self, key: str, ttl_ms: int, fetch: Callable[[], Any], force: bool = False) -> Any:
        """Return the cached value for `key`, fetching and storing it on a miss.

        `force` skips the lookup and overwrites whatever is stored.
        """

        if self._redis is None:
            return fetch()

        if not force:
            raw = self._redis.get(key)
            if raw:
                value = json.loads(raw) if isinstance(raw, str) else raw
                if value:
                    logger.debug("Cache hit", extra={"key": key})
                    return value

        data = fetch()
        self._redis.set(key, json.dumps(data, ensure_ascii=False), px=ttl_ms)
        logger.debug("Cache stored", extra={"key": key, "ttl_ms": ttl_ms, "force": force})
        return data

    def remove(self, key: str) -> None:
        if self._redis is None:
            return
        self._redis.delete(key)


class CachedQuery(Generic[T]):
    """A cached list query with an in-process memo on top of `ResponseCache`."""

    def __init__(
        self,
        *,
        cache: ResponseCache,
        key: str,
        ttl_ms: int,
        fetch: Callable[[], list[T]],
        item_type: type[T],
        force: bool = False,
    ) -> None:
        self.key = key
        self.ttl_ms = ttl_ms
        self._cache = cache
        self._fetch = fetch
        self._adapter: TypeAdapter[list[T]] = TypeAdapter(list[item_type])  # type: ignore[valid-type]
        self._force = force
        self._items: list[T] = []

    @property
    def items(self) -> list[T]:
        return self._items

    def _fetch_json(self) -> list[Any]:
        return self._adapter.dump_python(self._fetch(), mode="json", by_alias=True)

    def get(self) -> list[T]:
        if self._items and not self._force:
            return self._items

        raw = self._cache.get(self.key, self.ttl_ms, self._fetch_json, force=self._force)
        self._items = self._adapter.validate_python(raw)
        # Only the first read of a run bypasses the cache.
        self._force = False
        return self._items
