import logging
from typing import Optional

from pydantic import ValidationError
from redis.asyncio import Redis
from redis.exceptions import RedisError

from app.schemas.storefront import Storefront

logger = logging.getLogger(__name__)

GENERATION_KEY = "storefront:gen"


def storefront_key(generation: int) -> str:
    return f"storefront:home:{generation}"


class CatalogCache:
    """Redis-backed copy of the data behind the home page.

    Snapshots are stored per generation. ``invalidate()`` bumps the
    generation, so a snapshot loaded before an insert lands under a key that
    is never read again. Without a client every call is a no-op and the page
    is always read straight from the database.
    """

    def __init__(self, redis: Optional[Redis], ttl: int):
        self._redis = redis
        self._ttl = ttl

    async def generation(self) -> int | None:
        if self._redis is None:
            return None
        try:
            raw = await self._redis.get(GENERATION_KEY)
        except RedisError as e:
            logger.warning("Cache read failed: %s", e)
            return None
        return int(raw) if raw is not None else 0

    async def get(self, generation: int | None) -> Storefront | None:
        if self._redis is None or generation is None:
            return None
        key = storefront_key(generation)
        try:
            raw = await self._redis.get(key)
        except RedisError as e:
            logger.warning("Cache read failed: %s", e)
            return None
        if raw is None:
            return None
        try:
            return Storefront.model_validate_json(raw)
        except ValidationError:
            logger.warning("Dropping malformed cache entry %s", key)
            await self._delete(key)
            return None

    async def set(self, storefront: Storefront, generation: int | None) -> None:
        if self._redis is None or generation is None:
            return
        try:
            await self._redis.set(storefront_key(generation), storefront.model_dump_json(), ex=self._ttl)
        except RedisError as e:
            logger.warning("Cache write failed: %s", e)

    async def invalidate(self) -> None:
        if self._redis is None:
            return
        try:
            generation = await self._redis.incr(GENERATION_KEY)
        except RedisError as e:
            logger.warning("Cache invalidation failed: %s", e)
            return
        await self._delete(storefront_key(generation - 1))

    async def _delete(self, key: str) -> None:
        try:
            await self._redis.delete(key)
        except RedisError as e:
            logger.warning("Cache delete failed: %s", e)
