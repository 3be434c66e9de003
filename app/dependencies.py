from fastapi import Depends, Request

from app.config import Settings
from app.utils.cache import CatalogCache


async def get_redis(request: Request):
    return getattr(request.app.state, "redis", None)


async def get_catalog_cache(redis=Depends(get_redis)) -> CatalogCache:
    return CatalogCache(redis, Settings.TTL)
