import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from app.models.product import Product
from app.models.review import Review
from app.schemas.product import ProductRead
from app.schemas.review import ReviewRead
from app.schemas.storefront import Storefront
from app.utils.cache import CatalogCache

logger = logging.getLogger(__name__)


async def list_products(session_factory: async_sessionmaker) -> list[ProductRead]:
    async with session_factory() as session:
        result = await session.scalars(select(Product).order_by(Product.id.asc()))
        return [ProductRead.model_validate(p) for p in result]


async def list_reviews(session_factory: async_sessionmaker) -> list[ReviewRead]:
    async with session_factory() as session:
        result = await session.scalars(
            select(Review).order_by(Review.created_at.desc(), Review.id.desc())
        )
        return [ReviewRead.model_validate(r) for r in result]


async def load_storefront(session_factory: async_sessionmaker, cache: CatalogCache) -> Storefront:
    """Products and reviews for the home page.

    Both collections are read concurrently, each in its own session. A failed
    read degrades to an empty list; such a partial result is not cached. The
    cache generation is taken before reading, so a snapshot that raced with an
    invalidation is stored under a stale key.
    """
    generation = await cache.generation()
    cached = await cache.get(generation)
    if cached is not None:
        return cached

    products, reviews = await asyncio.gather(
        list_products(session_factory),
        list_reviews(session_factory),
        return_exceptions=True,
    )

    products = _unwrap("products", products)
    reviews = _unwrap("reviews", reviews)
    complete = products is not None and reviews is not None

    storefront = Storefront(products=products or [], reviews=reviews or [], complete=complete)
    if complete:
        await cache.set(storefront, generation)
    return storefront


def _unwrap(collection: str, result):
    if isinstance(result, (SQLAlchemyError, OSError)):
        logger.error("Failed to load %s: %s", collection, result)
        return None
    if isinstance(result, BaseException):
        raise result
    return result
