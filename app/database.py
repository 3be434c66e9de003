from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.config import Settings

DATABASE_URL = Settings.POSTGRES_URL

engine = create_async_engine(DATABASE_URL, pool_size=10, max_overflow=20)

# фабрика сессий
async_session = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


class Base(DeclarativeBase):
    """Базовый класс моделей"""
    pass


async def init_db():
    """Создание схемы при первом старте"""
    # модели должны быть зарегистрированы в metadata
    from app.models import product, review  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


def get_session_factory() -> async_sessionmaker:
    return async_session


async def get_session(
    session_factory: async_sessionmaker = Depends(get_session_factory),
) -> AsyncSession:
    async with session_factory() as session:
        yield session
