import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from redis.asyncio import Redis

from app.config import Settings
from app.database import engine, init_db
from app.routers import home, review
from app.templating import STATIC_DIR

from prometheus_fastapi_instrumentator import Instrumentator

logging.basicConfig(level=Settings.LOG_LEVEL)
logger = logging.getLogger("storefront")

app = FastAPI(title="Eblen Sushi", version="0.1.0")
Instrumentator().instrument(app).expose(app)  # /metrics

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

app.include_router(home.router)
app.include_router(review.router)


@app.on_event("startup")
async def startup_event():
    app.state.redis = Redis.from_url(Settings.REDIS_URL) if Settings.REDIS_URL else None
    await init_db()
    logger.info("Storefront started (cache %s)", "on" if app.state.redis else "off")


@app.on_event("shutdown")
async def shutdown_event():
    if app.state.redis is not None:
        await app.state.redis.aclose()
    await engine.dispose()
