import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.database import get_session, get_session_factory
from app.dependencies import get_catalog_cache
from app.routers.home import render_home
from app.services.reviews import ReviewRejected, create_review, validate_review
from app.utils.cache import CatalogCache

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/reviews",
    tags=["reviews"],
)


@router.post("/")
async def submit_review(
    request: Request,
    name: Optional[str] = Form(None),
    stars: Optional[str] = Form(None),
    text: Optional[str] = Form(None),
    session: AsyncSession = Depends(get_session),
    session_factory: async_sessionmaker = Depends(get_session_factory),
    cache: CatalogCache = Depends(get_catalog_cache),
):
    try:
        data = validate_review(name, stars, text)
    except ReviewRejected as e:
        logger.info("Review rejected: %s", e)
        form = {"name": name or "", "stars": stars or "5", "text": text or ""}
        return await render_home(
            request,
            session_factory,
            cache,
            form=form,
            errors=e.errors,
            status_code=422,
        )

    review = await create_review(session, data)
    if review is not None:
        await cache.invalidate()

    return RedirectResponse("/#reviews", status_code=status.HTTP_303_SEE_OTHER)
