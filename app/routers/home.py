from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse
from sqlalchemy.ext.asyncio import async_sessionmaker

from app.config import Settings
from app.database import get_session_factory
from app.dependencies import get_catalog_cache
from app.services.storefront import load_storefront
from app.storage import public_url
from app.templating import templates
from app.utils.cache import CatalogCache
from app.utils.sampling import pick_random

router = APIRouter(tags=["pages"])

STAR_CHOICES = [5, 4, 3, 2, 1]


async def render_home(
    request: Request,
    session_factory: async_sessionmaker,
    cache: CatalogCache,
    form: Optional[dict] = None,
    errors: Optional[dict] = None,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    storefront = await load_storefront(session_factory, cache)
    context = {
        "hero_image_url": public_url(Settings.HERO_IMAGE_KEY),
        "products": storefront.products,
        "reviews": pick_random(storefront.reviews, Settings.REVIEWS_ON_PAGE),
        "star_choices": STAR_CHOICES,
        "form": form or {"name": "", "stars": "5", "text": ""},
        "errors": errors or {},
    }
    return templates.TemplateResponse(request, "index.html", context, status_code=status_code)


@router.get("/", response_class=HTMLResponse)
async def home(
    request: Request,
    session_factory: async_sessionmaker = Depends(get_session_factory),
    cache: CatalogCache = Depends(get_catalog_cache),
):
    return await render_home(request, session_factory, cache)


@router.get("/health")
async def health():
    return {"status": "ok"}
