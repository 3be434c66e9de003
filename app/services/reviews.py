import logging
from typing import Optional

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.review import Review
from app.schemas.review import ReviewCreate

logger = logging.getLogger(__name__)

FIELD_ERRORS = {
    "name": "Укажите имя",
    "stars": "Выберите оценку от 1 до 5",
    "text": "Напишите текст отзыва",
}


class ReviewRejected(ValueError):
    """Submitted review form did not pass validation."""

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))


def validate_review(
    name: Optional[str],
    stars_raw: Optional[str],
    text: Optional[str],
) -> ReviewCreate:
    """Normalize raw form fields into a :class:`ReviewCreate`.

    Name and text are stripped and must stay non-empty; ``stars_raw`` must parse
    as an integer in 1..5. Raises :class:`ReviewRejected` otherwise.
    """
    try:
        return ReviewCreate(name=name, stars=stars_raw, text=text)
    except ValidationError as e:
        errors = {}
        for err in e.errors():
            field = str(err["loc"][0])
            errors.setdefault(field, FIELD_ERRORS.get(field, err["msg"]))
        raise ReviewRejected(errors) from e


async def create_review(session: AsyncSession, data: ReviewCreate) -> Review | None:
    """Insert the review; a store failure is logged and yields ``None``."""
    review = Review(**data.model_dump())
    session.add(review)
    try:
        await session.commit()
    except (SQLAlchemyError, OSError) as e:
        logger.error("Failed to create review: %s", e)
        await _rollback(session)
        return None

    await session.refresh(review)
    logger.info("Review %s created (%s stars)", review.id, review.stars)
    return review


async def _rollback(session: AsyncSession) -> None:
    try:
        await session.rollback()
    except (SQLAlchemyError, OSError) as e:
        # connection already gone, nothing to roll back
        logger.debug("Rollback after failed insert skipped: %s", e)
