from pydantic import BaseModel, Field
from typing import List

from app.schemas.product import ProductRead
from app.schemas.review import ReviewRead


class Storefront(BaseModel):
    products: List[ProductRead] = []
    reviews: List[ReviewRead] = []
    complete: bool = Field(True, exclude=True, description="Обе коллекции прочитаны без ошибок")
