from pydantic import BaseModel, Field, PositiveInt, ConfigDict, NonNegativeInt
from typing import Optional


class ProductRead(BaseModel):
    id: PositiveInt
    name: str
    image_url: Optional[str] = None
    weight_grams: NonNegativeInt
    composition: Optional[str] = None
    price_rub: NonNegativeInt = Field(..., description="Цена в целых рублях")

    model_config = ConfigDict(from_attributes=True, extra="ignore")
