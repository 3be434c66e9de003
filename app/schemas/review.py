from pydantic import BaseModel, Field, PositiveInt, ConfigDict
from typing import Annotated
from datetime import datetime

Name = Annotated[str, Field(min_length=1, max_length=100)]
Stars = Annotated[int, Field(ge=1, le=5)]
Text = Annotated[str, Field(min_length=1, max_length=2000)]


class ReviewCreate(BaseModel):
    name: Name
    stars: Stars
    text: Text

    model_config = ConfigDict(str_strip_whitespace=True)


class ReviewRead(BaseModel):
    id: PositiveInt
    name: str
    stars: Stars
    text: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True, extra="ignore")
