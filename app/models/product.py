from sqlalchemy import String, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column
from app.database import Base


class Product(Base):
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str | None] = mapped_column(String, nullable=True)
    weight_grams: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    composition: Mapped[str | None] = mapped_column(Text, nullable=True)
    price_rub: Mapped[int] = mapped_column(Integer, nullable=False)
