from app.models.product import Product
from app.models.review import Review

__all__ = ["Product", "Review"]
