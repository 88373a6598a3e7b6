"""
# `storefront/schemas/product.py` — Product schema

## Overview
Products live in the `products` collection, one document per product, keyed by product id.
The cart only reads them: to check existence and stock when adding, and to resolve
line items for display.

| Field        | Type    | Notes |
|--------------|---------|-------|
| id           | `str`   | Document id |
| name         | `str`   | Product name |
| description  | `str`   | Long description |
| price        | `float` | ≥ 0 |
| category     | `str`   | One of `CATEGORIES` |
| image        | `str`   | Image URL |
| stock        | `int`   | ≥ 0 |
| ratings      | `float` | 0..5 |
| numReviews   | `int`   | ≥ 0 (stored as `num_reviews`) |
"""
from typing import Any, Dict, Literal, get_args

from pydantic import BaseModel, Field

Category = Literal["Electronics", "Clothing", "Home & Garden", "Books", "Sports", "Other"]
CATEGORIES = get_args(Category)


class Product(BaseModel):
    id: str
    name: str
    description: str = ""
    price: float = Field(..., ge=0, description="Catalog unit price")
    category: Category
    image: str = ""
    stock: int = Field(0, ge=0, description="Units in stock")
    ratings: float = Field(0, ge=0, le=5)
    num_reviews: int = Field(0, ge=0, alias="numReviews")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_doc(cls, doc_id: str, src: Dict[str, Any]) -> "Product":
        return cls(
            id=doc_id,
            name=src.get("name", ""),
            description=src.get("description", "") or "",
            price=float(src.get("price", 0) or 0),
            category=src.get("category", "Other"),
            image=src.get("image", "") or "",
            stock=int(src.get("stock", 0) or 0),
            ratings=float(src.get("ratings", 0) or 0),
            num_reviews=int(src.get("num_reviews", 0) or 0),
        )

    def to_doc(self) -> Dict[str, Any]:
        """Firestore representation (id is the document key, not a field)."""
        return self.model_dump(exclude={"id"})
