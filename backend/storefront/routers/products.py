"""
storefront/routers/products.py
Public, read-only catalog endpoints.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from storefront.config import get_db
from storefront.core.errors import InternalError, NotFound, ValidationError
from storefront.repositories import products as catalog
from storefront.schemas.product import CATEGORIES, Product
from storefront.utils.ids import clean_id

logger = logging.getLogger("storefront.products")

router = APIRouter(prefix="/api/products", tags=["Products"])


class ProductListEnvelope(BaseModel):
    success: bool = True
    count: int
    data: List[Product]


class ProductEnvelope(BaseModel):
    success: bool = True
    data: Product


@router.get("", response_model=ProductListEnvelope, summary="List Products")
def list_products(
    category: Optional[str] = Query(None, description="Category filter (optional)"),
    db=Depends(get_db),
):
    if category is not None and category not in CATEGORIES:
        raise ValidationError(f"Unknown category: {category}", list(CATEGORIES))
    try:
        items = catalog.list_all(db, category)
    except Exception as exc:
        logger.exception("Error fetching products")
        raise InternalError("Error fetching products", str(exc)) from exc
    return {"success": True, "count": len(items), "data": items}


@router.get("/{product_id}", response_model=ProductEnvelope, summary="Get Product")
def get_product(product_id: str, db=Depends(get_db)):
    try:
        product_id = clean_id(product_id)
    except ValueError as exc:
        raise ValidationError("Invalid product id", str(exc)) from exc
    try:
        product = catalog.get(db, product_id)
    except Exception as exc:
        logger.exception("Error fetching product")
        raise InternalError("Error fetching product", str(exc)) from exc
    if product is None:
        raise NotFound("Product not found")
    return {"success": True, "data": product}
