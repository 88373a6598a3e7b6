"""
storefront/routers/carts.py
Cart endpoints. The owner is always explicit (body or path); no ambient "current user".

- POST   /api/cart/add                   add or increment a line (stock-checked)
- GET    /api/cart/{owner}               resolved cart, or an empty one
- PUT    /api/cart/update                absolute quantity; <=0 removes
- DELETE /api/cart/{owner}/{product_ref} remove one line (idempotent)
- DELETE /api/cart/{owner}               delete the whole cart
"""
import logging
from contextlib import contextmanager

from fastapi import APIRouter, Depends

from storefront.config import get_db
from storefront.core.errors import InternalError, StorefrontError
from storefront.schemas.cart import (
    AddItemBody,
    CartEnvelope,
    CartMutationEnvelope,
    MessageEnvelope,
    UpdateQuantityBody,
)
from storefront.services import cart_service

logger = logging.getLogger("storefront.carts")

router = APIRouter(prefix="/api/cart", tags=["Cart"])


@contextmanager
def _failure_message(message: str):
    """Domain errors pass through; anything else becomes a 500 with `message`."""
    try:
        yield
    except StorefrontError:
        raise
    except Exception as exc:
        logger.exception(message)
        raise InternalError(message, str(exc)) from exc


@router.post("/add", response_model=CartMutationEnvelope, summary="Add Item")
def add_to_cart(payload: AddItemBody, db=Depends(get_db)):
    with _failure_message("Error adding to cart"):
        cart = cart_service.add_item(db, payload.owner, payload.product_ref, payload.quantity, payload.unit_price)
    return {"success": True, "message": "Item added to cart", "data": cart}


@router.put("/update", response_model=CartMutationEnvelope, summary="Update Quantity")
def update_cart_item(payload: UpdateQuantityBody, db=Depends(get_db)):
    with _failure_message("Error updating cart"):
        cart = cart_service.update_quantity(db, payload.owner, payload.product_ref, payload.quantity)
    return {"success": True, "message": "Cart updated", "data": cart}


@router.get("/{owner}", response_model=CartEnvelope, summary="Get Cart")
def get_cart(owner: str, db=Depends(get_db)):
    with _failure_message("Error fetching cart"):
        cart = cart_service.get_cart(db, owner)
    return {"success": True, "data": cart}


@router.delete("/{owner}/{product_ref}", response_model=CartMutationEnvelope, summary="Remove Item")
def remove_cart_item(owner: str, product_ref: str, db=Depends(get_db)):
    with _failure_message("Error removing from cart"):
        cart = cart_service.remove_item(db, owner, product_ref)
    return {"success": True, "message": "Item removed from cart", "data": cart}


@router.delete("/{owner}", response_model=MessageEnvelope, summary="Clear Cart")
def clear_cart(owner: str, db=Depends(get_db)):
    with _failure_message("Error clearing cart"):
        cart_service.clear_cart(db, owner)
    return {"success": True, "message": "Cart cleared successfully"}
