# storefront/services/cart_service.py
"""
Cart lifecycle over the `carts` collection.

Every mutation is load → change in memory → `calculate_total()` → save → resolve.
The sequence is not transactional: two concurrent writers on one owner can lose
an update (last write wins).
"""
from __future__ import annotations

import logging

from storefront.core.errors import InsufficientStock, NotFound, ValidationError
from storefront.repositories import carts, products
from storefront.schemas.cart import Cart, CartOut, LineItem, ResolvedLineItem
from storefront.utils.ids import clean_id

logger = logging.getLogger("storefront.carts")


def _require_id(value: str, name: str) -> str:
    try:
        return clean_id(value)
    except ValueError as exc:
        raise ValidationError(f"Invalid {name}", str(exc)) from exc


def resolve(db, cart: Cart) -> CartOut:
    """Attach the current catalog record to every line (None when the product is gone)."""
    catalog = products.get_many(db, (it.product_ref for it in cart.items))
    return CartOut(
        owner=cart.owner,
        items=[
            ResolvedLineItem(
                product_ref=it.product_ref,
                quantity=it.quantity,
                unit_price=it.unit_price,
                product=catalog.get(it.product_ref),
            )
            for it in cart.items
        ],
        total=cart.total,
        created_at=cart.created_at,
        updated_at=cart.updated_at,
    )


def _load_existing(db, owner: str) -> Cart:
    cart = carts.get(db, owner)
    if cart is None:
        raise NotFound("Cart not found")
    return cart


def _persist(db, cart: Cart) -> CartOut:
    cart.calculate_total()
    carts.save(db, cart)
    return resolve(db, cart)


def add_item(db, owner: str, product_ref: str, quantity: int, unit_price: float) -> CartOut:
    owner = _require_id(owner, "owner")
    product_ref = _require_id(product_ref, "productRef")
    if quantity < 1:
        raise ValidationError("Quantity must be at least 1")
    if unit_price < 0:
        raise ValidationError("Price cannot be negative")

    product = products.get(db, product_ref)
    if product is None:
        raise NotFound("Product not found")
    # only the requested increment is checked, not the combined line quantity
    if product.stock < quantity:
        raise InsufficientStock()

    cart = carts.get(db, owner) or Cart.empty(owner)
    line = cart.find(product_ref)
    if line is not None:
        line.quantity += quantity
    else:
        cart.items.append(LineItem(product_ref=product_ref, quantity=quantity, unit_price=unit_price))

    out = _persist(db, cart)
    logger.info("cart %s: added %s x%d", owner, product_ref, quantity)
    return out


def get_cart(db, owner: str) -> CartOut:
    owner = _require_id(owner, "owner")
    cart = carts.get(db, owner)
    if cart is None:
        return CartOut(owner=owner, items=[], total=0)
    return resolve(db, cart)


def update_quantity(db, owner: str, product_ref: str, quantity: int) -> CartOut:
    """Absolute set. `quantity <= 0` drops the line."""
    owner = _require_id(owner, "owner")
    product_ref = _require_id(product_ref, "productRef")
    cart = _load_existing(db, owner)

    line = cart.find(product_ref)
    if line is None:
        raise NotFound("Item not found in cart")
    if quantity <= 0:
        cart.items.remove(line)
    else:
        line.quantity = quantity

    out = _persist(db, cart)
    logger.info("cart %s: set %s to %d", owner, product_ref, max(quantity, 0))
    return out


def remove_item(db, owner: str, product_ref: str) -> CartOut:
    owner = _require_id(owner, "owner")
    product_ref = _require_id(product_ref, "productRef")
    cart = _load_existing(db, owner)

    cart.items = [it for it in cart.items if it.product_ref != product_ref]

    out = _persist(db, cart)
    logger.info("cart %s: removed %s", owner, product_ref)
    return out


def clear_cart(db, owner: str) -> None:
    owner = _require_id(owner, "owner")
    if not carts.delete(db, owner):
        raise NotFound("Cart not found")
    logger.info("cart %s: cleared", owner)
