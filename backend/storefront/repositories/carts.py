from datetime import datetime, timezone
from typing import Optional

from storefront.config import settings
from storefront.schemas.cart import Cart


def _col(db):
    return db.collection(settings.collection("carts"))


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def get(db, owner: str) -> Optional[Cart]:
    snap = _col(db).document(owner).get()
    if not snap.exists:
        return None
    return Cart.from_doc(owner, snap.to_dict() or {})


def save(db, cart: Cart) -> Cart:
    """Full overwrite of the owner's document; no concurrency token."""
    ts = now_utc()
    if cart.created_at is None:
        cart.created_at = ts
    cart.updated_at = ts
    _col(db).document(cart.owner).set(cart.to_doc())
    return cart


def delete(db, owner: str) -> bool:
    """Delete the owner's cart. Returns False when there was nothing to delete."""
    ref = _col(db).document(owner)
    if not ref.get().exists:
        return False
    ref.delete()
    return True
