"""
Read-only catalog access. The cart never writes products; only the seed script does.
"""
from typing import Dict, Iterable, List, Optional

from google.cloud.firestore_v1 import FieldFilter

from storefront.config import settings
from storefront.schemas.product import Product


def _col(db):
    return db.collection(settings.collection("products"))


def get(db, product_id: str) -> Optional[Product]:
    snap = _col(db).document(product_id).get()
    if not snap.exists:
        return None
    return Product.from_doc(snap.id, snap.to_dict() or {})


def get_many(db, product_ids: Iterable[str]) -> Dict[str, Product]:
    """Batched lookup (one round trip); ids missing from the catalog are simply absent from the result."""
    ids = list(dict.fromkeys(product_ids))
    if not ids:
        return {}
    refs = [_col(db).document(pid) for pid in ids]
    return {
        snap.id: Product.from_doc(snap.id, snap.to_dict() or {})
        for snap in db.get_all(refs)
        if snap.exists
    }


def list_all(db, category: Optional[str] = None) -> List[Product]:
    q = _col(db)
    if category:
        q = q.where(filter=FieldFilter("category", "==", category))
    return [Product.from_doc(d.id, d.to_dict() or {}) for d in q.stream()]


def replace_all(db, products: Iterable[Product]) -> int:
    """Delete every product document, then write `products`. Used by the seed script."""
    col = _col(db)
    for d in col.stream():
        d.reference.delete()
    count = 0
    for p in products:
        col.document(p.id).set(p.to_doc())
        count += 1
    return count
