"""
storefront/schemas/cart.py - Pydantic models for Cart.

Stored shape (collection `carts`, document id = owner):
    {"owner", "items": [{"product_ref", "quantity", "unit_price"}], "total", "created_at", "updated_at"}
Wire shape uses camelCase (`productRef`, `unitPrice`, `createdAt`, ...).
"""
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from storefront.schemas.product import Product
from storefront.utils.ids import clean_id


class LineItem(BaseModel):
    product_ref: str = Field(..., alias="productRef", description="Product id")
    quantity: int = Field(..., ge=1, description="Quantity (>=1)")
    unit_price: float = Field(..., ge=0, alias="unitPrice", description="Price per unit at the time of adding to cart")

    model_config = {"populate_by_name": True}

    @property
    def line_total(self) -> Decimal:
        return Decimal(str(self.unit_price)) * self.quantity


class Cart(BaseModel):
    owner: str = Field(..., description="Opaque owner key; anonymous owners are allowed")
    items: List[LineItem] = Field(default_factory=list)
    total: float = Field(0, ge=0, description="Derived: sum of unitPrice * quantity")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    model_config = {"populate_by_name": True}

    @classmethod
    def empty(cls, owner: str) -> "Cart":
        return cls(owner=owner, items=[], total=0)

    @classmethod
    def from_doc(cls, owner: str, src: Dict[str, Any]) -> "Cart":
        return cls(
            owner=owner,
            items=[
                LineItem(
                    product_ref=str(it.get("product_ref", "")),
                    quantity=int(it.get("quantity", 1)),
                    unit_price=float(it.get("unit_price", 0) or 0),
                )
                for it in src.get("items", []) or []
            ],
            total=float(src.get("total", 0) or 0),
            created_at=src.get("created_at"),
            updated_at=src.get("updated_at"),
        )

    def to_doc(self) -> Dict[str, Any]:
        return self.model_dump()

    def find(self, product_ref: str) -> Optional[LineItem]:
        return next((it for it in self.items if it.product_ref == product_ref), None)

    def calculate_total(self) -> float:
        """Recompute and store `total` from the current lines."""
        self.total = float(sum((it.line_total for it in self.items), Decimal("0")))
        return self.total


# ---------- output ----------
class ResolvedLineItem(LineItem):
    product: Optional[Product] = Field(None, description="Current catalog record; null if the product was deleted")


class CartOut(BaseModel):
    owner: str
    items: List[ResolvedLineItem] = Field(default_factory=list)
    total: float = 0
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    model_config = {"populate_by_name": True}


class CartEnvelope(BaseModel):
    success: bool = True
    data: CartOut


class CartMutationEnvelope(CartEnvelope):
    message: str


class MessageEnvelope(BaseModel):
    success: bool = True
    message: str


# ---------- input ----------
class AddItemBody(BaseModel):
    owner: str = Field(..., description="Cart owner key")
    product_ref: str = Field(..., alias="productRef", description="Product id")
    quantity: int = Field(1, ge=1, description="Quantity (>=1)")
    unit_price: float = Field(..., ge=0, alias="unitPrice", description="Unit price shown to the shopper")

    model_config = {"populate_by_name": True}

    @field_validator("owner", "product_ref")
    @classmethod
    def clean_ids(cls, v: str) -> str:
        return clean_id(v)


class UpdateQuantityBody(BaseModel):
    owner: str = Field(..., description="Cart owner key")
    product_ref: str = Field(..., alias="productRef", description="Product id")
    quantity: int = Field(..., description="New absolute quantity; <=0 removes the line")

    model_config = {"populate_by_name": True}

    @field_validator("owner", "product_ref")
    @classmethod
    def clean_ids(cls, v: str) -> str:
        return clean_id(v)
