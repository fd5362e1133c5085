"""
Contracts (data models).

This folder defines the shapes exchanged with the /products resource:
- ProductRecord: a persisted product as the backend returns it
- DraftRecord: the string-typed, unvalidated form state
- ProductsClient: the interface every products client implements

Both mock and real HTTP clients use these contracts, so the store and the
edit session never deal with ad-hoc dicts.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Dict, List


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ProductField(str, Enum):
    """Editable draft fields, valued by their wire (JSON) names."""

    PRODUCT_NAME = "productName"
    DESCRIPTION = "description"
    CATEGORY = "category"
    PRICE = "price"
    QUANTITY = "quantity"

    @property
    def attribute(self) -> str:
        return _ATTRIBUTES[self]


_ATTRIBUTES = {
    ProductField.PRODUCT_NAME: "product_name",
    ProductField.DESCRIPTION: "description",
    ProductField.CATEGORY: "category",
    ProductField.PRICE: "price",
    ProductField.QUANTITY: "quantity",
}


# ---------------------------------------------------------------------------
# Shared data models
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ProductRecord:
    id: str                              # server-assigned, immutable once persisted
    product_name: str
    description: str
    category: str
    price: float                         # >= 0
    quantity: int                        # >= 0

    def to_payload(self, include_id: bool = True) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "productName": self.product_name,
            "description": self.description,
            "category": self.category,
            "price": self.price,
            "quantity": self.quantity,
        }
        if include_id:
            payload = {"id": self.id, **payload}
        return payload


@dataclass(frozen=True)
class DraftRecord:
    id: str = ""
    product_name: str = ""
    description: str = ""
    category: str = ""
    price: str = ""
    quantity: str = ""

    @classmethod
    def empty(cls) -> "DraftRecord":
        return cls()

    @classmethod
    def from_record(cls, record: ProductRecord) -> "DraftRecord":
        return cls(
            id=record.id,
            product_name=record.product_name,
            description=record.description,
            category=record.category,
            price=str(record.price),
            quantity=str(record.quantity),
        )

    def with_field(self, name: ProductField, value: Any) -> "DraftRecord":
        return replace(self, **{name.attribute: "" if value is None else str(value)})

    def get(self, name: ProductField) -> str:
        return getattr(self, name.attribute)

    def to_form_data(self) -> Dict[str, str]:
        """Wire-named view of the draft, including ``id``."""
        data = {"id": self.id}
        data.update({f.value: self.get(f) for f in ProductField})
        return data

    def is_empty(self) -> bool:
        return all(not getattr(self, f.name) for f in fields(self))


# ---------------------------------------------------------------------------
# Abstract client interface
# ---------------------------------------------------------------------------

class ProductsClient(ABC):
    """Every products client (mock or real HTTP) must implement this interface.

    Implementations raise the errors from ``catalog_admin.errors`` on failure.
    """

    @abstractmethod
    async def list_products(self) -> List[ProductRecord]:
        """GET /products."""

    @abstractmethod
    async def create_product(self, payload: Dict[str, Any]) -> ProductRecord:
        """POST /products with a record lacking ``id``; returns the created record."""

    @abstractmethod
    async def update_product(self, product_id: str, payload: Dict[str, Any]) -> ProductRecord:
        """PUT /products/{id}; returns the updated record."""

    @abstractmethod
    async def delete_product(self, product_id: str) -> None:
        """DELETE /products/{id}; the response body is ignored."""
