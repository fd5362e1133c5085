from __future__ import annotations

import math
from typing import Any, Dict, List

from pydantic import BaseModel, Field, ValidationError

from catalog_admin.errors import ParseFailure
from catalog_admin.integrations.contracts.interfaces import ProductRecord


class ProductResponseModel(BaseModel):
    id: str = Field(min_length=1)
    product_name: str
    description: str = ""
    category: str = ""
    price: float = Field(ge=0)
    quantity: int = Field(ge=0)
    raw: Dict[str, Any] = Field(default_factory=dict)

    def to_record(self) -> ProductRecord:
        return ProductRecord(
            id=self.id,
            product_name=self.product_name,
            description=self.description,
            category=self.category,
            price=self.price,
            quantity=self.quantity,
        )


def normalize_product_response(raw: Any) -> ProductRecord:
    if not isinstance(raw, dict):
        raise ParseFailure(f"Expected a product object, got {type(raw).__name__}.", payload=raw)

    product_id = _first_non_empty(raw, "id", "_id", "productId")
    price = _coerce_amount(_first_non_empty(raw, "price"), "product price")
    quantity = _coerce_count(_first_non_empty(raw, "quantity"), "product quantity")

    model = _build_model(
        {
            "id": str(product_id),
            "product_name": str(_first_non_empty(raw, "productName", "product_name", "name")),
            "description": str(raw.get("description") or ""),
            "category": str(raw.get("category") or ""),
            "price": price,
            "quantity": quantity,
            "raw": raw,
        },
        raw,
    )
    return model.to_record()


def normalize_product_list_response(raw: Any) -> List[ProductRecord]:
    if isinstance(raw, dict) and isinstance(raw.get("products"), list):
        raw = raw["products"]
    if not isinstance(raw, list):
        raise ParseFailure(f"Expected a list of products, got {type(raw).__name__}.", payload=raw)
    return [normalize_product_response(item) for item in raw]


def _first_non_empty(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        value = data.get(key)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    if default is not None:
        return default
    raise ParseFailure(f"Missing required field. Checked keys: {', '.join(keys)}", payload=data)


def _coerce_amount(value: Any, label: str) -> float:
    try:
        amount = float(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise ParseFailure(f"Invalid {label}: {value!r}") from exc
    if math.isnan(amount) or math.isinf(amount) or amount < 0:
        raise ParseFailure(f"{label.capitalize()} must be a finite number >= 0; got {value!r}.")
    return amount


def _coerce_count(value: Any, label: str) -> int:
    if isinstance(value, bool):
        raise ParseFailure(f"Invalid {label}: {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ParseFailure(f"{label.capitalize()} must be a whole number; got {value!r}.")
        value = int(value)
    try:
        count = int(str(value).strip())
    except (TypeError, ValueError) as exc:
        raise ParseFailure(f"Invalid {label}: {value!r}") from exc
    if count < 0:
        raise ParseFailure(f"{label.capitalize()} must be >= 0; got {count}.")
    return count


def _build_model(data: Dict[str, Any], raw: Dict[str, Any]) -> ProductResponseModel:
    try:
        return ProductResponseModel(**data)
    except ValidationError as exc:
        raise ParseFailure(f"Invalid product response: {exc}", payload=raw) from exc
