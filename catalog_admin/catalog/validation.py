"""Draft validation and payload coercion for product submissions.

The form keeps every field as a string. Before anything is sent, the draft is
checked here:
- productName, description, category must be non-empty
- price must parse to a finite number >= 0
- quantity must parse to a whole number >= 0

``validate_draft`` reports problems as a ``ValidationResult``;
``build_product_payload`` raises ``ValidationFailure`` so callers at the
operation boundary can turn it into a failed result.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from catalog_admin.errors import ValidationFailure
from catalog_admin.integrations.contracts.interfaces import DraftRecord, ProductField

# Plain ASCII decimal notation only; no digit separators or non-ASCII digits.
_DECIMAL_RE = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class ValidationResult:
    field_errors: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.field_errors

    @property
    def invalid_fields(self) -> list:
        return list(self.field_errors)


_LABELS = {
    ProductField.PRODUCT_NAME: "Product name",
    ProductField.DESCRIPTION: "Description",
    ProductField.CATEGORY: "Category",
    ProductField.PRICE: "Price",
    ProductField.QUANTITY: "Quantity",
}


def _strip(v: Any) -> str:
    return "" if v is None else str(v).strip()


def add_error(errors: Dict[str, str], name: str, message: str) -> None:
    if name not in errors:
        errors[name] = message


def require_str(draft: DraftRecord, name: ProductField, errors: Dict[str, str]) -> str:
    value = draft.get(name)
    if not _strip(value):
        add_error(errors, name.value, f"{_LABELS[name]} is required")
    return value


def parse_float(draft: DraftRecord, name: ProductField, errors: Dict[str, str], *, min_value: Optional[float] = None) -> Optional[float]:
    raw = _strip(draft.get(name))
    if not raw:
        add_error(errors, name.value, f"{_LABELS[name]} is required")
        return None
    if not _DECIMAL_RE.fullmatch(raw):
        add_error(errors, name.value, f"{_LABELS[name]} must be a number")
        return None
    try:
        val = float(raw)
    except (ValueError, OverflowError):
        add_error(errors, name.value, f"{_LABELS[name]} must be a number")
        return None
    if math.isnan(val) or math.isinf(val):
        add_error(errors, name.value, f"{_LABELS[name]} must be a number")
        return None
    if min_value is not None and val < min_value:
        add_error(errors, name.value, f"{_LABELS[name]} must be at least {min_value:g}")
        return None
    return val


def parse_int(draft: DraftRecord, name: ProductField, errors: Dict[str, str], *, min_value: Optional[int] = None) -> Optional[int]:
    raw = _strip(draft.get(name))
    if not raw:
        add_error(errors, name.value, f"{_LABELS[name]} is required")
        return None
    if not _INTEGER_RE.fullmatch(raw):
        add_error(errors, name.value, f"{_LABELS[name]} must be a whole number")
        return None
    try:
        val = int(raw)
    except ValueError:
        add_error(errors, name.value, f"{_LABELS[name]} must be a whole number")
        return None
    if min_value is not None and val < min_value:
        add_error(errors, name.value, f"{_LABELS[name]} must be at least {min_value}")
        return None
    return val


def _collect(draft: DraftRecord) -> tuple:
    errors: Dict[str, str] = {}
    payload = {
        ProductField.PRODUCT_NAME.value: require_str(draft, ProductField.PRODUCT_NAME, errors),
        ProductField.DESCRIPTION.value: require_str(draft, ProductField.DESCRIPTION, errors),
        ProductField.CATEGORY.value: require_str(draft, ProductField.CATEGORY, errors),
        ProductField.PRICE.value: parse_float(draft, ProductField.PRICE, errors, min_value=0.0),
        ProductField.QUANTITY.value: parse_int(draft, ProductField.QUANTITY, errors, min_value=0),
    }
    return payload, errors


def validate_draft(draft: DraftRecord) -> ValidationResult:
    _, errors = _collect(draft)
    return ValidationResult(field_errors=errors)


def build_product_payload(draft: DraftRecord, *, product_id: Optional[str] = None) -> Dict[str, Any]:
    """Coerce a draft into the JSON body sent to the backend.

    ``price`` becomes a float and ``quantity`` an int. ``id`` is included only
    when ``product_id`` is given (updates).

    Raises:
        ValidationFailure: if the draft does not validate.
    """
    payload, errors = _collect(draft)
    if errors:
        raise ValidationFailure(errors)
    if product_id is not None:
        payload = {"id": product_id, **payload}
    return payload
