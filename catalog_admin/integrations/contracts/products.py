from typing import List, Optional, Sequence

from .interfaces import ProductRecord

"""
Product list contract — helpers for reconciling a catalog with server results.

The catalog is an ordered list where ``id`` is unique. These helpers never
mutate their input; they return a new list so callers can swap it in one step.
"""


def find_product(products: Sequence[ProductRecord], product_id: str) -> Optional[ProductRecord]:
    for product in products:
        if product.id == product_id:
            return product
    return None


def append_product(products: Sequence[ProductRecord], record: ProductRecord) -> List[ProductRecord]:
    """Append ``record``; if its id is already present, replace that entry instead."""
    if find_product(products, record.id) is not None:
        return replace_product(products, record)
    return [*products, record]


def replace_product(products: Sequence[ProductRecord], record: ProductRecord) -> List[ProductRecord]:
    return [record if p.id == record.id else p for p in products]


def remove_product(products: Sequence[ProductRecord], product_id: str) -> List[ProductRecord]:
    return [p for p in products if p.id != product_id]


def dedupe_products(products: Sequence[ProductRecord]) -> List[ProductRecord]:
    """Keep the first occurrence of each id, preserving order."""
    seen = set()
    result: List[ProductRecord] = []
    for product in products:
        if product.id in seen:
            continue
        seen.add(product.id)
        result.append(product)
    return result
