"""
Contracts (data models).

Defines the record shapes used by the /products integration and the interface
both mock and real clients implement.
"""

from .interfaces import DraftRecord, ProductField, ProductRecord, ProductsClient
from .products import append_product, dedupe_products, find_product, remove_product, replace_product

__all__ = [
    "DraftRecord",
    "ProductField",
    "ProductRecord",
    "ProductsClient",
    "append_product",
    "dedupe_products",
    "find_product",
    "remove_product",
    "replace_product",
]
