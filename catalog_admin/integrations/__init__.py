"""
Integrations layer.

This package contains all code used to talk to the products backend.

Key rule:
- CatalogStore and EditSession MUST NOT call the backend directly.
- They go through a ProductsClient (under catalog_admin/integrations/clients).
- The MOCK client is used in development/tests; the REAL_HTTP client otherwise.
"""

from .contracts.interfaces import DraftRecord, ProductField, ProductRecord, ProductsClient
from .contracts.products import (
    append_product,
    dedupe_products,
    find_product,
    remove_product,
    replace_product,
)

__all__ = [
    # interfaces
    "DraftRecord", "ProductField", "ProductRecord", "ProductsClient",
    # products
    "append_product", "dedupe_products", "find_product", "remove_product", "replace_product",
]
