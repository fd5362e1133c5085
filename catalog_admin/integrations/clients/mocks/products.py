"""
Products — MOCK client.

A development/test implementation of ProductsClient that keeps the catalog in
memory and makes no network calls. Behaves like the /products backend:
- create assigns a fresh id
- update / delete of an unknown id fail with a 404 HTTPStatusFailure

Failure scenarios are configurable: queue an exception with ``fail_next`` and
the next call to that operation raises it instead of touching the data.
Every call is recorded in ``calls`` so tests can assert what was sent.
"""

from __future__ import annotations

import copy
import logging
import uuid
from typing import Any, Dict, Iterable, List, Optional, Tuple

from catalog_admin.errors import CatalogError, HTTPStatusFailure
from catalog_admin.integrations.contracts.interfaces import ProductRecord, ProductsClient
from catalog_admin.integrations.policy.response_wrappers import normalize_product_response

logger = logging.getLogger(__name__)

_OPERATIONS = ("list", "create", "update", "delete")


class MockProductsClient(ProductsClient):
    def __init__(self, seed: Optional[Iterable[ProductRecord]] = None) -> None:
        self._products: Dict[str, ProductRecord] = {}
        self._failures: Dict[str, List[CatalogError]] = {op: [] for op in _OPERATIONS}
        self.calls: List[Tuple[str, Optional[str], Optional[Dict[str, Any]]]] = []
        for record in seed or []:
            self._products[record.id] = record

    # --- Scenario helpers ----------------------------------------------------

    def fail_next(self, operation: str, error: CatalogError) -> None:
        if operation not in self._failures:
            raise ValueError(f"Unknown operation '{operation}'. Expected one of {_OPERATIONS}.")
        self._failures[operation].append(error)

    def stored(self) -> List[ProductRecord]:
        """Server-side view of the data, in insertion order."""
        return list(self._products.values())

    def _record_call(self, operation: str, product_id: Optional[str] = None, payload: Optional[Dict[str, Any]] = None) -> None:
        self.calls.append((operation, product_id, copy.deepcopy(payload)))
        pending = self._failures[operation]
        if pending:
            error = pending.pop(0)
            logger.info("[MOCK] %s failing with %s", operation, type(error).__name__)
            raise error

    # --- ProductsClient ------------------------------------------------------

    async def list_products(self) -> List[ProductRecord]:
        self._record_call("list")
        return self.stored()

    async def create_product(self, payload: Dict[str, Any]) -> ProductRecord:
        self._record_call("create", payload=payload)
        body = {k: v for k, v in payload.items() if k != "id"}
        record = normalize_product_response({**body, "id": uuid.uuid4().hex})
        self._products[record.id] = record
        logger.info("[MOCK] Created product %s", record.id)
        return record

    async def update_product(self, product_id: str, payload: Dict[str, Any]) -> ProductRecord:
        self._record_call("update", product_id, payload)
        if product_id not in self._products:
            raise HTTPStatusFailure("Product not found", status_code=404, payload="Product not found")
        record = normalize_product_response({**payload, "id": product_id})
        self._products[product_id] = record
        return record

    async def delete_product(self, product_id: str) -> None:
        self._record_call("delete", product_id)
        if self._products.pop(product_id, None) is None:
            raise HTTPStatusFailure("Product not found", status_code=404, payload="Product not found")
