"""
Catalog store: the single owner of the product list for a screen session.

Anything that used to keep its own copy of the list (a parent view, a
counter, ...) subscribes instead and receives a fresh snapshot after every
successful mutation. The list is swapped and every listener is notified
before the awaiting caller resumes, so no reader in the same task can see the
store and a subscriber disagree.

Failures never raise out of the public operations: they come back as a failed
``OperationResult`` and leave the list untouched.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from catalog_admin.catalog.validation import build_product_payload
from catalog_admin.error_handler import ErrorHandler, OperationResult
from catalog_admin.errors import CatalogError, ParseFailure
from catalog_admin.integrations.contracts.interfaces import DraftRecord, ProductRecord, ProductsClient
from catalog_admin.integrations.contracts.products import (
    append_product,
    dedupe_products,
    find_product,
    remove_product,
    replace_product,
)

logger = logging.getLogger(__name__)

Listener = Callable[[List[ProductRecord]], None]


class CatalogStore:
    def __init__(self, client: ProductsClient, error_handler: Optional[ErrorHandler] = None):
        self.client = client
        self.error_handler = error_handler or ErrorHandler()
        self._products: List[ProductRecord] = []
        self._listeners: List[Listener] = []
        self._closed = False

    # --- Read access -----------------------------------------------------------

    @property
    def products(self) -> List[ProductRecord]:
        return list(self._products)

    @property
    def closed(self) -> bool:
        return self._closed

    def get(self, product_id: str) -> Optional[ProductRecord]:
        return find_product(self._products, product_id)

    def __len__(self) -> int:
        return len(self._products)

    # --- Subscriptions ----------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for list changes; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, products: List[ProductRecord]) -> None:
        self._products = products
        snapshot = list(products)
        for listener in list(self._listeners):
            try:
                listener(list(snapshot))
            except Exception:
                logger.exception("Catalog listener %r failed", listener)

    def close(self) -> None:
        """Tear down: later responses are dropped and listeners released."""
        self._closed = True
        self._listeners.clear()

    def _stale(self, operation: str, record: Optional[ProductRecord] = None) -> OperationResult:
        logger.info("Dropping %s result: store was closed while the request was in flight", operation)
        return OperationResult(operation=operation, ok=True, record=record, applied=False)

    # --- CRUD -------------------------------------------------------------------

    async def initialize(self) -> OperationResult:
        try:
            products = await self.client.list_products()
        except CatalogError as exc:
            return self.error_handler.handle_exception(exc, "initialize")

        if self._closed:
            return self._stale("initialize")

        unique = dedupe_products(products)
        if len(unique) != len(products):
            logger.warning("Backend returned %d duplicate product ids; keeping first occurrences", len(products) - len(unique))
        self._commit(unique)
        logger.info("Loaded %d products", len(unique))
        return OperationResult(operation="initialize", ok=True)

    async def create(self, draft: DraftRecord) -> OperationResult:
        try:
            payload = build_product_payload(draft)
            record = await self.client.create_product(payload)
        except CatalogError as exc:
            return self.error_handler.handle_exception(exc, "create", {"draft": draft.to_form_data()})

        if self._closed:
            return self._stale("create", record)

        if find_product(self._products, record.id) is not None:
            logger.warning("Created product %s already listed; replacing existing entry", record.id)
        self._commit(append_product(self._products, record))
        logger.info("Created product %s (%s)", record.id, record.product_name)
        return OperationResult(operation="create", ok=True, record=record)

    async def update(self, product_id: str, draft: DraftRecord) -> OperationResult:
        context = {"product_id": product_id, "draft": draft.to_form_data()}
        try:
            payload = build_product_payload(draft, product_id=product_id)
            record = await self.client.update_product(product_id, payload)
            if record.id != product_id:
                raise ParseFailure(
                    f"Update of {product_id} returned a record with id {record.id}",
                    payload=record.to_payload(),
                )
        except CatalogError as exc:
            return self.error_handler.handle_exception(exc, "update", context)

        if self._closed:
            return self._stale("update", record)

        if find_product(self._products, product_id) is None:
            logger.warning("Updated product %s is not in the local catalog; list unchanged", product_id)
            return OperationResult(operation="update", ok=True, record=record, applied=False)

        self._commit(replace_product(self._products, record))
        logger.info("Updated product %s", product_id)
        return OperationResult(operation="update", ok=True, record=record)

    async def delete(self, product_id: str) -> OperationResult:
        try:
            await self.client.delete_product(product_id)
        except CatalogError as exc:
            return self.error_handler.handle_exception(exc, "delete", {"product_id": product_id})

        if self._closed:
            return self._stale("delete")

        # Filter the list as it is now, not as it was when the request started.
        removed = find_product(self._products, product_id)
        if removed is None:
            logger.info("Deleted product %s was not in the local catalog", product_id)
            return OperationResult(operation="delete", ok=True)

        self._commit(remove_product(self._products, product_id))
        logger.info("Deleted product %s", product_id)
        return OperationResult(operation="delete", ok=True, record=removed)
