"""Pytest fixtures for catalog store and edit session tests."""

import pytest

from catalog_admin.catalog.edit_session import EditSession
from catalog_admin.catalog.store import CatalogStore
from catalog_admin.error_handler import ErrorHandler
from catalog_admin.integrations.clients.mocks.products import MockProductsClient
from catalog_admin.integrations.contracts.interfaces import DraftRecord, ProductRecord


@pytest.fixture
def seeded_products():
    return [
        ProductRecord(id="p1", product_name="Pen", description="Blue pen", category="Stationery", price=1.5, quantity=10),
        ProductRecord(id="p2", product_name="Mug", description="White mug", category="Kitchen", price=4.0, quantity=3),
        ProductRecord(id="p3", product_name="Lamp", description="Desk lamp", category="Lighting", price=19.99, quantity=1),
    ]


@pytest.fixture
def client():
    """Empty in-memory products backend."""
    return MockProductsClient()


@pytest.fixture
def seeded_client(seeded_products):
    return MockProductsClient(seed=seeded_products)


@pytest.fixture
def reported():
    """Failed results passed to the reporter, in order."""
    return []


@pytest.fixture
def store(client, reported):
    return CatalogStore(client, ErrorHandler(reporter=reported.append))


@pytest.fixture
def seeded_store(seeded_client, reported):
    return CatalogStore(seeded_client, ErrorHandler(reporter=reported.append))


@pytest.fixture
def session(store):
    return EditSession(store)


@pytest.fixture
def pen_draft():
    return DraftRecord(
        product_name="Pen",
        description="Blue pen",
        category="Stationery",
        price="1.50",
        quantity="10",
    )
