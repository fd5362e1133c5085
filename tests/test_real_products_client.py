"""RealProductsClient against the local FastAPI backend and canned transports."""

import httpx
import pytest

from catalog_admin.api.main import create_app
from catalog_admin.catalog.edit_session import EditSession
from catalog_admin.catalog.store import CatalogStore
from catalog_admin.error_handler import ErrorHandler
from catalog_admin.errors import FetchFailure, HTTPStatusFailure, ParseFailure
from catalog_admin.integrations.clients.real_http.products import RealProductsClient

PEN = {"productName": "Pen", "description": "Blue pen", "category": "Stationery", "price": 1.5, "quantity": 10}


@pytest.fixture
def backend_client():
    transport = httpx.ASGITransport(app=create_app())
    return RealProductsClient(base_url="http://testserver", transport=transport)


def _canned(handler):
    return RealProductsClient(base_url="http://backend.local/", transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_crud_round_against_local_backend(backend_client):
    created = await backend_client.create_product(PEN)
    assert created.id
    assert created.price == 1.5

    updated = await backend_client.update_product(created.id, {**PEN, "id": created.id, "price": 2.0})
    assert updated.id == created.id
    assert updated.price == 2.0

    listed = await backend_client.list_products()
    assert [p.id for p in listed] == [created.id]

    await backend_client.delete_product(created.id)
    assert await backend_client.list_products() == []


@pytest.mark.asyncio
async def test_unknown_id_surfaces_backend_error_message(backend_client):
    with pytest.raises(HTTPStatusFailure) as excinfo:
        await backend_client.delete_product("missing")

    assert excinfo.value.status_code == 404
    assert excinfo.value.payload == "Product not found"


@pytest.mark.asyncio
async def test_store_and_session_over_http(backend_client):
    store = CatalogStore(backend_client)
    session = EditSession(store)
    for name, value in {**PEN, "price": "1.50", "quantity": "10"}.items():
        session.update_field(name, value)

    result = await session.submit()
    assert result.ok is True

    fresh = CatalogStore(backend_client)
    await fresh.initialize()
    assert [(p.product_name, p.price, p.quantity) for p in fresh.products] == [("Pen", 1.5, 10)]


@pytest.mark.asyncio
async def test_request_shape():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={**PEN, "id": "a b"})

    client = _canned(handler)
    await client.update_product("a b", {**PEN, "id": "a b"})

    request = seen[0]
    assert request.method == "PUT"
    assert request.url.path == "/products/a b"
    assert request.url.raw_path == b"/products/a%20b"
    assert request.headers["content-type"] == "application/json"


@pytest.mark.asyncio
async def test_create_strips_id_from_body():
    bodies = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(request.content)
        return httpx.Response(201, json={**PEN, "id": "new-1"})

    record = await _canned(handler).create_product({**PEN, "id": ""})

    assert record.id == "new-1"
    assert b'"id"' not in bodies[0]


@pytest.mark.asyncio
async def test_status_without_error_body_uses_reason_phrase():
    client = _canned(lambda request: httpx.Response(503, text="down"))

    with pytest.raises(HTTPStatusFailure) as excinfo:
        await client.list_products()

    assert excinfo.value.status_code == 503
    assert excinfo.value.payload == "Service Unavailable"


@pytest.mark.asyncio
async def test_transport_error_becomes_fetch_failure():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(FetchFailure):
        await _canned(handler).list_products()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="<html>not json</html>"),
        httpx.Response(200, json={"not": "a list"}),
        httpx.Response(200, json=[{"productName": "No id", "price": 1, "quantity": 1}]),
        httpx.Response(200, json=[{"id": "x", "productName": "Bad", "price": "abc", "quantity": 1}]),
        httpx.Response(
            200,
            content=(b'[{"id": "x", "productName": "Huge", "price": ' + b"9" * 400 + b', "quantity": 1}]'),
            headers={"content-type": "application/json"},
        ),
    ],
)
async def test_malformed_bodies_become_parse_failures(response):
    with pytest.raises(ParseFailure):
        await _canned(lambda request: response).list_products()


@pytest.mark.asyncio
async def test_delete_ignores_response_body():
    client = _canned(lambda request: httpx.Response(204))

    assert await client.delete_product("p1") is None


@pytest.mark.asyncio
async def test_store_reports_non_2xx_delete_without_raising():
    def handler(request):
        if request.method == "GET":
            return httpx.Response(200, json=[{**PEN, "id": "p1"}])
        return httpx.Response(500, json={"error": "database locked"})

    reported = []
    store = CatalogStore(_canned(handler), ErrorHandler(reporter=reported.append))
    await store.initialize()

    result = await store.delete("p1")

    assert result.ok is False
    assert [p.id for p in store.products] == ["p1"]
    assert "database locked" in reported[0].error


@pytest.mark.asyncio
async def test_out_of_range_price_fails_initialize_without_raising():
    body = b'[{"id": "p1", "productName": "Huge", "price": ' + b"9" * 400 + b', "quantity": 1}]'
    client = _canned(lambda request: httpx.Response(200, content=body, headers={"content-type": "application/json"}))
    reported = []
    store = CatalogStore(client, ErrorHandler(reporter=reported.append))

    result = await store.initialize()

    assert result.ok is False
    assert result.kind == "parse"
    assert store.products == []
    assert len(reported) == 1
