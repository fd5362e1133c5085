"""Edit session lifecycle: CREATING <-> EDITING, submit routing and resets."""

import pytest

from catalog_admin.catalog.edit_session import EditSession, SessionMode
from catalog_admin.catalog.store import CatalogStore
from catalog_admin.errors import HTTPStatusFailure
from catalog_admin.integrations.contracts.interfaces import DraftRecord, ProductField, ProductRecord


def _fill_pen(session):
    session.update_field("productName", "Pen")
    session.update_field("description", "Blue pen")
    session.update_field("category", "Stationery")
    session.update_field("price", "1.50")
    session.update_field("quantity", "10")


def test_new_session_starts_in_create_mode_with_empty_draft(session):
    assert session.mode == SessionMode.CREATING
    assert session.draft == DraftRecord.empty()
    assert session.draft.is_empty()


def test_update_field_accepts_enum_and_wire_names(session):
    session.update_field(ProductField.CATEGORY, "Stationery")
    session.update_field("quantity", 7)

    assert session.draft.category == "Stationery"
    assert session.draft.quantity == "7"


def test_update_field_rejects_unknown_names(session):
    with pytest.raises(ValueError, match="Unknown product field 'id'"):
        session.update_field("id", "forged")

    assert session.draft.id == ""


def test_update_field_does_not_validate(session):
    session.update_field("price", "abc")

    assert session.draft.price == "abc"


@pytest.mark.asyncio
async def test_create_scenario_posts_coerced_values_and_resets(session, store, client):
    _fill_pen(session)
    before = len(store)

    result = await session.submit()

    assert result.ok is True
    operation, _, payload = client.calls[-1]
    assert operation == "create"
    assert payload["price"] == 1.5
    assert payload["quantity"] == 10
    assert len(store) == before + 1
    assert session.mode == SessionMode.CREATING
    assert session.draft == DraftRecord.empty()


@pytest.mark.asyncio
async def test_edit_scenario_puts_new_price_and_keeps_other_fields(seeded_store, seeded_client, seeded_products):
    await seeded_store.initialize()
    session = EditSession(seeded_store)

    session.start_edit(seeded_products[0])
    assert session.mode == SessionMode.EDITING
    assert session.draft.price == "1.5"
    session.update_field("price", "2.00")

    result = await session.submit()

    assert result.ok is True
    operation, product_id, payload = seeded_client.calls[-1]
    assert (operation, product_id) == ("update", "p1")
    assert payload["price"] == 2.0
    updated = seeded_store.get("p1")
    assert updated.price == 2.0
    assert (updated.product_name, updated.description, updated.category, updated.quantity) == (
        "Pen",
        "Blue pen",
        "Stationery",
        10,
    )
    assert session.mode == SessionMode.CREATING
    assert session.draft.is_empty()


@pytest.mark.asyncio
async def test_invalid_submit_makes_no_call_and_keeps_draft(session, client, reported):
    _fill_pen(session)
    session.update_field("productName", "")

    result = await session.submit()

    assert result.ok is False
    assert result.kind == "validation"
    assert result.operation == "create"
    assert list(result.field_errors) == ["productName"]
    assert client.calls == []
    assert session.draft.description == "Blue pen"
    assert reported[-1] is result


@pytest.mark.asyncio
async def test_failed_submit_keeps_draft_and_mode(seeded_store, seeded_client, seeded_products):
    await seeded_store.initialize()
    session = EditSession(seeded_store)
    session.start_edit(seeded_products[1])
    session.update_field("quantity", "12")
    seeded_client.fail_next("update", HTTPStatusFailure("Product not found", status_code=404))

    result = await session.submit()

    assert result.ok is False
    assert session.mode == SessionMode.EDITING
    assert session.draft.id == "p2"
    assert session.draft.quantity == "12"
    assert seeded_store.get("p2").quantity == 3


@pytest.mark.asyncio
async def test_editing_without_id_is_a_validation_failure(session, client):
    session.start_edit(
        ProductRecord(id="", product_name="Pen", description="Blue pen", category="Stationery", price=1.5, quantity=10)
    )

    result = await session.submit()

    assert result.ok is False
    assert result.field_errors == {"id": "Product id is missing"}
    assert client.calls == []


def test_cancel_returns_to_empty_create_mode(session, seeded_products):
    session.start_edit(seeded_products[2])

    session.cancel()

    assert session.mode == SessionMode.CREATING
    assert session.draft == DraftRecord.empty()


@pytest.mark.asyncio
async def test_create_mode_stays_in_create_after_success(client):
    store = CatalogStore(client)
    session = EditSession(store)

    for name in ("Pen", "Pencil"):
        _fill_pen(session)
        session.update_field("productName", name)
        result = await session.submit()
        assert result.ok is True
        assert session.mode == SessionMode.CREATING

    assert [p.product_name for p in store.products] == ["Pen", "Pencil"]
    assert len({p.id for p in store.products}) == 2

