#!/usr/bin/env python3
"""
Manage the product catalog from the terminal through the same store and edit
session the admin screen uses.

Usage (from repo root):
  python scripts/manage_products.py list
  python scripts/manage_products.py add --name Pen --description "Blue pen" --category Stationery --price 1.50 --quantity 10
  python scripts/manage_products.py edit <id> --price 2.00
  python scripts/manage_products.py delete <id>

The backend comes from config/catalog_config.yml, CATALOG_API_URL, or --base-url.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from catalog_admin.catalog.edit_session import EditSession
from catalog_admin.catalog.store import CatalogStore
from catalog_admin.error_handler import ErrorHandler, OperationResult
from catalog_admin.integrations.clients import build_products_client
from catalog_admin.integrations.contracts.interfaces import ProductField
from catalog_admin.utils.config_loader import load_catalog_config

_FIELD_ARGS = {
    "name": ProductField.PRODUCT_NAME,
    "description": ProductField.DESCRIPTION,
    "category": ProductField.CATEGORY,
    "price": ProductField.PRICE,
    "quantity": ProductField.QUANTITY,
}


def setup_logging(level: str, fmt: str):
    logging.basicConfig(level=level, format=fmt, datefmt="%H:%M:%S", stream=sys.stderr)


def print_products(products):
    print(f"{'ID':34} {'Product Name':20} {'Category':14} {'Price':>10} {'Qty':>6}")
    for p in products:
        print(f"{p.id:34} {p.product_name[:20]:20} {p.category[:14]:14} {p.price:>10.2f} {p.quantity:>6}")


def print_failure(result: OperationResult):
    print(f"{result.operation} failed ({result.kind}): {result.error}", file=sys.stderr)
    for name, message in result.field_errors.items():
        print(f"  - {name}: {message}", file=sys.stderr)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Manage products on the catalog backend")
    parser.add_argument("--base-url", help="Products backend base URL")
    parser.add_argument("--config", type=Path, help="Path to catalog_config.yml")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List all products")

    add = sub.add_parser("add", help="Create a product")
    edit = sub.add_parser("edit", help="Update fields of an existing product")
    edit.add_argument("product_id")
    for p in (add, edit):
        for arg in _FIELD_ARGS:
            p.add_argument(f"--{arg}")

    delete = sub.add_parser("delete", help="Delete a product")
    delete.add_argument("product_id")
    return parser.parse_args(argv)


async def run(args) -> int:
    config = load_catalog_config(args.config)
    if args.base_url:
        config.api.base_url = args.base_url
        config.api.use_mock = False
    setup_logging(config.logging.level, config.logging.format)

    store = CatalogStore(build_products_client(config), ErrorHandler(reporter=print_failure))
    try:
        return await _execute(args, store)
    finally:
        store.close()


async def _execute(args, store: CatalogStore) -> int:
    session = EditSession(store)

    result = await store.initialize()
    if not result.ok:
        return 1

    if args.command == "list":
        print_products(store.products)
        return 0

    if args.command == "delete":
        result = await store.delete(args.product_id)
    else:
        if args.command == "edit":
            record = store.get(args.product_id)
            if record is None:
                print(f"No product with id {args.product_id}", file=sys.stderr)
                return 1
            session.start_edit(record)
        for arg, product_field in _FIELD_ARGS.items():
            value = getattr(args, arg)
            if value is not None:
                session.update_field(product_field, value)
        result = await session.submit()

    if not result.ok:
        return 1
    if result.record is not None:
        print(json.dumps(result.record.to_payload(), indent=2))
    return 0


def main(argv=None) -> int:
    return asyncio.run(run(parse_args(argv)))


if __name__ == "__main__":
    sys.exit(main())
