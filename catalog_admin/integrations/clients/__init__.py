"""
Products clients (mock and real HTTP).

Pick one with ``build_products_client``; nothing else should construct them
based on configuration.
"""

from __future__ import annotations

import logging
from typing import Optional

from catalog_admin.integrations.contracts.interfaces import ProductsClient
from catalog_admin.utils.config_loader import CatalogConfig

logger = logging.getLogger(__name__)


def build_products_client(config: Optional[CatalogConfig] = None) -> ProductsClient:
    config = config or CatalogConfig()
    if config.api.use_mock:
        from .mocks.products import MockProductsClient

        logger.info("Using in-memory mock products client")
        return MockProductsClient()

    from .real_http.products import RealProductsClient

    logger.info("Using products backend at %s", config.api.base_url)
    return RealProductsClient(
        base_url=config.api.base_url,
        products_path=config.api.products_path,
        timeout_seconds=config.api.timeout_seconds,
    )


__all__ = ["build_products_client"]
