"""
Real HTTP integration clients.

These clients communicate with the products backend over HTTP.

Important:
- Must implement the same interface as the mock clients
- Must return data shaped according to catalog_admin/integrations/contracts/*
"""

from .products import RealProductsClient

__all__ = ["RealProductsClient"]
