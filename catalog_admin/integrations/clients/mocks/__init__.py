"""
Mock integration clients.

These clients return realistic responses without calling any external API.
They are used when:
- the products backend is not running locally
- we want to test the store and edit session without network access

Mock clients follow the SAME interface as the real HTTP clients.
"""

from .products import MockProductsClient

__all__ = ["MockProductsClient"]
