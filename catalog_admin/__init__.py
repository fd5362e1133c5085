"""
Product catalog administration client.

The store owns the product list, the edit session owns the form, and both talk
to the /products backend through an injected ProductsClient.
"""

__version__ = "1.0.0"
