"""Local HTTP backend for the /products resource."""
