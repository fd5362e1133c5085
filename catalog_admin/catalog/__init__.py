"""
Product screen state: the catalog store, the edit session, and the login gate.
"""

from .edit_session import EditSession, SessionMode
from .route_guard import Redirect, private_route, private_route_for
from .store import CatalogStore
from .validation import ValidationResult, build_product_payload, validate_draft

__all__ = [
    "CatalogStore",
    "EditSession",
    "Redirect",
    "SessionMode",
    "ValidationResult",
    "build_product_payload",
    "private_route",
    "private_route_for",
    "validate_draft",
]
