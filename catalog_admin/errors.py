"""
Failure taxonomy for catalog operations.

Every failure an operation can hit is one of:
- FetchFailure: the request never produced a response (network / transport)
- HTTPStatusFailure: the backend answered with a non-2xx status
- ValidationFailure: the draft was rejected client-side, nothing was sent
- ParseFailure: the backend answered 2xx but the body is not usable

Clients raise these. CatalogStore / EditSession catch them at the operation
boundary (see error_handler.py) so they never escape to the caller.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class CatalogError(Exception):
    kind = "error"

    def __init__(self, message: str, *, payload: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.payload = payload


class FetchFailure(CatalogError):
    kind = "fetch"


class HTTPStatusFailure(CatalogError):
    kind = "http_status"

    def __init__(self, message: str, *, status_code: int, payload: Optional[Any] = None) -> None:
        super().__init__(message, payload=payload)
        self.status_code = status_code


class ValidationFailure(CatalogError):
    """Raised when a draft does not pass validation.

    Attributes:
        field_errors: mapping of wire field name -> human-readable error message.
    """

    kind = "validation"

    def __init__(self, field_errors: Dict[str, str], message: str = "Validation failed") -> None:
        super().__init__(message, payload=dict(field_errors))
        self.field_errors = dict(field_errors)


class ParseFailure(CatalogError):
    kind = "parse"
