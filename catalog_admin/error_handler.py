"""Error handling helpers for catalog operations."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from catalog_admin.errors import CatalogError, ValidationFailure
from catalog_admin.integrations.contracts.interfaces import ProductRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a store / session operation.

    ``applied`` is False when the operation succeeded remotely but its result was
    dropped because the store had been closed in the meantime.
    """

    operation: str
    ok: bool
    record: Optional[ProductRecord] = None
    applied: bool = True
    kind: Optional[str] = None
    error: Optional[str] = None
    field_errors: Dict[str, str] = field(default_factory=dict)
    context: Dict[str, Any] = field(default_factory=dict)


Reporter = Callable[[OperationResult], None]


class ErrorHandler:
    def __init__(self, reporter: Optional[Reporter] = None):
        self.reporter = reporter

    def handle_exception(self, exc: CatalogError, operation: str, context: Dict[str, Any] = None) -> OperationResult:
        context = context or {}
        if isinstance(exc, ValidationFailure):
            logger.warning("Invalid product data for %s: %s", operation, exc.field_errors)
        else:
            logger.error("Error in %s (%s): %s", operation, exc.kind, exc.message)

        result = OperationResult(
            operation=operation,
            ok=False,
            applied=False,
            kind=exc.kind,
            error=exc.message,
            field_errors=getattr(exc, "field_errors", {}),
            context=context,
        )
        self.report(result)
        return result

    def report(self, result: OperationResult) -> None:
        if self.reporter is None:
            return
        try:
            self.reporter(result)
        except Exception:
            logger.exception("Failure reporter raised while reporting %s", result.operation)
