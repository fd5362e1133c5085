"""
Edit session: the form state behind the product screen.

Holds the single in-progress draft and whether it is a new product (CREATING)
or an existing one (EDITING). Submission is gated on validation and routed to
the store's create or update; a successful submit always returns the session
to an empty CREATING draft, a failed one keeps the draft for correction.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Union

from catalog_admin.catalog.store import CatalogStore
from catalog_admin.catalog.validation import ValidationResult, validate_draft
from catalog_admin.error_handler import OperationResult
from catalog_admin.errors import ValidationFailure
from catalog_admin.integrations.contracts.interfaces import DraftRecord, ProductField, ProductRecord

logger = logging.getLogger(__name__)


class SessionMode(str, Enum):
    CREATING = "creating"
    EDITING = "editing"


class EditSession:
    def __init__(self, store: CatalogStore):
        self.store = store
        self.draft = DraftRecord.empty()
        self.mode = SessionMode.CREATING

    @property
    def is_editing(self) -> bool:
        return self.mode == SessionMode.EDITING

    def start_create(self) -> None:
        self.draft = DraftRecord.empty()
        self.mode = SessionMode.CREATING

    def start_edit(self, record: ProductRecord) -> None:
        self.draft = DraftRecord.from_record(record)
        self.mode = SessionMode.EDITING
        logger.debug("Editing product %s", record.id)

    def update_field(self, name: Union[ProductField, str], value: Any) -> None:
        """Set one editable field; unknown names raise ValueError."""
        try:
            product_field = ProductField(name)
        except ValueError:
            allowed = ", ".join(f.value for f in ProductField)
            raise ValueError(f"Unknown product field '{name}'. Expected one of: {allowed}") from None
        self.draft = self.draft.with_field(product_field, value)

    def validate(self, draft: DraftRecord = None) -> ValidationResult:
        return validate_draft(self.draft if draft is None else draft)

    def cancel(self) -> None:
        self.start_create()

    async def submit(self) -> OperationResult:
        operation = "update" if self.is_editing else "create"
        validation = self.validate()
        if self.is_editing and not self.draft.id:
            validation = ValidationResult({**validation.field_errors, "id": "Product id is missing"})
        if not validation.ok:
            return self.store.error_handler.handle_exception(
                ValidationFailure(validation.field_errors),
                operation,
                {"draft": self.draft.to_form_data()},
            )

        if self.is_editing:
            result = await self.store.update(self.draft.id, self.draft)
        else:
            result = await self.store.create(self.draft)

        if result.ok:
            self.start_create()
        return result
