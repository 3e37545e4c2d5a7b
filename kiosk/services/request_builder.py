"""Selected-document line items."""

import logging
from typing import Optional, Tuple
from kiosk.core.clock import Clock, utcnow
from kiosk.core.errors import LineIndexError, ValidationError
from kiosk.models.request_line import RequestLine
from kiosk.services import catalog, fee_calculator, validator
from kiosk.models.submission import RequestSummary

logger = logging.getLogger(__name__)


class RequestBuilder:
    """
    Ordered list of RequestLines for the current request.

    The sequence is held as a tuple and replaced on every change, so a
    reference obtained from `lines` never changes under the caller.
    """

    def __init__(self, clock: Clock = utcnow):
        self._clock = clock
        self._lines: Tuple[RequestLine, ...] = ()

    @property
    def lines(self) -> Tuple[RequestLine, ...]:
        return self._lines

    def __len__(self) -> int:
        return len(self._lines)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._lines):
            raise LineIndexError(index, len(self._lines))

    def _new_line_id(self, document_id: str) -> str:
        stamp = int(self._clock().timestamp() * 1000)
        taken = {line.id for line in self._lines}
        while f"{document_id}-{stamp}" in taken:
            stamp += 1
        return f"{document_id}-{stamp}"

    def add_or_update(
        self,
        document_id: str,
        copies: int,
        purpose: str,
        edit_index: Optional[int] = None,
        other_purpose: Optional[str] = None,
    ) -> RequestLine:
        """Append a line, or replace the one at `edit_index`.

        Copies outside 1..10 are clamped rather than rejected. When "Other"
        is chosen the free-text purpose is stored on the line.

        Args:
            document_id: Catalog id of the document
            copies: Requested number of copies
            purpose: One of the listed purposes
            edit_index: Position of the line to replace, if editing
            other_purpose: Free text used when purpose is "Other"

        Returns:
            The new or replaced RequestLine

        Raises:
            ValidationError: If the purpose is missing or unlisted
            CatalogLookupError: If document_id is unknown
            LineIndexError: If edit_index is out of range
        """
        errors = validator.validate_purpose(purpose, other_purpose)
        if errors:
            raise ValidationError(errors, "Please select a document and specify the purpose.")
        entry = catalog.lookup(document_id)
        if edit_index is not None:
            self._check_index(edit_index)

        stored_purpose = other_purpose.strip() if purpose == catalog.OTHER_PURPOSE else purpose

        if edit_index is not None and self._lines[edit_index].document_id == document_id:
            line_id = self._lines[edit_index].id
        else:
            line_id = self._new_line_id(document_id)

        line = RequestLine(
            id=line_id,
            document_id=entry.id,
            name=entry.name,
            category=entry.category,
            fee=entry.fee,
            copies=fee_calculator.clamp_copies(copies),
            purpose=stored_purpose,
        )

        if edit_index is not None:
            updated = list(self._lines)
            updated[edit_index] = line
            self._lines = tuple(updated)
            logger.debug("Replaced line %d with %s", edit_index, line.id)
        else:
            self._lines = self._lines + (line,)
            logger.debug("Added line %s", line.id)
        return line

    def remove(self, index: int) -> Tuple[RequestLine, ...]:
        """Drop the line at `index` and return the remaining lines."""
        self._check_index(index)
        self._lines = self._lines[:index] + self._lines[index + 1:]
        return self._lines

    def edit_form(self, index: int) -> dict:
        """Values to pre-fill when editing the line at `index`."""
        self._check_index(index)
        line = self._lines[index]
        if line.purpose in catalog.PURPOSE_OPTIONS:
            purpose, other_purpose = line.purpose, None
        else:
            purpose, other_purpose = catalog.OTHER_PURPOSE, line.purpose
        return {
            "index": index,
            "document_id": line.document_id,
            "copies": line.copies,
            "purpose": purpose,
            "other_purpose": other_purpose,
        }

    def total(self) -> int:
        return fee_calculator.total_amount(self._lines)

    def summary(self) -> RequestSummary:
        return fee_calculator.summarize(self._lines)

    def clear(self) -> None:
        self._lines = ()
