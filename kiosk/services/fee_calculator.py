"""Fee and processing-time arithmetic for request lines."""

from typing import Iterable, Sequence
from kiosk.models.request_line import MAX_COPIES, MIN_COPIES, RequestLine
from kiosk.models.submission import RequestSummary
from kiosk.services.catalog import SLOW_DOCUMENT_IDS

STANDARD_ESTIMATE = "2-3 business days"
EXTENDED_ESTIMATE = "5-7 business days"


def clamp_copies(copies: int) -> int:
    """Clamp a copy count into [MIN_COPIES, MAX_COPIES]."""
    return max(MIN_COPIES, min(MAX_COPIES, int(copies)))


def line_subtotal(fee: int, copies: int) -> int:
    return fee * copies


def total_amount(lines: Iterable[RequestLine]) -> int:
    return sum(line_subtotal(line.fee, line.copies) for line in lines)


def processing_estimate(lines: Iterable[RequestLine]) -> str:
    """Transcripts and diplomas take the extended window."""
    if any(line.document_id in SLOW_DOCUMENT_IDS for line in lines):
        return EXTENDED_ESTIMATE
    return STANDARD_ESTIMATE


def summarize(lines: Sequence[RequestLine]) -> RequestSummary:
    return RequestSummary(
        total_amount=total_amount(lines),
        line_count=len(lines),
        total_copies=sum(line.copies for line in lines),
        processing_estimate=processing_estimate(lines),
    )
