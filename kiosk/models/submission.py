"""
Summary and submission models
"""
from datetime import datetime
from pydantic import BaseModel, ConfigDict
from kiosk.models.enums import PaymentMethod


class RequestSummary(BaseModel):
    """Derived totals for the current selection; never stored"""
    total_amount: int
    line_count: int
    total_copies: int
    processing_estimate: str


class SubmissionReceipt(BaseModel):
    """What a submission service hands back for an accepted request"""
    model_config = ConfigDict(frozen=True)

    reference_number: str
    processing_estimate: str


class SubmissionRecord(BaseModel):
    """Immutable record of a completed request"""
    model_config = ConfigDict(frozen=True)

    reference_number: str
    total_amount: int
    processing_estimate: str
    payment_method: PaymentMethod
    submitted_at: datetime
