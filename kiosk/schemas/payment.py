"""
Payment Pydantic schemas
"""
from datetime import datetime
from pydantic import BaseModel, Field
from kiosk.models.enums import PaymentMethod


class PaymentRequest(BaseModel):
    """Schema for choosing a payment method and submitting"""
    method: str = Field("", description="cash, mobile-wallet or bank-transfer")


class SubmissionRecordResponse(BaseModel):
    """Schema for a completed request"""
    reference_number: str = Field(..., description="Tracking reference, e.g. DOC-123456-AB7")
    total_amount: int
    processing_estimate: str
    payment_method: PaymentMethod
    submitted_at: datetime

    class Config:
        from_attributes = True
