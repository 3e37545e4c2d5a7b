"""
Verification Pydantic schemas
"""
from typing import Optional
from pydantic import BaseModel, Field
from kiosk.models.enums import ContactChannel, VerificationState


class SendCodeRequest(BaseModel):
    """Schema for requesting a verification code"""
    identifier: str = Field("", description="Student ID")
    channel: ContactChannel = Field(ContactChannel.EMAIL, description="Where to send the code (email/mobile)")
    contact: str = Field("", description="Email address or mobile number")


class VerifyCodeRequest(BaseModel):
    """Schema for submitting the received code"""
    code: str = Field("", description="6-digit verification code")


class VerificationStatusResponse(BaseModel):
    """Schema for the verification session as the kiosk may display it"""
    state: VerificationState
    channel: Optional[ContactChannel] = None
    contact: Optional[str] = None
    remaining_seconds: int = Field(..., ge=0)
    countdown: str = Field(..., description="Remaining validity as m:ss")
    must_resend: bool
    is_sending: bool = Field(..., description="True while a code delivery is pending")
    error: Optional[str] = Field(None, description="Reason the last attempt failed")
