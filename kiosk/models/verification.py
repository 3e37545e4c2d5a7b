"""
Verification models
"""
from datetime import datetime
from pydantic import BaseModel, ConfigDict, SecretStr
from kiosk.models.enums import ContactChannel


class DeliveryAcknowledgement(BaseModel):
    """Returned by a verification channel once a code has been delivered"""
    model_config = ConfigDict(frozen=True)

    code: SecretStr
    delivered_at: datetime


class VerifiedIdentity(BaseModel):
    """Who was verified, and through which channel"""
    model_config = ConfigDict(frozen=True)

    identifier: str
    contact: str
    channel: ContactChannel


class CountdownStatus(BaseModel):
    """One observation of the code validity countdown"""
    remaining_seconds: int
    must_resend: bool

    @property
    def display(self) -> str:
        mins, secs = divmod(self.remaining_seconds, 60)
        return f"{mins}:{secs:02d}"
