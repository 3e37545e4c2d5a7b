"""Verification code delivery channels."""

import asyncio
import logging
import secrets
from abc import ABC, abstractmethod
from kiosk.core.clock import utcnow
from kiosk.core.config import Settings
from kiosk.models.enums import ContactChannel
from kiosk.models.verification import DeliveryAcknowledgement
from kiosk.services import validator

logger = logging.getLogger(__name__)


class VerificationChannel(ABC):
    """
    Port: delivers a one-time code to an email address or mobile number.

    The acknowledgement carries the code that was delivered; the workflow
    keeps it inside the verification session and only ever compares it.
    """

    @abstractmethod
    async def send(self, channel: ContactChannel, contact: str) -> DeliveryAcknowledgement:
        """
        Deliver a fresh code.

        Args:
            channel: Email or mobile.
            contact: Address or number to deliver to.

        Returns:
            DeliveryAcknowledgement with the issued code.
        """
        ...


class ConsoleVerificationChannel(VerificationChannel):
    """Generates random numeric codes and logs the delivery instead of sending it."""

    def __init__(self, code_length: int = 6, delay_seconds: float = 0.0):
        self.code_length = code_length
        self.delay_seconds = delay_seconds

    def generate_code(self) -> str:
        return "".join(secrets.choice("0123456789") for _ in range(self.code_length))

    async def send(self, channel: ContactChannel, contact: str) -> DeliveryAcknowledgement:
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        code = self.generate_code()
        logger.info("Delivering %d-digit verification code via %s to %s: %s",
                    self.code_length, ContactChannel(channel).value, contact, code)
        return DeliveryAcknowledgement(code=code, delivered_at=utcnow())


class FixedCodeVerificationChannel(VerificationChannel):
    """Always delivers the same known code. For demos and tests only."""

    def __init__(self, code: str = "123456", delay_seconds: float = 0.0):
        self.code = code
        self.delay_seconds = delay_seconds
        self.deliveries = []

    async def send(self, channel: ContactChannel, contact: str) -> DeliveryAcknowledgement:
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        self.deliveries.append((ContactChannel(channel), contact))
        return DeliveryAcknowledgement(code=self.code, delivered_at=utcnow())


def channel_from_settings(settings: Settings) -> VerificationChannel:
    """Build the verification channel named by VERIFICATION_CHANNEL."""
    if settings.VERIFICATION_CHANNEL == "fixed":
        if not settings.FIXED_VERIFICATION_CODE:
            raise ValueError("FIXED_VERIFICATION_CODE must be set when VERIFICATION_CHANNEL=fixed")
        if validator.validate_code_format(settings.FIXED_VERIFICATION_CODE, settings.CODE_LENGTH):
            raise ValueError(
                f"FIXED_VERIFICATION_CODE must be exactly {settings.CODE_LENGTH} digits"
            )
        return FixedCodeVerificationChannel(
            code=settings.FIXED_VERIFICATION_CODE,
            delay_seconds=settings.CODE_DELIVERY_DELAY_SECONDS,
        )
    if settings.VERIFICATION_CHANNEL == "console":
        return ConsoleVerificationChannel(
            code_length=settings.CODE_LENGTH,
            delay_seconds=settings.CODE_DELIVERY_DELAY_SECONDS,
        )
    raise ValueError(f"Unknown VERIFICATION_CHANNEL: {settings.VERIFICATION_CHANNEL}")
