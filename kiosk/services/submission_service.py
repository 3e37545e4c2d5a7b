"""Request submission services."""

import asyncio
import logging
import secrets
import string
import time
from abc import ABC, abstractmethod
from typing import Optional, Sequence
from kiosk.models.enums import PaymentMethod
from kiosk.models.profile import Profile
from kiosk.models.request_line import RequestLine
from kiosk.models.submission import SubmissionReceipt
from kiosk.services import fee_calculator

logger = logging.getLogger(__name__)

REFERENCE_ALPHABET = string.ascii_uppercase + string.digits


def generate_reference_number(now_ms: Optional[int] = None) -> str:
    """Build a tracking reference like DOC-123456-AB7.

    The middle part is the last six digits of a millisecond timestamp, the
    suffix three random uppercase alphanumerics. Uniqueness is not guaranteed.
    """
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    stamp = str(now_ms)[-6:].rjust(6, "0")
    suffix = "".join(secrets.choice(REFERENCE_ALPHABET) for _ in range(3))
    return f"DOC-{stamp}-{suffix}"


class SubmissionService(ABC):
    """
    Port: accepts a finalized request and returns its tracking reference.

    Implementations raise SubmissionFailure when the request cannot be
    accepted; the workflow stays in the payment stage for a retry.
    """

    @abstractmethod
    async def submit(
        self,
        profile: Profile,
        lines: Sequence[RequestLine],
        payment_method: PaymentMethod,
    ) -> SubmissionReceipt:
        ...


class LocalSubmissionService(SubmissionService):
    """In-process submission: generates the reference and estimate locally."""

    def __init__(self, delay_seconds: float = 0.0):
        self.delay_seconds = delay_seconds

    async def submit(
        self,
        profile: Profile,
        lines: Sequence[RequestLine],
        payment_method: PaymentMethod,
    ) -> SubmissionReceipt:
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        receipt = SubmissionReceipt(
            reference_number=generate_reference_number(),
            processing_estimate=fee_calculator.processing_estimate(lines),
        )
        logger.info("Accepted request %s for %s: %d line(s), payment %s",
                    receipt.reference_number, profile.identifier, len(lines), PaymentMethod(payment_method).value)
        return receipt
