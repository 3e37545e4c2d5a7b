"""Test reference numbers and the local submission service."""

import re

import pytest

from kiosk.models.enums import PaymentMethod
from kiosk.models.profile import Profile
from kiosk.services.request_builder import RequestBuilder
from kiosk.services.submission_service import LocalSubmissionService, generate_reference_number


def test_reference_uses_last_six_timestamp_digits():
    reference = generate_reference_number(now_ms=1234567890123)
    assert reference.startswith("DOC-890123-")
    assert re.fullmatch(r"DOC-890123-[A-Z0-9]{3}", reference)


def test_reference_pads_short_timestamps():
    assert generate_reference_number(now_ms=42).startswith("DOC-000042-")


def test_reference_from_current_time():
    assert re.fullmatch(r"DOC-\d{6}-[A-Z0-9]{3}", generate_reference_number())
    assert re.fullmatch(r"DOC-\d{6}-[A-Z0-9]{3}", generate_reference_number(now_ms=None))


@pytest.mark.asyncio
async def test_local_service_estimates_processing_time():
    builder = RequestBuilder()
    builder.add_or_update("receipt", 1, "Employment")
    service = LocalSubmissionService()
    profile = Profile(identifier="S100", name="Ana Reyes")

    receipt = await service.submit(profile, builder.lines, PaymentMethod.CASH)
    assert receipt.processing_estimate == "2-3 business days"

    builder.add_or_update("diploma", 1, "Employment")
    receipt = await service.submit(profile, builder.lines, PaymentMethod.CASH)
    assert receipt.processing_estimate == "5-7 business days"
    assert re.fullmatch(r"DOC-\d{6}-[A-Z0-9]{3}", receipt.reference_number)
