"""Pytest configuration and fixtures."""

import sys
import asyncio
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
import pytest_asyncio

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from kiosk.core.config import Settings
from kiosk.core.errors import SubmissionFailure
from kiosk.models.enums import ContactChannel
from kiosk.models.verification import DeliveryAcknowledgement
from kiosk.services.submission_service import LocalSubmissionService, SubmissionService
from kiosk.services.verification_channel import FixedCodeVerificationChannel, VerificationChannel
from kiosk.services.workflow import WorkflowController

TEST_CODE = "123456"


class ManualClock:
    """Clock that only moves when told to."""

    def __init__(self, start=None):
        self.now = start or datetime(2026, 1, 5, 9, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += timedelta(seconds=seconds)


class SequenceChannel(VerificationChannel):
    """Delivers the given codes in order, one per send."""

    def __init__(self, *codes):
        self.codes = list(codes)

    async def send(self, channel, contact):
        return DeliveryAcknowledgement(code=self.codes.pop(0), delivered_at=datetime.now(timezone.utc))


class GatedChannel(VerificationChannel):
    """Each send waits until the test releases it."""

    def __init__(self):
        self.gates = []
        self.codes = []

    async def send(self, channel, contact):
        gate = asyncio.Event()
        self.gates.append(gate)
        code = f"{len(self.gates):06d}"
        self.codes.append(code)
        await gate.wait()
        return DeliveryAcknowledgement(code=code, delivered_at=datetime.now(timezone.utc))


class FlakySubmissionService(SubmissionService):
    """Fails the first `failures` submissions, then delegates to the local service."""

    def __init__(self, failures=1):
        self.failures = failures
        self.calls = 0
        self._local = LocalSubmissionService()

    async def submit(self, profile, lines, payment_method):
        self.calls += 1
        if self.calls <= self.failures:
            raise SubmissionFailure()
        return await self._local.submit(profile, lines, payment_method)


@pytest.fixture
def test_settings():
    return Settings(
        VERIFICATION_CHANNEL="fixed",
        FIXED_VERIFICATION_CODE=TEST_CODE,
        CODE_VALIDITY_SECONDS=300,
        RESET_DELAY_SECONDS=0.05,
        SUBMISSION_TIMEOUT_SECONDS=1.0,
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def controller(test_settings, clock):
    return WorkflowController(
        channel=FixedCodeVerificationChannel(TEST_CODE),
        submission_service=LocalSubmissionService(),
        settings=test_settings,
        clock=clock,
    )


VALID_PROFILE = {
    "name": "Ana Reyes",
    "course": "Bachelor of Science in Computer Science",
    "year": "2024",
    "contact_number": "+1 555 123 4567",
    "email": "a@b.edu",
}


@pytest_asyncio.fixture
async def verified_controller(controller):
    """Controller that has passed verification (stage: profile)."""
    outcome = await controller.request_code("S100", ContactChannel.EMAIL, "a@b.edu")
    assert outcome.accepted
    assert controller.verify_code(TEST_CODE).accepted
    return controller


@pytest_asyncio.fixture
async def selecting_controller(verified_controller):
    """Controller in the document selection stage with a saved profile."""
    assert verified_controller.submit_profile(VALID_PROFILE).accepted
    return verified_controller
