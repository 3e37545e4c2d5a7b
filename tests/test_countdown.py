"""Test the verification countdown."""

import pytest

from kiosk.models.enums import ContactChannel, VerificationState
from kiosk.services import countdown
from kiosk.services.verification_session import VerificationSession
from conftest import ManualClock


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def session(clock):
    session = VerificationSession(validity_seconds=300)
    session.submit_contact("S100", ContactChannel.MOBILE, "+1 555 0100", "123456", clock())
    return session


def test_observe(session, clock):
    status = countdown.observe(session, clock)
    assert status.remaining_seconds == 300
    assert status.display == "5:00"
    assert not status.must_resend

    clock.advance(295)
    assert countdown.observe(session, clock).display == "0:05"

    clock.advance(10)
    status = countdown.observe(session, clock)
    assert status.remaining_seconds == 0
    assert status.must_resend


def test_observe_without_pending_code(clock):
    status = countdown.observe(VerificationSession(), clock)
    assert status.remaining_seconds == 0
    assert not status.must_resend


@pytest.mark.asyncio
async def test_ticks_until_expiry(session, clock):
    seen = []
    async for status in countdown.ticks(session, clock, interval=0):
        seen.append(status.remaining_seconds)
        clock.advance(100)
    assert seen == [300, 200, 100, 0]
    assert session.state == VerificationState.CODE_SENT


@pytest.mark.asyncio
async def test_ticks_stop_once_verified(session, clock):
    seen = []
    async for status in countdown.ticks(session, clock, interval=0):
        seen.append(status.remaining_seconds)
        session.verify("123456")
    assert seen == [300]
