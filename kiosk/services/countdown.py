"""Verification code countdown."""

import asyncio
from typing import AsyncIterator
from kiosk.core.clock import Clock
from kiosk.models.enums import VerificationState
from kiosk.models.verification import CountdownStatus
from kiosk.services.verification_session import VerificationSession


def observe(session: VerificationSession, clock: Clock) -> CountdownStatus:
    """Read the countdown for `session` at the clock's current time."""
    now = clock()
    remaining = session.remaining_validity(now)
    return CountdownStatus(
        remaining_seconds=remaining,
        must_resend=session.state == VerificationState.CODE_SENT and session.is_expired(now),
    )


async def ticks(session: VerificationSession, clock: Clock, interval: float = 1.0) -> AsyncIterator[CountdownStatus]:
    """Yield a CountdownStatus every `interval` seconds.

    Only reads the session. Stops after the tick that reports expiry, or as
    soon as the session is no longer waiting for a code.
    """
    while session.state == VerificationState.CODE_SENT:
        status = observe(session, clock)
        yield status
        if status.must_resend:
            return
        await asyncio.sleep(interval)
