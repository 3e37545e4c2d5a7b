"""Identity verification session."""

import hmac
import logging
from datetime import datetime, timedelta
from typing import Optional
from kiosk.core.errors import InvalidCode, StageTransitionError, ValidationError
from kiosk.models.enums import ContactChannel, VerificationState
from kiosk.models.verification import VerifiedIdentity
from kiosk.services import validator

logger = logging.getLogger(__name__)


class VerificationSession:
    """
    One-time code lifecycle for a single kiosk user.

    State transitions:
    - awaiting_contact -> code_sent (submit_contact)
    - code_sent -> code_sent (resend, with a fresh code and deadline)
    - code_sent -> verified (verify with the most recently issued code)
    - any -> awaiting_contact (reset)

    Expiry is observed, not enforced: `remaining_validity` reports how long
    the pending code stays valid and the caller decides to reject a late
    attempt. The pending code is never returned, only pass/fail.
    """

    def __init__(self, validity_seconds: int = 300, code_length: int = 6):
        self.validity = timedelta(seconds=validity_seconds)
        self.code_length = code_length
        self.reset()

    def reset(self) -> None:
        """Forget everything and wait for contact details again."""
        self.state = VerificationState.AWAITING_CONTACT
        self.identifier: Optional[str] = None
        self.channel: Optional[ContactChannel] = None
        self.contact: Optional[str] = None
        self.issued_at: Optional[datetime] = None
        self.expires_at: Optional[datetime] = None
        self.error: Optional[str] = None
        self._code: Optional[str] = None

    def submit_contact(
        self,
        identifier: str,
        channel: ContactChannel,
        contact: str,
        code: str,
        now: datetime,
    ) -> None:
        """Record contact details and the code that was delivered to them.

        Args:
            identifier: Student ID entered by the user
            channel: Email or mobile
            contact: Address or number the code was sent to
            code: The code issued for this attempt
            now: Issue time; the deadline is now + validity window

        Raises:
            ValidationError: If identifier or contact is missing
            StageTransitionError: If a code was already sent or verified
        """
        if self.state != VerificationState.AWAITING_CONTACT:
            raise StageTransitionError("A verification code was already sent; use resend instead")

        errors = validator.validate_contact(identifier, contact)
        if errors:
            raise ValidationError(errors, "Please fill in all required fields.")

        self.identifier = identifier.strip()
        self.channel = ContactChannel(channel)
        self.contact = contact.strip()
        self._issue(code, now)
        self.state = VerificationState.CODE_SENT
        logger.info("Verification code issued via %s, expires at %s", self.channel.value, self.expires_at.isoformat())

    def resend(self, code: str, now: datetime) -> None:
        """Replace the pending code with a fresh one and restart the deadline."""
        if self.state != VerificationState.CODE_SENT:
            raise StageTransitionError("No verification code is pending")
        self._issue(code, now)
        logger.info("Verification code reissued, expires at %s", self.expires_at.isoformat())

    def _issue(self, code: str, now: datetime) -> None:
        self._code = code
        self.issued_at = now
        self.expires_at = now + self.validity
        self.error = None

    def verify(self, candidate: str) -> VerifiedIdentity:
        """Compare a candidate code with the one most recently issued.

        A wrong attempt keeps the pending code, so the user can retry until
        the code expires.

        Raises:
            StageTransitionError: If no code is pending
            ValidationError: If the candidate is not a complete code
            InvalidCode: If the candidate does not match
        """
        if self.state != VerificationState.CODE_SENT:
            raise StageTransitionError("No verification code is pending")

        self.error = None
        format_error = validator.validate_code_format(candidate, self.code_length)
        if format_error:
            self.error = format_error
            raise ValidationError({"code": format_error}, format_error)

        if not hmac.compare_digest(candidate.encode(), self._code.encode()):
            exc = InvalidCode()
            self.error = exc.message
            raise exc

        self.state = VerificationState.VERIFIED
        self._code = None
        logger.info("Identity verified via %s", self.channel.value)
        return self.identity

    @property
    def identity(self) -> Optional[VerifiedIdentity]:
        if self.state != VerificationState.VERIFIED:
            return None
        return VerifiedIdentity(identifier=self.identifier, contact=self.contact, channel=self.channel)

    def clear_error(self) -> None:
        self.error = None

    def remaining_validity(self, now: datetime) -> int:
        """Whole seconds until the pending code expires, never negative.

        Rounded down for display; use `is_expired` to decide whether the
        code is still accepted.
        """
        if self.state != VerificationState.CODE_SENT or self.expires_at is None:
            return 0
        return max(0, int((self.expires_at - now).total_seconds()))

    def is_expired(self, now: datetime) -> bool:
        """True once the deadline is reached, or when no code is pending."""
        if self.state != VerificationState.CODE_SENT or self.expires_at is None:
            return True
        return now >= self.expires_at
