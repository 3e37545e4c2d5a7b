"""Four-stage document request workflow."""

import asyncio
import logging
from typing import Any, AsyncIterator, Dict, Optional, Tuple
from kiosk.core.clock import Clock, utcnow
from kiosk.core.config import Settings, settings as default_settings
from kiosk.core.errors import (
    CodeDeliveryError,
    CodeExpired,
    StageTransitionError,
    SubmissionFailure,
    SupersededError,
    ValidationError,
    WorkflowError,
)
from kiosk.models.enums import ContactChannel, PaymentMethod, Stage, VerificationState
from kiosk.models.outcome import StageOutcome
from kiosk.models.profile import Profile
from kiosk.models.request_line import RequestLine
from kiosk.models.submission import RequestSummary, SubmissionRecord
from kiosk.models.verification import CountdownStatus, DeliveryAcknowledgement
from kiosk.services import countdown, validator
from kiosk.services.request_builder import RequestBuilder
from kiosk.services.submission_service import SubmissionService
from kiosk.services.verification_channel import VerificationChannel
from kiosk.services.verification_session import VerificationSession

logger = logging.getLogger(__name__)

EDITABLE_PROFILE_FIELDS = ("name", "course", "year", "contact_number", "email")


class WorkflowController:
    """
    Owns the whole state tree of one kiosk session and moves it through
    verification -> profile -> document selection -> payment -> completed.

    Every operation returns a StageOutcome. Errors raised by the verification
    session, request builder or collaborators are reported in the outcome and
    leave the workflow in the stage that detected them.

    Back-navigation keeps saved data (profile, lines, verified session) and
    only discards the current stage's unsaved edit: the profile draft or a
    line being edited.
    """

    def __init__(
        self,
        channel: VerificationChannel,
        submission_service: SubmissionService,
        settings: Settings = default_settings,
        clock: Clock = utcnow,
    ):
        self.channel = channel
        self.submission_service = submission_service
        self.settings = settings
        self._clock = clock
        self.session = VerificationSession(
            validity_seconds=settings.CODE_VALIDITY_SECONDS,
            code_length=settings.CODE_LENGTH,
        )
        self.builder = RequestBuilder(clock=clock)
        self._send_generation = 0
        self._sending_generation: Optional[int] = None
        self._epoch = 0
        self._reset_handle: Optional[asyncio.TimerHandle] = None
        self._clear_state()

    def _clear_state(self) -> None:
        self.stage = Stage.VERIFICATION
        self.profile = Profile()
        self.profile_draft: Optional[Profile] = None
        self.profile_errors: Dict[str, str] = {}
        self.editing_index: Optional[int] = None
        self.record: Optional[SubmissionRecord] = None
        self._submitting = False

    # Outcomes

    def _accept(self, message: Optional[str] = None) -> StageOutcome:
        return StageOutcome(accepted=True, stage=self.stage, message=message)

    def _reject(self, exc: WorkflowError) -> StageOutcome:
        logger.info("Rejected in %s stage: %s", self.stage.value, exc.message)
        return StageOutcome(
            accepted=False,
            stage=self.stage,
            error=exc.kind,
            message=exc.message,
            errors=exc.errors,
        )

    def _require_stage(self, stage: Stage) -> None:
        if self.stage != stage:
            raise StageTransitionError(
                f"This step is not available while in the {self.stage.value} stage"
            )

    # Read-only views

    @property
    def lines(self) -> Tuple[RequestLine, ...]:
        return self.builder.lines

    @property
    def summary(self) -> RequestSummary:
        return self.builder.summary()

    @property
    def is_sending(self) -> bool:
        """True while the latest code delivery is in flight."""
        return self._sending_generation is not None

    @property
    def is_submitting(self) -> bool:
        return self._submitting

    @property
    def edit_form(self) -> Optional[Dict[str, Any]]:
        if self.editing_index is None:
            return None
        return self.builder.edit_form(self.editing_index)

    def countdown(self) -> CountdownStatus:
        return countdown.observe(self.session, self._clock)

    def countdown_ticks(self, interval: Optional[float] = None) -> AsyncIterator[CountdownStatus]:
        if interval is None:
            interval = self.settings.COUNTDOWN_INTERVAL_SECONDS
        return countdown.ticks(self.session, self._clock, interval)

    # Stage 1: verification

    async def _deliver(self, channel: ContactChannel, contact: str) -> DeliveryAcknowledgement:
        """Send a code; only the most recently started delivery may win."""
        self._send_generation += 1
        generation = self._send_generation
        self._sending_generation = generation
        try:
            ack = await self.channel.send(channel, contact)
        except OSError as exc:
            logger.warning("Code delivery via %s failed: %s", channel.value, exc)
            raise CodeDeliveryError() from exc
        except WorkflowError:
            raise
        except Exception as exc:
            logger.exception("Verification channel error during delivery via %s", channel.value)
            raise CodeDeliveryError() from exc
        finally:
            if self._sending_generation == generation:
                self._sending_generation = None
        if generation != self._send_generation:
            logger.info("Discarding superseded code delivery %d", generation)
            raise SupersededError()
        return ack

    async def request_code(self, identifier: str, channel: ContactChannel, contact: str) -> StageOutcome:
        """Send a verification code to the contact and wait for it to be entered.

        Args:
            identifier: Student ID
            channel: Email or mobile
            contact: Email address or mobile number

        Returns:
            StageOutcome; the session is in code_sent when accepted
        """
        try:
            self._require_stage(Stage.VERIFICATION)
            if self.session.state != VerificationState.AWAITING_CONTACT:
                raise StageTransitionError("A verification code was already sent; use resend instead")
            errors = validator.validate_contact(identifier, contact)
            try:
                channel = ContactChannel(channel)
            except ValueError:
                errors["channel"] = "Choose email or mobile"
            if errors:
                raise ValidationError(errors, "Please fill in all required fields.")

            ack = await self._deliver(channel, contact.strip())
            self.session.submit_contact(
                identifier, channel, contact, ack.code.get_secret_value(), self._clock()
            )
        except WorkflowError as exc:
            return self._reject(exc)

        return self._accept(
            f"A {self.settings.CODE_LENGTH}-digit verification code has been sent to your {channel.value}."
        )

    async def resend_code(self) -> StageOutcome:
        """Issue a fresh code to the same contact; the previous code stops working."""
        try:
            self._require_stage(Stage.VERIFICATION)
            if self.session.state != VerificationState.CODE_SENT:
                raise StageTransitionError("No verification code is pending")
            ack = await self._deliver(self.session.channel, self.session.contact)
            self.session.resend(ack.code.get_secret_value(), self._clock())
        except WorkflowError as exc:
            return self._reject(exc)

        return self._accept("A new verification code has been sent.")

    def verify_code(self, code: str) -> StageOutcome:
        """Check the entered code and move on to the profile stage on a match."""
        try:
            self._require_stage(Stage.VERIFICATION)
            if self.session.state == VerificationState.CODE_SENT and self.session.is_expired(self._clock()):
                exc = CodeExpired()
                self.session.error = exc.message
                raise exc
            identity = self.session.verify(code)
        except WorkflowError as exc:
            return self._reject(exc)

        if self.profile.is_empty():
            contact_field = "email" if identity.channel == ContactChannel.EMAIL else "contact_number"
            self.profile = self.profile.model_copy(update={
                "identifier": identity.identifier,
                contact_field: identity.contact,
            })
        self._enter_profile()
        return self._accept("Verification Successful")

    # Stage 2: profile

    def _enter_profile(self) -> None:
        self.stage = Stage.PROFILE
        self.profile_draft = self.profile.model_copy()
        self.profile_errors = {}

    def update_profile_field(self, field: str, value: str) -> StageOutcome:
        """Edit one field of the unsaved profile draft."""
        try:
            self._require_stage(Stage.PROFILE)
            if field not in EDITABLE_PROFILE_FIELDS:
                raise ValidationError({field: f"{field} cannot be changed"})
        except WorkflowError as exc:
            return self._reject(exc)

        self.profile_draft = self.profile_draft.model_copy(update={field: value})
        self.profile_errors.pop(field, None)
        return self._accept()

    def submit_profile(self, data: Optional[Dict[str, str]] = None) -> StageOutcome:
        """Validate the profile draft (with `data` applied) and save it.

        Args:
            data: Optional field -> value updates applied before validation

        Returns:
            StageOutcome; rejected outcomes carry a per-field error map
        """
        try:
            self._require_stage(Stage.PROFILE)
            updates = dict(data or {})
            identifier = updates.pop("identifier", None)
            if identifier is not None and identifier != self.profile.identifier:
                raise ValidationError({"identifier": "Student ID cannot be changed"})
            unknown = set(updates) - set(EDITABLE_PROFILE_FIELDS)
            if unknown:
                raise ValidationError({name: "Unknown field" for name in sorted(unknown)})

            draft = self.profile_draft.model_copy(update=updates)
            draft = draft.model_copy(update={
                name: (getattr(draft, name) or "").strip() for name in EDITABLE_PROFILE_FIELDS
            })
            self.profile_draft = draft
            errors = validator.validate_profile(draft)
            if errors:
                self.profile_errors = errors
                raise ValidationError(errors)
        except WorkflowError as exc:
            return self._reject(exc)

        self.profile = draft
        self.profile_draft = None
        self.profile_errors = {}
        self.stage = Stage.DOCUMENT_SELECTION
        return self._accept("Information Saved")

    # Stage 3: document selection

    def add_line(
        self,
        document_id: str,
        copies: int,
        purpose: str,
        other_purpose: Optional[str] = None,
        edit_index: Optional[int] = None,
    ) -> StageOutcome:
        """Add a document, or save the line currently being edited."""
        if edit_index is None:
            edit_index = self.editing_index
        try:
            self._require_stage(Stage.DOCUMENT_SELECTION)
            line = self.builder.add_or_update(
                document_id, copies, purpose, edit_index=edit_index, other_purpose=other_purpose
            )
        except WorkflowError as exc:
            return self._reject(exc)

        self.editing_index = None
        return self._accept(f"{line.name} has been added to your request.")

    def begin_edit(self, index: int) -> StageOutcome:
        try:
            self._require_stage(Stage.DOCUMENT_SELECTION)
            self.builder.edit_form(index)
        except WorkflowError as exc:
            return self._reject(exc)
        self.editing_index = index
        return self._accept()

    def cancel_edit(self) -> StageOutcome:
        self.editing_index = None
        return self._accept()

    def remove_line(self, index: int) -> StageOutcome:
        try:
            self._require_stage(Stage.DOCUMENT_SELECTION)
            self.builder.remove(index)
        except WorkflowError as exc:
            return self._reject(exc)

        if self.editing_index == index:
            self.editing_index = None
        elif self.editing_index is not None and self.editing_index > index:
            self.editing_index -= 1
        return self._accept("The document has been removed from your request.")

    def confirm_documents(self) -> StageOutcome:
        """Move on to payment; needs at least one selected document."""
        try:
            self._require_stage(Stage.DOCUMENT_SELECTION)
            if not self.builder.lines:
                raise ValidationError(
                    {"documents": "Please select at least one document to continue."},
                    "No Documents Selected",
                )
        except WorkflowError as exc:
            return self._reject(exc)

        self.editing_index = None
        self.stage = Stage.PAYMENT
        return self._accept()

    # Stage 4: payment

    async def submit_payment(self, method: PaymentMethod) -> StageOutcome:
        """Record the payment method and submit the request.

        On success the workflow is completed and a reset back to verification
        is scheduled after RESET_DELAY_SECONDS. A submission failure keeps the
        workflow in payment with all data intact; it is never retried here.
        """
        epoch = self._epoch
        try:
            self._require_stage(Stage.PAYMENT)
            if self._submitting:
                raise StageTransitionError("Your request is already being submitted")
            errors = validator.validate_payment_method(method)
            if errors:
                raise ValidationError(errors, "Payment Method Required")
            method = PaymentMethod(method)
            if self.session.state != VerificationState.VERIFIED or not self.builder.lines:
                raise StageTransitionError("The request is incomplete")

            self._submitting = True
            try:
                receipt = await asyncio.wait_for(
                    self.submission_service.submit(self.profile, self.builder.lines, method),
                    timeout=self.settings.SUBMISSION_TIMEOUT_SECONDS,
                )
            except asyncio.TimeoutError:
                raise SubmissionFailure("The submission service did not respond in time. Please try again.")
            except OSError as exc:
                logger.warning("Submission service unreachable: %s", exc)
                raise SubmissionFailure() from exc
            except WorkflowError:
                raise
            except Exception as exc:
                logger.exception("Submission service error")
                raise SubmissionFailure() from exc
            finally:
                if epoch == self._epoch:
                    self._submitting = False

            if epoch != self._epoch:
                raise SupersededError("The session ended before the request was submitted.")
        except WorkflowError as exc:
            return self._reject(exc)

        self.record = SubmissionRecord(
            reference_number=receipt.reference_number,
            total_amount=self.builder.total(),
            processing_estimate=receipt.processing_estimate,
            payment_method=method,
            submitted_at=self._clock(),
        )
        self.stage = Stage.COMPLETED
        logger.info("Request %s submitted, total %d", self.record.reference_number, self.record.total_amount)
        self._schedule_reset()
        return self._accept("Request Submitted Successfully!")

    def _schedule_reset(self) -> None:
        loop = asyncio.get_running_loop()
        self._reset_handle = loop.call_later(self.settings.RESET_DELAY_SECONDS, self._auto_reset)

    def _auto_reset(self) -> None:
        self._reset_handle = None
        logger.info("Returning kiosk to idle")
        self.reset()

    # Navigation

    def go_back(self) -> StageOutcome:
        """Step back one stage, discarding only the current unsaved edit."""
        try:
            if self.stage in (Stage.VERIFICATION, Stage.COMPLETED):
                raise StageTransitionError(f"Cannot go back from the {self.stage.value} stage")
            if self._submitting:
                raise StageTransitionError("Your request is already being submitted")
        except WorkflowError as exc:
            return self._reject(exc)

        if self.stage == Stage.PROFILE:
            self.profile_draft = None
            self.profile_errors = {}
            self.stage = Stage.VERIFICATION
        elif self.stage == Stage.DOCUMENT_SELECTION:
            self.editing_index = None
            self._enter_profile()
        elif self.stage == Stage.PAYMENT:
            self.stage = Stage.DOCUMENT_SELECTION
        return self._accept()

    def advance(self) -> StageOutcome:
        """Re-apply the current stage's forward guard using what is already saved."""
        if self.stage == Stage.VERIFICATION:
            if self.session.state != VerificationState.VERIFIED:
                return self._reject(StageTransitionError("Please verify your identity first"))
            self._enter_profile()
            return self._accept()
        if self.stage == Stage.PROFILE:
            return self.submit_profile()
        if self.stage == Stage.DOCUMENT_SELECTION:
            return self.confirm_documents()
        if self.stage == Stage.PAYMENT:
            return self._reject(StageTransitionError("Choose a payment method to submit your request"))
        return self._reject(StageTransitionError("The request is already completed"))

    def reset(self) -> StageOutcome:
        """Clear every piece of session data and return to verification."""
        if self._reset_handle is not None:
            self._reset_handle.cancel()
            self._reset_handle = None
        self._epoch += 1
        self._send_generation += 1
        self._sending_generation = None
        self.session.reset()
        self.builder.clear()
        self._clear_state()
        return self._accept()
