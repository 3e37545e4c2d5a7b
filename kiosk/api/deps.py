"""
Shared API dependencies and response helpers
"""
from typing import Optional
from fastapi import HTTPException, Request
from kiosk.models.enums import ErrorKind
from kiosk.models.outcome import StageOutcome
from kiosk.schemas.documents import LineEditForm, LineResponse
from kiosk.schemas.payment import SubmissionRecordResponse
from kiosk.schemas.profile import ProfileResponse
from kiosk.schemas.verification import VerificationStatusResponse
from kiosk.schemas.workflow import SummaryResponse, WorkflowSnapshot
from kiosk.services.workflow import WorkflowController

STATUS_BY_ERROR = {
    ErrorKind.VALIDATION: 422,
    ErrorKind.INVALID_CODE: 422,
    ErrorKind.CODE_EXPIRED: 422,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INDEX: 404,
    ErrorKind.STAGE: 409,
    ErrorKind.SUPERSEDED: 409,
    ErrorKind.DELIVERY_FAILURE: 502,
    ErrorKind.SUBMISSION_FAILURE: 503,
}


def get_workflow(request: Request) -> WorkflowController:
    """Return the kiosk's workflow controller"""
    return request.app.state.workflow


def ensure_accepted(outcome: StageOutcome) -> StageOutcome:
    """
    Turn a rejected outcome into an HTTP error.

    Raises:
        HTTPException: With a status derived from the error kind and a detail
            body carrying the stage, message and per-field errors
    """
    if outcome.accepted:
        return outcome
    raise HTTPException(
        status_code=STATUS_BY_ERROR.get(outcome.error, 400),
        detail={
            "stage": outcome.stage.value,
            "error": outcome.error.value if outcome.error else None,
            "message": outcome.message,
            "errors": outcome.errors,
        },
    )


def verification_status(workflow: WorkflowController) -> VerificationStatusResponse:
    session = workflow.session
    status = workflow.countdown()
    return VerificationStatusResponse(
        state=session.state,
        channel=session.channel,
        contact=session.contact,
        remaining_seconds=status.remaining_seconds,
        countdown=status.display,
        must_resend=status.must_resend,
        is_sending=workflow.is_sending,
        error=session.error,
    )


def snapshot(workflow: WorkflowController, message: Optional[str] = None) -> WorkflowSnapshot:
    """Build the kiosk's view of the whole workflow"""
    draft = workflow.profile_draft
    edit_form = workflow.edit_form
    record = workflow.record
    return WorkflowSnapshot(
        stage=workflow.stage,
        step=workflow.stage.number,
        message=message,
        verification=verification_status(workflow),
        profile=ProfileResponse.model_validate(workflow.profile),
        profile_draft=ProfileResponse.model_validate(draft) if draft is not None else None,
        profile_errors=workflow.profile_errors,
        lines=[LineResponse.model_validate(line) for line in workflow.lines],
        editing=LineEditForm(**edit_form) if edit_form is not None else None,
        summary=SummaryResponse.model_validate(workflow.summary),
        is_submitting=workflow.is_submitting,
        record=SubmissionRecordResponse.model_validate(record) if record is not None else None,
    )
