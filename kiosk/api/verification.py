"""
Verification API endpoints
"""
from fastapi import APIRouter, Depends
from kiosk.api.deps import ensure_accepted, get_workflow, snapshot, verification_status
from kiosk.schemas.verification import SendCodeRequest, VerificationStatusResponse, VerifyCodeRequest
from kiosk.schemas.workflow import WorkflowSnapshot
from kiosk.services.workflow import WorkflowController

router = APIRouter()


@router.post("/send", response_model=WorkflowSnapshot)
async def send_code(
    data: SendCodeRequest,
    workflow: WorkflowController = Depends(get_workflow)
):
    """
    Send a one-time code to the given email address or mobile number.

    Args:
        data: Student ID, channel and contact value
        workflow: Kiosk workflow

    Returns:
        WorkflowSnapshot with the verification session in code_sent

    Raises:
        HTTPException 422: If the student ID or contact is missing
        HTTPException 409: If a code was already sent, or a newer request replaced this one
        HTTPException 502: If the code could not be delivered
    """
    outcome = ensure_accepted(await workflow.request_code(data.identifier, data.channel, data.contact))
    return snapshot(workflow, outcome.message)


@router.post("/resend", response_model=WorkflowSnapshot)
async def resend_code(workflow: WorkflowController = Depends(get_workflow)):
    """Send a fresh code to the same contact; the previous code stops working."""
    outcome = ensure_accepted(await workflow.resend_code())
    return snapshot(workflow, outcome.message)


@router.post("/verify", response_model=WorkflowSnapshot)
async def verify_code(
    data: VerifyCodeRequest,
    workflow: WorkflowController = Depends(get_workflow)
):
    """
    Check the entered code.

    On a match the workflow moves to the profile stage with the student ID
    and verified contact filled in.

    Raises:
        HTTPException 422: If the code is incomplete, wrong or expired
        HTTPException 409: If no code is pending
    """
    outcome = ensure_accepted(workflow.verify_code(data.code))
    return snapshot(workflow, outcome.message)


@router.get("/countdown", response_model=VerificationStatusResponse)
async def get_countdown(workflow: WorkflowController = Depends(get_workflow)):
    """Remaining validity of the pending code; poll once per second."""
    return verification_status(workflow)
