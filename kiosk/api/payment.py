"""
Payment API endpoints
"""
from fastapi import APIRouter, Depends
from kiosk.api.deps import ensure_accepted, get_workflow
from kiosk.schemas.payment import PaymentRequest, SubmissionRecordResponse
from kiosk.services.workflow import WorkflowController

router = APIRouter()


@router.post("", response_model=SubmissionRecordResponse, status_code=201)
async def submit_payment(
    data: PaymentRequest,
    workflow: WorkflowController = Depends(get_workflow)
):
    """
    Choose a payment method and submit the request.

    The kiosk returns to the verification stage on its own a few seconds
    after a successful submission, so the returned record is the only copy
    the caller gets.

    Args:
        data: Payment method (cash, mobile-wallet or bank-transfer)
        workflow: Kiosk workflow

    Returns:
        SubmissionRecordResponse with reference number, total and processing time

    Raises:
        HTTPException 422: If no supported payment method was chosen
        HTTPException 409: If the workflow is not in the payment stage
        HTTPException 503: If the submission service failed; retry keeps all data
    """
    ensure_accepted(await workflow.submit_payment(data.method))
    return SubmissionRecordResponse.model_validate(workflow.record)
