"""
Document selection API endpoints
"""
from fastapi import APIRouter, Depends
from kiosk.api.deps import ensure_accepted, get_workflow, snapshot
from kiosk.schemas.documents import LineCreate, LineEditForm
from kiosk.schemas.workflow import WorkflowSnapshot
from kiosk.services.workflow import WorkflowController

router = APIRouter()


@router.post("/lines", response_model=WorkflowSnapshot, status_code=201)
async def add_line(
    data: LineCreate,
    workflow: WorkflowController = Depends(get_workflow)
):
    """
    Add a document to the request, or save the line being edited.

    Copies outside 1..10 are clamped. When `edit_index` is omitted and a
    line is being edited, that line is replaced.

    Raises:
        HTTPException 422: If the purpose is missing or not listed
        HTTPException 404: If the document or edit position does not exist
    """
    outcome = ensure_accepted(workflow.add_line(
        data.document_id,
        data.copies,
        data.purpose,
        other_purpose=data.other_purpose,
        edit_index=data.edit_index,
    ))
    return snapshot(workflow, outcome.message)


@router.get("/lines/{index}/edit", response_model=LineEditForm)
async def begin_edit(
    index: int,
    workflow: WorkflowController = Depends(get_workflow)
):
    """Start editing the line at `index` and return its current values."""
    ensure_accepted(workflow.begin_edit(index))
    return LineEditForm(**workflow.edit_form)


@router.post("/edit/cancel", response_model=WorkflowSnapshot)
async def cancel_edit(workflow: WorkflowController = Depends(get_workflow)):
    workflow.cancel_edit()
    return snapshot(workflow)


@router.delete("/lines/{index}", response_model=WorkflowSnapshot)
async def remove_line(
    index: int,
    workflow: WorkflowController = Depends(get_workflow)
):
    """Remove the line at `index`."""
    outcome = ensure_accepted(workflow.remove_line(index))
    return snapshot(workflow, outcome.message)


@router.post("/confirm", response_model=WorkflowSnapshot)
async def confirm_documents(workflow: WorkflowController = Depends(get_workflow)):
    """
    Move on to payment.

    Raises:
        HTTPException 422: If no document has been selected
    """
    outcome = ensure_accepted(workflow.confirm_documents())
    return snapshot(workflow, outcome.message)
