"""
Profile API endpoints
"""
from fastapi import APIRouter, Depends
from kiosk.api.deps import ensure_accepted, get_workflow, snapshot
from kiosk.schemas.profile import ProfileUpdate
from kiosk.schemas.workflow import WorkflowSnapshot
from kiosk.services.workflow import WorkflowController

router = APIRouter()


@router.patch("", response_model=WorkflowSnapshot)
async def edit_profile(
    data: ProfileUpdate,
    workflow: WorkflowController = Depends(get_workflow)
):
    """Apply edits to the unsaved profile draft without validating it."""
    for field, value in data.model_dump(exclude_none=True).items():
        ensure_accepted(workflow.update_profile_field(field, value))
    return snapshot(workflow)


@router.put("", response_model=WorkflowSnapshot)
async def submit_profile(
    data: ProfileUpdate,
    workflow: WorkflowController = Depends(get_workflow)
):
    """
    Validate and save the profile, then move on to document selection.

    Raises:
        HTTPException 422: With a per-field error map if any field is invalid
        HTTPException 409: If the workflow is not in the profile stage
    """
    outcome = ensure_accepted(workflow.submit_profile(data.model_dump(exclude_none=True)))
    return snapshot(workflow, outcome.message)
