"""
Workflow navigation API endpoints
"""
from fastapi import APIRouter, Depends
from kiosk.api.deps import ensure_accepted, get_workflow, snapshot
from kiosk.schemas.workflow import WorkflowSnapshot
from kiosk.services.workflow import WorkflowController

router = APIRouter()


@router.get("", response_model=WorkflowSnapshot)
async def get_state(workflow: WorkflowController = Depends(get_workflow)):
    """Current stage and everything entered so far."""
    return snapshot(workflow)


@router.post("/back", response_model=WorkflowSnapshot)
async def go_back(workflow: WorkflowController = Depends(get_workflow)):
    """
    Return to the previous stage.

    Saved data is kept; only the current stage's unsaved edit is discarded.

    Raises:
        HTTPException 409: From the verification or completed stage
    """
    outcome = ensure_accepted(workflow.go_back())
    return snapshot(workflow, outcome.message)


@router.post("/advance", response_model=WorkflowSnapshot)
async def advance(workflow: WorkflowController = Depends(get_workflow)):
    """Move forward again using the data already saved for this stage."""
    outcome = ensure_accepted(workflow.advance())
    return snapshot(workflow, outcome.message)


@router.post("/reset", response_model=WorkflowSnapshot)
async def reset(workflow: WorkflowController = Depends(get_workflow)):
    """Discard the whole request and return to verification."""
    workflow.reset()
    return snapshot(workflow)
