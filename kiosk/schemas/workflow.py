"""
Workflow Pydantic schemas
"""
from typing import Dict, List, Optional
from pydantic import BaseModel, Field
from kiosk.models.enums import Stage
from kiosk.schemas.documents import LineEditForm, LineResponse
from kiosk.schemas.payment import SubmissionRecordResponse
from kiosk.schemas.profile import ProfileResponse
from kiosk.schemas.verification import VerificationStatusResponse


class SummaryResponse(BaseModel):
    """Schema for request totals"""
    total_amount: int
    line_count: int
    total_copies: int
    processing_estimate: str

    class Config:
        from_attributes = True


class WorkflowSnapshot(BaseModel):
    """Schema for the full workflow state shown by the kiosk"""
    stage: Stage
    step: int = Field(..., ge=1, le=5, description="1-based stage number")
    message: Optional[str] = Field(None, description="Feedback for the last operation")
    verification: VerificationStatusResponse
    profile: ProfileResponse
    profile_draft: Optional[ProfileResponse] = None
    profile_errors: Dict[str, str] = Field(default_factory=dict)
    lines: List[LineResponse]
    editing: Optional[LineEditForm] = None
    summary: SummaryResponse
    is_submitting: bool
    record: Optional[SubmissionRecordResponse] = None
