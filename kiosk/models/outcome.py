"""
Stage outcome model
"""
from typing import Dict, Optional
from pydantic import BaseModel, Field
from kiosk.models.enums import ErrorKind, Stage


class StageOutcome(BaseModel):
    """
    Result of a workflow controller operation.

    Rejected operations carry the error kind, a user-facing message and, for
    validation failures, a field -> message map. The workflow stays in
    `stage` either way.
    """
    accepted: bool
    stage: Stage
    error: Optional[ErrorKind] = None
    message: Optional[str] = None
    errors: Dict[str, str] = Field(default_factory=dict)
