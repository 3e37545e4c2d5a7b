"""
Pydantic schemas for request/response validation
"""
from kiosk.schemas.catalog import CatalogEntryResponse, CatalogCategoryResponse
from kiosk.schemas.verification import SendCodeRequest, VerifyCodeRequest, VerificationStatusResponse
from kiosk.schemas.profile import ProfileUpdate, ProfileResponse
from kiosk.schemas.documents import LineCreate, LineResponse, LineEditForm
from kiosk.schemas.payment import PaymentRequest, SubmissionRecordResponse
from kiosk.schemas.workflow import SummaryResponse, WorkflowSnapshot

__all__ = [
    "CatalogEntryResponse",
    "CatalogCategoryResponse",
    "SendCodeRequest",
    "VerifyCodeRequest",
    "VerificationStatusResponse",
    "ProfileUpdate",
    "ProfileResponse",
    "LineCreate",
    "LineResponse",
    "LineEditForm",
    "PaymentRequest",
    "SubmissionRecordResponse",
    "SummaryResponse",
    "WorkflowSnapshot",
]
