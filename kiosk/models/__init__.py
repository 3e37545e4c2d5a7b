"""
Domain models package
"""
from kiosk.models.enums import Stage, VerificationState, ContactChannel, PaymentMethod, ErrorKind
from kiosk.models.catalog import DocumentCatalogEntry, CatalogCategory
from kiosk.models.profile import Profile
from kiosk.models.request_line import RequestLine
from kiosk.models.verification import DeliveryAcknowledgement, VerifiedIdentity, CountdownStatus
from kiosk.models.submission import RequestSummary, SubmissionReceipt, SubmissionRecord
from kiosk.models.outcome import StageOutcome

__all__ = [
    "Stage",
    "VerificationState",
    "ContactChannel",
    "PaymentMethod",
    "ErrorKind",
    "DocumentCatalogEntry",
    "CatalogCategory",
    "Profile",
    "RequestLine",
    "DeliveryAcknowledgement",
    "VerifiedIdentity",
    "CountdownStatus",
    "RequestSummary",
    "SubmissionReceipt",
    "SubmissionRecord",
    "StageOutcome",
]
