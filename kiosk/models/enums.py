"""
Enum definitions for the workflow models
"""
import enum


class Stage(str, enum.Enum):
    """Workflow stages, in forward order"""
    VERIFICATION = "verification"              # Step 1: one-time code check
    PROFILE = "profile"                        # Step 2: confirm personal details
    DOCUMENT_SELECTION = "document_selection"  # Step 3: choose documents
    PAYMENT = "payment"                        # Step 4: choose payment, submit
    COMPLETED = "completed"                    # Request submitted, kiosk resets soon

    @property
    def number(self) -> int:
        return STAGE_ORDER.index(self) + 1


STAGE_ORDER = [
    Stage.VERIFICATION,
    Stage.PROFILE,
    Stage.DOCUMENT_SELECTION,
    Stage.PAYMENT,
    Stage.COMPLETED,
]


class VerificationState(str, enum.Enum):
    """Identity verification lifecycle"""
    AWAITING_CONTACT = "awaiting_contact"
    CODE_SENT = "code_sent"
    VERIFIED = "verified"


class ContactChannel(str, enum.Enum):
    """Where the one-time code is delivered"""
    EMAIL = "email"
    MOBILE = "mobile"


class PaymentMethod(str, enum.Enum):
    """Accepted payment methods"""
    CASH = "cash"                    # Pay at the registrar's cashier
    MOBILE_WALLET = "mobile-wallet"
    BANK_TRANSFER = "bank-transfer"


class ErrorKind(str, enum.Enum):
    """Categories of recoverable workflow errors"""
    VALIDATION = "validation"
    INVALID_CODE = "invalid_code"
    CODE_EXPIRED = "code_expired"
    NOT_FOUND = "not_found"
    INDEX = "index"
    STAGE = "stage"
    SUPERSEDED = "superseded"
    DELIVERY_FAILURE = "delivery_failure"
    SUBMISSION_FAILURE = "submission_failure"
