"""
Workflow error taxonomy.

Leaf components (catalog, validator, verification session, request builder,
submission service) raise these; the workflow controller turns them into
stage outcomes so that none of them escapes a stage boundary.
"""
from typing import Dict, Optional
from kiosk.models.enums import ErrorKind


class WorkflowError(Exception):
    """Base class for every recoverable workflow error."""

    kind: ErrorKind = ErrorKind.STAGE

    def __init__(self, message: str, errors: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.errors: Dict[str, str] = dict(errors or {})

    def __str__(self) -> str:
        return self.message


class ValidationError(WorkflowError):
    """One or more fields failed validation; `errors` maps field -> message."""

    kind = ErrorKind.VALIDATION

    def __init__(self, errors: Dict[str, str], message: str = "Please correct the highlighted fields."):
        super().__init__(message, errors)


class InvalidCode(WorkflowError):
    """The verification code did not match the one most recently issued."""

    kind = ErrorKind.INVALID_CODE

    def __init__(self, message: str = "Invalid verification code. Please try again."):
        super().__init__(message, {"code": message})


class CodeExpired(WorkflowError):
    """The verification code's validity window has elapsed."""

    kind = ErrorKind.CODE_EXPIRED

    def __init__(self, message: str = "The verification code has expired. Please request a new code."):
        super().__init__(message, {"code": message})


class CatalogLookupError(WorkflowError, KeyError):
    """Unknown catalog document id."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, document_id: str):
        super().__init__(f"Document '{document_id}' is not in the catalog", {"document_id": "Unknown document"})
        self.document_id = document_id


class LineIndexError(WorkflowError, IndexError):
    """Edit or remove addressed a line position that does not exist."""

    kind = ErrorKind.INDEX

    def __init__(self, index: int, size: int):
        super().__init__(f"Line {index} does not exist (request has {size} line(s))")
        self.index = index
        self.size = size


class StageTransitionError(WorkflowError):
    """Operation not allowed in the current stage or session state."""

    kind = ErrorKind.STAGE


class SupersededError(WorkflowError):
    """A newer code delivery was started before this one finished."""

    kind = ErrorKind.SUPERSEDED

    def __init__(self, message: str = "A newer verification code request replaced this one."):
        super().__init__(message)


class SubmissionFailure(WorkflowError):
    """The submission collaborator could not accept the request."""

    kind = ErrorKind.SUBMISSION_FAILURE

    def __init__(self, message: str = "We could not submit your request. Please try again."):
        super().__init__(message)


class CodeDeliveryError(WorkflowError):
    """The verification channel could not deliver the code."""

    kind = ErrorKind.DELIVERY_FAILURE

    def __init__(self, message: str = "We could not send the verification code. Please try again."):
        super().__init__(message)
