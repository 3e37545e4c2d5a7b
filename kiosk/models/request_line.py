"""
Request line model
"""
from pydantic import BaseModel, ConfigDict, Field

MIN_COPIES = 1
MAX_COPIES = 10


class RequestLine(BaseModel):
    """
    One selected document with copies and purpose.

    Name, category and fee are copied from the catalog when the line is
    created, so later catalog lookups never change an existing line.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    document_id: str
    name: str
    category: str
    fee: int = Field(..., ge=0)
    copies: int = Field(..., ge=MIN_COPIES, le=MAX_COPIES)
    purpose: str = Field(..., min_length=1)

    @property
    def subtotal(self) -> int:
        return self.fee * self.copies
