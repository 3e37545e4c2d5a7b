"""
Document selection Pydantic schemas
"""
from typing import Optional
from pydantic import BaseModel, Field


class LineCreate(BaseModel):
    """Schema for adding a document, or saving the line being edited"""
    document_id: str = Field(..., description="Catalog id")
    copies: int = Field(1, description="Number of copies; clamped to 1..10")
    purpose: str = Field("", description="One of the listed purposes")
    other_purpose: Optional[str] = Field(None, description="Free text when purpose is 'Other'")
    edit_index: Optional[int] = Field(None, ge=0, description="Position of the line to replace")


class LineResponse(BaseModel):
    """Schema for a selected document line"""
    id: str
    document_id: str
    name: str
    category: str
    fee: int
    copies: int
    purpose: str
    subtotal: int = Field(..., description="fee x copies")

    class Config:
        from_attributes = True


class LineEditForm(BaseModel):
    """Schema for pre-filling the edit form of a line"""
    index: int
    document_id: str
    copies: int
    purpose: str
    other_purpose: Optional[str] = None
