"""
Profile Pydantic schemas
"""
from typing import Optional
from pydantic import BaseModel, Field


class ProfileUpdate(BaseModel):
    """Schema for profile edits; omitted fields keep their current value"""
    name: Optional[str] = None
    course: Optional[str] = None
    year: Optional[str] = Field(None, description="Graduation or attendance year")
    contact_number: Optional[str] = None
    email: Optional[str] = None


class ProfileResponse(BaseModel):
    """Schema for profile response"""
    identifier: str = Field(..., description="Verified student ID")
    name: str
    course: str
    year: str
    contact_number: str
    email: str

    class Config:
        from_attributes = True
