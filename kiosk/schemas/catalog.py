"""
Catalog Pydantic schemas
"""
from typing import List
from pydantic import BaseModel, Field


class CatalogEntryResponse(BaseModel):
    """Schema for one requestable document"""
    id: str = Field(..., description="Catalog id, e.g. 'transcript'")
    name: str
    fee: int = Field(..., ge=0, description="Processing fee per copy")
    slow: bool = Field(..., description="True if the document needs the extended processing window")

    class Config:
        from_attributes = True


class CatalogCategoryResponse(BaseModel):
    """Schema for a catalog category with its documents"""
    key: str
    title: str
    documents: List[CatalogEntryResponse]
