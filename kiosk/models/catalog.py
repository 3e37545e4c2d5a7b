"""
Document catalog models
"""
from typing import Tuple
from pydantic import BaseModel, ConfigDict, Field


class DocumentCatalogEntry(BaseModel):
    """A requestable document type with its fixed processing fee"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    category: str
    fee: int = Field(..., ge=0)


class CatalogCategory(BaseModel):
    """A titled group of catalog entries"""
    model_config = ConfigDict(frozen=True)

    key: str
    title: str
    documents: Tuple[DocumentCatalogEntry, ...]
