"""
Catalog API endpoints
"""
from typing import List
from fastapi import APIRouter
from kiosk.schemas.catalog import CatalogCategoryResponse, CatalogEntryResponse
from kiosk.services import catalog

router = APIRouter()


@router.get("", response_model=List[CatalogCategoryResponse])
async def list_catalog():
    """List requestable documents grouped by category, in display order."""
    return [
        CatalogCategoryResponse(
            key=category.key,
            title=category.title,
            documents=[
                CatalogEntryResponse(id=doc.id, name=doc.name, fee=doc.fee, slow=doc.id in catalog.SLOW_DOCUMENT_IDS)
                for doc in category.documents
            ],
        )
        for category in catalog.list_categories()
    ]


@router.get("/purposes", response_model=List[str])
async def list_purposes():
    """Purposes a document can be requested for."""
    return list(catalog.PURPOSE_OPTIONS)


@router.get("/courses", response_model=List[str])
async def list_courses():
    """Courses accepted in the profile stage."""
    return list(catalog.COURSES)
