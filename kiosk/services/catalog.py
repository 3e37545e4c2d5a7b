"""Document catalog: requestable documents, purposes and courses."""

from typing import Dict, Tuple
from kiosk.core.errors import CatalogLookupError
from kiosk.models.catalog import CatalogCategory, DocumentCatalogEntry


def _category(key: str, title: str, documents) -> CatalogCategory:
    return CatalogCategory(
        key=key,
        title=title,
        documents=tuple(
            DocumentCatalogEntry(id=doc_id, name=name, category=title, fee=fee)
            for doc_id, name, fee in documents
        ),
    )


CATEGORIES: Tuple[CatalogCategory, ...] = (
    _category("academic", "Academic Records", [
        ("transcript", "Transcript of Records", 150),
        ("enrollment", "Certificate of Enrollment", 50),
        ("graduation", "Certificate of Graduation", 100),
        ("diploma", "Diploma (Certified Copy)", 200),
    ]),
    _category("financial", "Financial Documents", [
        ("receipt", "Official Receipt (Copy)", 25),
    ]),
    _category("certifications", "Certifications", [
        ("good-moral", "Certificate of Good Moral", 75),
        ("completion", "Certificate of Completion", 50),
        ("honor", "Certificate with Honors", 100),
    ]),
)

_ENTRIES: Dict[str, DocumentCatalogEntry] = {
    doc.id: doc for category in CATEGORIES for doc in category.documents
}

# Documents that need the longer processing window
SLOW_DOCUMENT_IDS = frozenset({"transcript", "diploma"})

OTHER_PURPOSE = "Other"

PURPOSE_OPTIONS: Tuple[str, ...] = (
    "Employment",
    "Scholarship Application",
    "Graduate School Application",
    "Transfer to Another Institution",
    "Visa Application",
    "Personal Records",
    OTHER_PURPOSE,
)

COURSES: Tuple[str, ...] = (
    "Bachelor of Science in Computer Science",
    "Bachelor of Science in Information Technology",
    "Bachelor of Science in Business Administration",
    "Bachelor of Arts in English",
    "Bachelor of Arts in Psychology",
    "Bachelor of Science in Nursing",
    "Bachelor of Engineering",
    "Master of Business Administration",
    "Master of Science in Computer Science",
    "Doctor of Philosophy",
)


def list_categories() -> Tuple[CatalogCategory, ...]:
    """Return catalog categories in display order."""
    return CATEGORIES


def lookup(document_id: str) -> DocumentCatalogEntry:
    """Resolve a catalog entry by id.

    Args:
        document_id: Catalog id such as "transcript"

    Returns:
        The matching DocumentCatalogEntry

    Raises:
        CatalogLookupError: If no entry has that id
    """
    try:
        return _ENTRIES[document_id]
    except KeyError:
        raise CatalogLookupError(document_id) from None
