"""Test the document catalog."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from kiosk.core.errors import CatalogLookupError
from kiosk.services import catalog


def test_categories_in_display_order():
    categories = catalog.list_categories()
    assert [c.key for c in categories] == ["academic", "financial", "certifications"]
    assert [d.id for d in categories[0].documents] == ["transcript", "enrollment", "graduation", "diploma"]
    assert catalog.list_categories() == categories


def test_lookup_returns_entry_with_category_title():
    entry = catalog.lookup("transcript")
    assert entry.name == "Transcript of Records"
    assert entry.category == "Academic Records"
    assert entry.fee == 150
    assert catalog.lookup("good-moral").fee == 75


def test_lookup_unknown_id():
    with pytest.raises(CatalogLookupError) as exc_info:
        catalog.lookup("birth-certificate")
    assert isinstance(exc_info.value, KeyError)
    assert "birth-certificate" in str(exc_info.value)


def test_entries_are_immutable():
    entry = catalog.lookup("enrollment")
    with pytest.raises(PydanticValidationError):
        entry.fee = 0
    assert catalog.lookup("enrollment").fee == 50


def test_fees_are_non_negative_integers():
    for category in catalog.list_categories():
        for doc in category.documents:
            assert isinstance(doc.fee, int)
            assert doc.fee >= 0


def test_purpose_options_end_with_other():
    assert catalog.PURPOSE_OPTIONS[-1] == catalog.OTHER_PURPOSE
    assert "Employment" in catalog.PURPOSE_OPTIONS


def test_slow_documents_exist_in_catalog():
    for document_id in catalog.SLOW_DOCUMENT_IDS:
        assert catalog.lookup(document_id)
