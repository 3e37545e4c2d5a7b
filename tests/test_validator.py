"""Test field validation."""

import pytest

from kiosk.models.profile import Profile
from kiosk.services import validator
from conftest import VALID_PROFILE


def make_profile(**overrides):
    return Profile(identifier="S100", **{**VALID_PROFILE, **overrides})


def test_valid_profile_has_no_errors():
    assert validator.validate_profile(make_profile()) == {}


@pytest.mark.parametrize("field,message", [
    ("name", "Name is required"),
    ("course", "Course is required"),
    ("year", "Year is required"),
    ("contact_number", "Contact number is required"),
    ("email", "Email is required"),
])
def test_required_profile_fields(field, message):
    errors = validator.validate_profile(make_profile(**{field: "   "}))
    assert errors == {field: message}


def test_all_missing_fields_reported_together():
    errors = validator.validate_profile(Profile(identifier="S100"))
    assert set(errors) == {"name", "course", "year", "contact_number", "email"}


@pytest.mark.parametrize("email", ["ab.edu", "a@b", "a @b.edu", "@"])
def test_malformed_email(email):
    assert validator.validate_profile(make_profile(email=email)) == {"email": "Email format is invalid"}


def test_course_must_be_listed():
    errors = validator.validate_profile(make_profile(course="Underwater Basket Weaving"))
    assert errors == {"course": "Please choose a course from the list"}


def test_contact_requires_identifier_and_contact():
    assert validator.validate_contact("S100", "a@b.edu") == {}
    assert set(validator.validate_contact("", None)) == {"identifier", "contact"}
    assert set(validator.validate_contact("S100", "  ")) == {"contact"}


@pytest.mark.parametrize("code", [None, "", "12345", "1234567", "12345a", "12 456"])
def test_incomplete_codes(code):
    assert validator.validate_code_format(code) == "Please enter a complete 6-digit code."


def test_complete_code():
    assert validator.validate_code_format("000123") is None
    assert validator.validate_code_format("1234", length=4) is None


def test_purpose_rules():
    assert validator.validate_purpose("Employment") == {}
    assert validator.validate_purpose("") == {"purpose": "Please specify the purpose"}
    assert validator.validate_purpose("Fun") == {"purpose": "Please choose a purpose from the list"}
    assert validator.validate_purpose("Other") == {"other_purpose": "Please describe the purpose"}
    assert validator.validate_purpose("Other", "Board exam") == {}


def test_payment_method_rules():
    assert validator.validate_payment_method("cash") == {}
    assert validator.validate_payment_method("mobile-wallet") == {}
    assert validator.validate_payment_method("bank-transfer") == {}
    assert "payment_method" in validator.validate_payment_method("")
    assert "payment_method" in validator.validate_payment_method("crypto")
