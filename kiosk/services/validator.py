"""Field validation for contact, code, profile, purpose and payment input.

Every function is pure: it returns a field -> message map (empty when the
input is valid) or a single message, and never mutates its arguments.
"""

import re
from typing import Dict, Optional
from kiosk.models.enums import PaymentMethod
from kiosk.models.profile import Profile
from kiosk.services.catalog import COURSES, OTHER_PURPOSE, PURPOSE_OPTIONS

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")


def _blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def validate_contact(identifier: Optional[str], contact: Optional[str]) -> Dict[str, str]:
    """Check the identifier and contact value entered before a code is sent."""
    errors: Dict[str, str] = {}
    if _blank(identifier):
        errors["identifier"] = "Student ID is required"
    if _blank(contact):
        errors["contact"] = "Contact is required"
    return errors


def validate_code_format(code: Optional[str], length: int = 6) -> Optional[str]:
    """Return an error message unless `code` is exactly `length` digits."""
    if code is None or len(code) != length or not code.isdigit():
        return f"Please enter a complete {length}-digit code."
    return None


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.fullmatch(email.strip()))


def validate_profile(profile: Profile) -> Dict[str, str]:
    """Validate every required profile field.

    Args:
        profile: Profile to check

    Returns:
        Dict mapping field name to error message; empty when valid
    """
    errors: Dict[str, str] = {}

    if _blank(profile.name):
        errors["name"] = "Name is required"
    if _blank(profile.course):
        errors["course"] = "Course is required"
    elif profile.course not in COURSES:
        errors["course"] = "Please choose a course from the list"
    if _blank(profile.year):
        errors["year"] = "Year is required"
    if _blank(profile.contact_number):
        errors["contact_number"] = "Contact number is required"
    if _blank(profile.email):
        errors["email"] = "Email is required"
    elif not is_valid_email(profile.email):
        errors["email"] = "Email format is invalid"

    return errors


def validate_purpose(purpose: Optional[str], other_purpose: Optional[str] = None) -> Dict[str, str]:
    """Purpose must be a listed option; "Other" needs free text."""
    if _blank(purpose):
        return {"purpose": "Please specify the purpose"}
    if purpose not in PURPOSE_OPTIONS:
        return {"purpose": "Please choose a purpose from the list"}
    if purpose == OTHER_PURPOSE and _blank(other_purpose):
        return {"other_purpose": "Please describe the purpose"}
    return {}


def validate_payment_method(method: Optional[str]) -> Dict[str, str]:
    if _blank(method):
        return {"payment_method": "Please select a payment method to proceed"}
    try:
        PaymentMethod(method)
    except ValueError:
        return {"payment_method": f"Unsupported payment method: {method}"}
    return {}
