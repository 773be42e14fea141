# portal/validators.py

"""Field validators for the contact form.

Each validator takes the raw widget value and returns a ValidationResult.
They never raise and never touch Streamlit, so they can be called from
callbacks and tests alike.
"""

import re
from dataclasses import dataclass


FIELDS = ("name", "email", "subject", "message")

_NAME_RE = re.compile(r"^[a-zA-Z\s]*$")
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    message: str = ""

    def __bool__(self):
        return self.valid


VALID = ValidationResult(True, "")


def _clean(value) -> str:
    # untouched widgets come back as None
    return value.strip() if isinstance(value, str) else ""


def _required_min_length(label, value, min_length):
    trimmed = _clean(value)
    if trimmed == "":
        return ValidationResult(False, f"{label} is required")
    if len(trimmed) < min_length:
        return ValidationResult(False, f"{label} must be at least {min_length} characters")
    return None


def validate_name(name) -> ValidationResult:
    failure = _required_min_length("Name", name, 2)
    if failure is not None:
        return failure
    if not _NAME_RE.match(_clean(name)):
        return ValidationResult(False, "Name can only contain letters and spaces")
    return VALID


def validate_email(email) -> ValidationResult:
    trimmed = _clean(email)
    if trimmed == "":
        return ValidationResult(False, "Email is required")
    if not _EMAIL_RE.fullmatch(trimmed):
        return ValidationResult(False, "Please enter a valid email address")
    return VALID


def validate_subject(subject) -> ValidationResult:
    failure = _required_min_length("Subject", subject, 3)
    return VALID if failure is None else failure


def validate_message(message) -> ValidationResult:
    failure = _required_min_length("Message", message, 10)
    return VALID if failure is None else failure


VALIDATORS = {
    "name": validate_name,
    "email": validate_email,
    "subject": validate_subject,
    "message": validate_message,
}


def validate_fields(values) -> dict:
    """Run every field validator, in form order, against a mapping of raw values."""
    return {field: VALIDATORS[field](values.get(field, "")) for field in FIELDS}
