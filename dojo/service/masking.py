"""Hiding personal data (NRIC numbers, e-mail addresses, phone numbers) in text."""

from __future__ import annotations

import re
from typing import Any

_REDACTED = "[REDACTED]"

_NRIC_MASK = re.compile(r"(^|\b)[STGF]\d{4}(\d{3}[\w](\b|$))", re.ASCII)
_NRIC_REDACT = re.compile(r"(^|\b)[STGF]\d{7}[\w](\b|$)", re.ASCII)
_EMAIL = re.compile(r"(\b|^)[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}(\b|$)", re.ASCII)
_PHONE = re.compile(r"(\b|^)([9|6|8](\d{7,11}|\d{3}\s?\d{4}))(\b|$)", re.ASCII)


def mask_nric(content: str) -> str:
    """Replace the first five characters of each NRIC number with asterisks."""
    return _NRIC_MASK.sub(r"\g<1>*****\g<2>", content)


def redact_nric(content: str) -> str:
    """Replace each whole NRIC number with a redaction marker."""
    return _NRIC_REDACT.sub(_REDACTED, content)


def mask_email(content: str) -> str:
    return _EMAIL.sub(_REDACTED, content)


def mask_phone_number(content: str) -> str:
    return _PHONE.sub(_REDACTED, content)


def mask_sensitive(value: Any) -> Any:
    """Mask strings and integers; every other value is returned unchanged.

    Integers are checked as phone numbers and come back as strings.
    """
    if isinstance(value, str):
        return mask_phone_number(mask_email(mask_nric(value)))
    if isinstance(value, int) and not isinstance(value, bool):
        return mask_phone_number(str(value))
    return value