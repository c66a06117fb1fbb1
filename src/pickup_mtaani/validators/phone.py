"""Kenyan phone number checks and formatting."""

from __future__ import annotations

import re

from ..errors import ValidationError

# +254 or 0, then a 1 or 7 line prefix, then eight digits.
KENYAN_PHONE_PATTERN = re.compile(r"^(\+254|0)(1|7)[0-9]{8}$")

_SEPARATORS = re.compile(r"[\s-]")


def is_valid_kenyan_phone_number(phone: str | None) -> bool:
    if not isinstance(phone, str):
        return False
    return KENYAN_PHONE_PATTERN.fullmatch(phone) is not None


def validate_kenyan_phone_number(phone: str | None) -> None:
    """Raise ``ValidationError`` unless ``phone`` is a Kenyan mobile number.

    Examples:
        >>> validate_kenyan_phone_number("0712345678")
        >>> validate_kenyan_phone_number("+254112345678")
    """
    if not is_valid_kenyan_phone_number(phone):
        raise ValidationError(
            "Invalid Kenyan phone number format. Must match pattern: "
            f"{KENYAN_PHONE_PATTERN.pattern}",
            validation_errors=[f'phone: "{phone}" does not match the required format'],
        )


def format_kenyan_phone_number(phone: str) -> str:
    """Normalize a phone number to the +254 international form.

    Spaces and dashes are removed first. The result is not validated, so
    unknown shapes come back cleaned but otherwise unchanged.
    """
    cleaned = _SEPARATORS.sub("", phone)
    if cleaned.startswith("0"):
        return "+254" + cleaned[1:]
    if cleaned.startswith("254"):
        return "+" + cleaned
    return cleaned
