"""Client-side value validators."""

from .package import (
    DEFAULT_PACKAGE_VALUE_LIMIT,
    is_valid_package_value,
    validate_delivery_balance,
    validate_package_value,
)
from .phone import (
    KENYAN_PHONE_PATTERN,
    format_kenyan_phone_number,
    is_valid_kenyan_phone_number,
    validate_kenyan_phone_number,
)

__all__ = [
    "DEFAULT_PACKAGE_VALUE_LIMIT",
    "KENYAN_PHONE_PATTERN",
    "format_kenyan_phone_number",
    "is_valid_kenyan_phone_number",
    "is_valid_package_value",
    "validate_delivery_balance",
    "validate_kenyan_phone_number",
    "validate_package_value",
]
