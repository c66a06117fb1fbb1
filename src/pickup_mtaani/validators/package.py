"""Package value and on-delivery balance checks."""

from __future__ import annotations

from ..errors import ValidationError

DEFAULT_PACKAGE_VALUE_LIMIT = 1_000_000


def validate_package_value(value: float, limit: float = DEFAULT_PACKAGE_VALUE_LIMIT) -> None:
    """Raise ``ValidationError`` unless ``0 <= value <= limit``."""
    if value > limit:
        raise ValidationError(
            f"Package value {value} exceeds the limit of {limit}",
            validation_errors=[f"packageValue: must not exceed {limit}"],
        )
    if value < 0:
        raise ValidationError(
            "Package value must be a positive number",
            validation_errors=["packageValue: must be greater than or equal to 0"],
        )


def is_valid_package_value(value: float, limit: float = DEFAULT_PACKAGE_VALUE_LIMIT) -> bool:
    return 0 <= value <= limit


def validate_delivery_balance(balance: float) -> None:
    if balance < 0:
        raise ValidationError(
            "Delivery balance must be a positive number",
            validation_errors=["on_delivery_balance: must be greater than or equal to 0"],
        )
