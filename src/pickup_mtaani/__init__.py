"""Python client for the Pickup Mtaani delivery API."""

from .client import PickupMtaaniClient
from .config import DEFAULT_BASE_URL, ClientSettings
from .errors import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    ErrorKind,
    InternalServerError,
    MissingDataError,
    NetworkError,
    NotFoundError,
    PickupMtaaniError,
    RequestTimeoutError,
    ValidationError,
    error_for_status,
    error_kind_for_status,
)
from .http_client import HttpClient
from .validators import (
    format_kenyan_phone_number,
    is_valid_kenyan_phone_number,
    is_valid_package_value,
    validate_delivery_balance,
    validate_kenyan_phone_number,
    validate_package_value,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_BASE_URL",
    "AuthenticationError",
    "AuthorizationError",
    "ClientSettings",
    "ConfigurationError",
    "ConflictError",
    "ErrorKind",
    "HttpClient",
    "InternalServerError",
    "MissingDataError",
    "NetworkError",
    "NotFoundError",
    "PickupMtaaniClient",
    "PickupMtaaniError",
    "RequestTimeoutError",
    "ValidationError",
    "error_for_status",
    "error_kind_for_status",
    "format_kenyan_phone_number",
    "is_valid_kenyan_phone_number",
    "is_valid_package_value",
    "validate_delivery_balance",
    "validate_kenyan_phone_number",
    "validate_package_value",
]
