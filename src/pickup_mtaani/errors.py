"""Error types raised by the Pickup Mtaani client.

Transport failures are classified exactly once, in the HTTP client, into a
closed set of kinds. Every classified failure is a ``PickupMtaaniError``
subclass whose ``kind`` attribute names its variant, so callers can either
catch a specific class or branch over ``ErrorKind``.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL_SERVER = "internal_server"
    TIMEOUT = "timeout"
    NETWORK = "network"
    API = "api"


class PickupMtaaniError(Exception):
    """Base class for every classified API or transport failure."""

    kind: ErrorKind = ErrorKind.API
    default_message = "An error occurred"
    default_status: int | None = None

    def __init__(
        self,
        message: str | None = None,
        status_code: int | None = None,
        validation_errors: Sequence[str] | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.status_code = status_code if status_code is not None else self.default_status
        self.validation_errors = list(validation_errors) if validation_errors else []
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"[{self.status_code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"status_code={self.status_code!r}, validation_errors={self.validation_errors!r})"
        )


class ValidationError(PickupMtaaniError):
    """Request validation failed (400), or a local validator rejected a value."""

    kind = ErrorKind.VALIDATION
    default_message = "Validation failed"
    default_status = 400


class AuthenticationError(PickupMtaaniError):
    kind = ErrorKind.AUTHENTICATION
    default_message = "Invalid API key or authentication failed"
    default_status = 401


class AuthorizationError(PickupMtaaniError):
    kind = ErrorKind.AUTHORIZATION
    default_message = "Insufficient permissions"
    default_status = 403


class NotFoundError(PickupMtaaniError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Resource not found"
    default_status = 404


class ConflictError(PickupMtaaniError):
    """The operation conflicts with the resource's current state (409)."""

    kind = ErrorKind.CONFLICT
    default_message = "Request conflicts with the current resource state"
    default_status = 409


class InternalServerError(PickupMtaaniError):
    kind = ErrorKind.INTERNAL_SERVER
    default_message = "Internal server error"
    default_status = 500


class RequestTimeoutError(PickupMtaaniError):
    """No response arrived before the configured deadline."""

    kind = ErrorKind.TIMEOUT
    default_message = "Request timed out"
    default_status = 408


class NetworkError(PickupMtaaniError):
    """The request never produced a response (DNS, refused connection, reset)."""

    kind = ErrorKind.NETWORK
    default_message = "Network error occurred"


class ConfigurationError(ValueError):
    """The client was built without a required setting."""


class MissingDataError(RuntimeError):
    """A successful response carried no payload where one is required."""


_STATUS_KINDS: dict[int, ErrorKind] = {
    400: ErrorKind.VALIDATION,
    401: ErrorKind.AUTHENTICATION,
    403: ErrorKind.AUTHORIZATION,
    404: ErrorKind.NOT_FOUND,
    409: ErrorKind.CONFLICT,
    500: ErrorKind.INTERNAL_SERVER,
    502: ErrorKind.INTERNAL_SERVER,
    503: ErrorKind.INTERNAL_SERVER,
    504: ErrorKind.INTERNAL_SERVER,
}

ERROR_TYPES: dict[ErrorKind, type[PickupMtaaniError]] = {
    ErrorKind.VALIDATION: ValidationError,
    ErrorKind.AUTHENTICATION: AuthenticationError,
    ErrorKind.AUTHORIZATION: AuthorizationError,
    ErrorKind.NOT_FOUND: NotFoundError,
    ErrorKind.CONFLICT: ConflictError,
    ErrorKind.INTERNAL_SERVER: InternalServerError,
    ErrorKind.TIMEOUT: RequestTimeoutError,
    ErrorKind.NETWORK: NetworkError,
    ErrorKind.API: PickupMtaaniError,
}


def error_kind_for_status(status_code: int) -> ErrorKind:
    """Map an HTTP status code to its error kind; unknown codes map to ``ErrorKind.API``."""
    return _STATUS_KINDS.get(status_code, ErrorKind.API)


def error_for_status(
    status_code: int,
    message: str | None = None,
    validation_errors: Sequence[str] | None = None,
) -> PickupMtaaniError:
    """Build the error instance for a non-2xx response.

    The real status code is kept on the instance, so a 503 surfaces as an
    ``InternalServerError`` with ``status_code == 503``.
    """
    error_type = ERROR_TYPES[error_kind_for_status(status_code)]
    return error_type(message, status_code=status_code, validation_errors=validation_errors)
