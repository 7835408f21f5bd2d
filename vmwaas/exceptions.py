"""
Exception hierarchy for the VMware as a Service SDK.

All custom exceptions inherit from VmwareError base class. Every error
carries an ErrorKind, the HTTP status (0 when no exchange produced one),
the server transaction id and the response envelope when one exists.
"""

from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional, Type

if TYPE_CHECKING:
    from vmwaas.core.response import DetailedResponse


class ErrorKind(str, Enum):
    """Closed set of failure classes surfaced by the SDK."""
    URL_MISSING = "url_missing"
    CONFIG_INVALID = "config_invalid"
    INVALID_OPTIONS = "invalid_options"
    VALIDATION = "validation"
    AUTH = "auth"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    RATE_LIMIT = "rate_limit"
    CLIENT = "client"
    SERVER = "server"
    RESPONSE_PARSE = "response_parse"
    NETWORK = "network"
    CANCELLED = "cancelled"


class VmwareError(Exception):
    """Base exception for all SDK errors."""

    kind: ErrorKind = ErrorKind.CLIENT

    def __init__(
        self,
        message: str,
        *,
        kind: Optional[ErrorKind] = None,
        status_code: int = 0,
        transaction_id: Optional[str] = None,
        response: Optional["DetailedResponse"] = None,
    ):
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind
        self.status_code = status_code
        self.transaction_id = transaction_id
        self.response = response

    def is_kind(self, kind: ErrorKind) -> bool:
        """Return True if this error belongs to the given kind."""
        return self.kind == kind

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for structured logging."""
        return {
            "error_type": type(self).__name__,
            "kind": self.kind.value,
            "status_code": self.status_code,
            "message": self.message,
            "transaction_id": self.transaction_id,
            "cause": repr(self.__cause__) if self.__cause__ else None,
        }

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind.value!r}, "
            f"status_code={self.status_code}, message={self.message!r})"
        )


# Configuration Errors
class ConfigurationError(VmwareError):
    """Base exception for configuration-related errors."""
    kind = ErrorKind.CONFIG_INVALID


class ServiceURLMissingError(ConfigurationError):
    """Raised when an operation runs against a service with no URL."""
    kind = ErrorKind.URL_MISSING


class InvalidConfigurationError(ConfigurationError):
    """Raised for a bad URL, unknown variable, auth type or region."""
    kind = ErrorKind.CONFIG_INVALID


# Pre-flight Request Errors
class RequestError(VmwareError):
    """Base exception for errors detected before any network I/O."""
    pass


class InvalidOptionsError(RequestError):
    """Raised when an operation receives no options value."""
    kind = ErrorKind.INVALID_OPTIONS


class ValidationError(RequestError):
    """Raised when a required field is absent or a model is malformed."""
    kind = ErrorKind.VALIDATION


# HTTP Errors
class ApiError(VmwareError):
    """Base exception for responses with status >= 400."""
    pass


class AuthenticationError(ApiError):
    """Raised for HTTP 401/403 and failed token exchanges."""
    kind = ErrorKind.AUTH


class NotFoundError(ApiError):
    """Raised for HTTP 404."""
    kind = ErrorKind.NOT_FOUND


class ConflictError(ApiError):
    """Raised for HTTP 409."""
    kind = ErrorKind.CONFLICT


class BadRequestError(ApiError, ValidationError):
    """Raised for HTTP 400/422; the server rejected the payload."""
    kind = ErrorKind.VALIDATION


class RateLimitError(ApiError):
    """Raised for HTTP 429."""
    kind = ErrorKind.RATE_LIMIT


class ClientError(ApiError):
    """Raised for any other 4xx status."""
    kind = ErrorKind.CLIENT


class ServerError(ApiError):
    """Raised for 5xx statuses."""
    kind = ErrorKind.SERVER


# Transport and Decoding Errors
class ResponseParseError(VmwareError):
    """Raised when a body is not JSON or is malformed JSON."""
    kind = ErrorKind.RESPONSE_PARSE


class NetworkError(VmwareError):
    """Raised when the transport fails before a response is received."""
    kind = ErrorKind.NETWORK


class RequestCancelledError(VmwareError):
    """Raised when the caller's context is cancelled or its deadline passes."""
    kind = ErrorKind.CANCELLED


_STATUS_ERRORS: Dict[int, Type[ApiError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: AuthenticationError,
    404: NotFoundError,
    409: ConflictError,
    422: BadRequestError,
    429: RateLimitError,
}


def error_class_for_status(status_code: int) -> Type[ApiError]:
    """
    Map an HTTP status code (>= 400) to its exception class.

    Args:
        status_code: HTTP status code of the response

    Returns:
        ApiError subclass for the status
    """
    if status_code in _STATUS_ERRORS:
        return _STATUS_ERRORS[status_code]
    if status_code >= 500:
        return ServerError
    return ClientError


def error_kind_for_status(status_code: int) -> ErrorKind:
    """Map an HTTP status code (>= 400) to its ErrorKind."""
    return error_class_for_status(status_code).kind
