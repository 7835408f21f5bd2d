"""
Unit tests for exception hierarchy.
"""

import pytest

from vmwaas.exceptions import (
    ApiError,
    AuthenticationError,
    BadRequestError,
    ClientError,
    ConfigurationError,
    ConflictError,
    ErrorKind,
    InvalidConfigurationError,
    InvalidOptionsError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    RequestCancelledError,
    ResponseParseError,
    ServerError,
    ServiceURLMissingError,
    ValidationError,
    VmwareError,
    error_class_for_status,
    error_kind_for_status,
)


class TestExceptionHierarchy:
    """Test that exception hierarchy is correctly defined."""

    def test_base_exception(self):
        """Test that VmwareError is the base exception."""
        error = VmwareError("test error")
        assert isinstance(error, Exception)
        assert str(error) == "test error"
        assert error.message == "test error"
        assert error.status_code == 0
        assert error.response is None

    def test_configuration_errors(self):
        """Test configuration error kinds."""
        assert issubclass(ServiceURLMissingError, ConfigurationError)
        assert issubclass(InvalidConfigurationError, ConfigurationError)
        assert ServiceURLMissingError("x").kind == ErrorKind.URL_MISSING
        assert InvalidConfigurationError("x").kind == ErrorKind.CONFIG_INVALID

    def test_preflight_errors(self):
        """Test errors raised before any I/O."""
        assert InvalidOptionsError("x").kind == ErrorKind.INVALID_OPTIONS
        assert ValidationError("x").kind == ErrorKind.VALIDATION

    def test_bad_request_is_also_validation_error(self):
        """Test that a server-side rejection can be caught as ValidationError."""
        assert issubclass(BadRequestError, ApiError)
        assert issubclass(BadRequestError, ValidationError)

    def test_transport_errors(self):
        """Test transport and decoding error kinds."""
        assert NetworkError("x").kind == ErrorKind.NETWORK
        assert RequestCancelledError("x").kind == ErrorKind.CANCELLED
        assert ResponseParseError("x").kind == ErrorKind.RESPONSE_PARSE

    def test_explicit_kind_overrides_class_kind(self):
        """Test that a kind passed to the constructor wins."""
        error = VmwareError("boom", kind=ErrorKind.SERVER)
        assert error.is_kind(ErrorKind.SERVER)
        assert not error.is_kind(ErrorKind.CLIENT)


class TestStatusMapping:
    """Test HTTP status classification."""

    @pytest.mark.parametrize("status,error_class,kind", [
        (400, BadRequestError, ErrorKind.VALIDATION),
        (401, AuthenticationError, ErrorKind.AUTH),
        (403, AuthenticationError, ErrorKind.AUTH),
        (404, NotFoundError, ErrorKind.NOT_FOUND),
        (409, ConflictError, ErrorKind.CONFLICT),
        (422, BadRequestError, ErrorKind.VALIDATION),
        (429, RateLimitError, ErrorKind.RATE_LIMIT),
        (418, ClientError, ErrorKind.CLIENT),
        (500, ServerError, ErrorKind.SERVER),
        (501, ServerError, ErrorKind.SERVER),
        (503, ServerError, ErrorKind.SERVER),
    ])
    def test_status_classification(self, status, error_class, kind):
        """Test that each status maps to its class and kind."""
        assert error_class_for_status(status) is error_class
        assert error_kind_for_status(status) == kind


class TestErrorSerialization:
    """Test structured representations of errors."""

    def test_to_dict(self):
        """Test dictionary form used for structured logging."""
        error = NotFoundError("site not found", status_code=404, transaction_id="tx-1")
        data = error.to_dict()
        assert data["error_type"] == "NotFoundError"
        assert data["kind"] == "not_found"
        assert data["status_code"] == 404
        assert data["message"] == "site not found"
        assert data["transaction_id"] == "tx-1"
        assert data["cause"] is None

    def test_to_dict_records_cause(self):
        """Test that the chained cause is reported."""
        try:
            try:
                raise ConnectionError("refused")
            except ConnectionError as e:
                raise NetworkError("transport failed") from e
        except NetworkError as error:
            assert "refused" in error.to_dict()["cause"]

    def test_repr(self):
        """Test repr includes kind and status."""
        error = ServerError("down", status_code=503)
        assert repr(error) == "ServerError(kind='server', status_code=503, message='down')"
