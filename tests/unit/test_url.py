"""
Unit tests for service URL resolution.
"""

import pytest

from vmwaas.core.url import construct_url, url_for_region, validate_service_url
from vmwaas.exceptions import ErrorKind, InvalidConfigurationError
from vmwaas.sdk.service import (
    DEFAULT_SERVICE_URL,
    REGIONS,
    construct_service_url,
    get_service_url_for_region,
)


class TestConstructUrl:
    """Test parameterized URL construction."""

    def test_defaults(self):
        """Test that no variables yields the default URL."""
        assert construct_service_url() == DEFAULT_SERVICE_URL
        assert construct_service_url({}) == "https://api.us-south.vmware.cloud.ibm.com/v1"

    def test_override(self):
        """Test substituting the region."""
        assert construct_service_url({"region": "eu-de"}) == "https://api.eu-de.vmware.cloud.ibm.com/v1"

    def test_unknown_variable(self):
        """Test that unknown names are rejected."""
        with pytest.raises(InvalidConfigurationError) as exc_info:
            construct_service_url({"zone": "dal10"})
        assert exc_info.value.kind == ErrorKind.CONFIG_INVALID
        assert "'zone' is an invalid variable name" in str(exc_info.value)

    def test_generic_template(self):
        """Test construct_url with several variables."""
        url = construct_url(
            "https://{host}:{port}/v1",
            {"host": "localhost", "port": "443"},
            {"port": "8443"},
        )
        assert url == "https://localhost:8443/v1"


class TestRegions:
    """Test region lookup."""

    @pytest.mark.parametrize("region", REGIONS)
    def test_known_regions(self, region):
        """Test every known region resolves."""
        assert get_service_url_for_region(region) == f"https://api.{region}.vmware.cloud.ibm.com/v1"

    def test_unknown_region(self):
        """Test that an unknown region is a configuration error."""
        with pytest.raises(InvalidConfigurationError):
            get_service_url_for_region("mars-north")

    def test_url_for_region_mapping(self):
        """Test the generic lookup."""
        assert url_for_region("a", {"a": "https://a"}) == "https://a"


class TestValidateServiceUrl:
    """Test service URL validation."""

    def test_empty_allowed(self):
        """Test that an empty URL means unset."""
        assert validate_service_url("") == ""

    def test_trailing_slash_stripped(self):
        """Test trailing slash removal."""
        assert validate_service_url("https://example.com/v1/") == "https://example.com/v1"

    @pytest.mark.parametrize("url", [
        "example.com",
        "ftp://example.com",
        "https://",
        "{https://example.com}",
        "not a url",
    ])
    def test_invalid(self, url):
        """Test malformed URLs are rejected."""
        with pytest.raises(InvalidConfigurationError):
            validate_service_url(url)
