"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Vmwaas, a product of Garudex Labs

Service URL resolution.

Substitutes named variables into a parameterized base URL, maps region
symbols to concrete endpoints and validates absolute service URLs.
"""

from typing import Mapping, Optional
from urllib.parse import urlparse

from vmwaas.exceptions import InvalidConfigurationError


def construct_url(
    template: str,
    defaults: Mapping[str, str],
    overrides: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Resolve a parameterized URL template.

    Every placeholder takes its default value unless ``overrides`` supplies
    one. Override names must appear in ``defaults``.

    Args:
        template: URL with ``{name}`` placeholders
        defaults: Known placeholder names and their default values
        overrides: Caller supplied values

    Returns:
        Resolved URL

    Raises:
        InvalidConfigurationError: If an override names an unknown variable
    """
    values = dict(defaults)
    for name, value in (overrides or {}).items():
        if name not in defaults:
            raise InvalidConfigurationError(
                f"'{name}' is an invalid variable name. "
                f"Valid variable names: {sorted(defaults)}"
            )
        values[name] = value

    url = template
    for name, value in values.items():
        url = url.replace("{" + name + "}", str(value))
    return url


def url_for_region(region: str, endpoints: Mapping[str, str]) -> str:
    """
    Look up the base URL for a region symbol.

    Raises:
        InvalidConfigurationError: If the region is unknown
    """
    try:
        return endpoints[region]
    except KeyError:
        raise InvalidConfigurationError(f"service URL for region '{region}' not found") from None


def validate_service_url(url: str) -> str:
    """
    Check that ``url`` is an absolute http(s) URL with a host.

    The empty string is accepted and means "no URL configured". A trailing
    slash is stripped so path templates can be appended directly.

    Raises:
        InvalidConfigurationError: If the URL is malformed
    """
    if not url:
        return ""
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidConfigurationError(
            f"invalid service URL '{url}': must be an absolute http or https URL"
        )
    if url.startswith("{") or url.endswith("}") or url.startswith('"'):
        raise InvalidConfigurationError(
            f"invalid service URL '{url}': remove any surrounding {{, }} or \" characters"
        )
    return url.rstrip("/")
