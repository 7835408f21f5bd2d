"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Vmwaas, a product of Garudex Labs

Python SDK for IBM Cloud for VMware as a Service.

Provides typed operations over director sites, provider virtual data
centers, clusters, VCDA connections, OIDC configuration, virtual data
centers and transit gateway attachments.
"""

from vmwaas._version import __version__
from vmwaas.core.context import Context
from vmwaas.core.response import DetailedResponse
from vmwaas.exceptions import ErrorKind, VmwareError
from vmwaas.sdk.authenticators import (
    BasicAuthenticator,
    BearerTokenAuthenticator,
    IamAuthenticator,
    NoAuthAuthenticator,
)
from vmwaas.sdk.service import (
    DEFAULT_SERVICE_NAME,
    DEFAULT_SERVICE_URL,
    VmwareV1,
    construct_service_url,
    get_service_url_for_region,
)

__all__ = [
    "__version__",
    "BasicAuthenticator",
    "BearerTokenAuthenticator",
    "Context",
    "DEFAULT_SERVICE_NAME",
    "DEFAULT_SERVICE_URL",
    "DetailedResponse",
    "ErrorKind",
    "IamAuthenticator",
    "NoAuthAuthenticator",
    "VmwareError",
    "VmwareV1",
    "construct_service_url",
    "get_service_url_for_region",
]
