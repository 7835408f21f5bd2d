"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Vmwaas, a product of Garudex Labs

Service client, authenticators, models and request options.
"""

from vmwaas.sdk.authenticators import (
    Authenticator,
    BasicAuthenticator,
    BearerTokenAuthenticator,
    IamAuthenticator,
    NoAuthAuthenticator,
)
from vmwaas.sdk.service import VmwareV1

__all__ = [
    "Authenticator",
    "BasicAuthenticator",
    "BearerTokenAuthenticator",
    "IamAuthenticator",
    "NoAuthAuthenticator",
    "VmwareV1",
]
