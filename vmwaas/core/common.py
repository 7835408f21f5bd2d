"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Vmwaas, a product of Garudex Labs

SDK identification headers sent with every request.
"""

import platform
from typing import Dict

from vmwaas._version import __version__

SDK_NAME = "vmwaas-python-sdk"
ANALYTICS_HEADER = "X-IBMCloud-SDK-Analytics"


def get_user_agent() -> str:
    """Build the User-Agent value identifying this SDK and its host."""
    return (
        f"{SDK_NAME}/{__version__} "
        f"(lang=python; arch={platform.machine()}; os={platform.system()}; "
        f"python.version={platform.python_version()})"
    )


def get_sdk_headers(service_name: str, service_version: str, operation_id: str) -> Dict[str, str]:
    """
    Headers identifying the SDK and the operation being invoked.

    Args:
        service_name: Service name, e.g. "vmware"
        service_version: API version, e.g. "V1"
        operation_id: Operation identifier, e.g. "CreateDirectorSites"

    Returns:
        Mapping of header name to value
    """
    return {
        "User-Agent": get_user_agent(),
        ANALYTICS_HEADER: (
            f"service_name={service_name};"
            f"service_version={service_version};"
            f"operation_id={operation_id}"
        ),
    }
