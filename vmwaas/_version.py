"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Vmwaas, a product of Garudex Labs

Version information for the VMware as a Service SDK.

Source checkouts read the VERSION file at the repository root; installed
distributions report the version recorded in their metadata.
"""

from importlib import metadata
from pathlib import Path

DISTRIBUTION_NAME = "vmwaas-sdk"


def get_version() -> str:
    """
    Resolve the SDK version.

    Returns:
        str: The version string (e.g., "1.0.0")
    """
    version_file = Path(__file__).parent.parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return "unknown"


__version__ = get_version()
