"""
Configuration management for the VMware as a Service SDK.

Loads service settings from the environment and credentials files.
"""

from vmwaas.config.settings import (
    ServiceConfig,
    build_authenticator,
    get_credentials_file_path,
    load_config,
)

__all__ = [
    "ServiceConfig",
    "build_authenticator",
    "get_credentials_file_path",
    "load_config",
]
