"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Vmwaas, a product of Garudex Labs

CLI context for the vmwaas command.

Provides shared context object and decorators for CLI commands.
"""

from typing import Optional

import click

from vmwaas.sdk.service import DEFAULT_SERVICE_NAME, VmwareV1


# Global context object to share configuration across commands
class CLIContext:
    """Context object for CLI commands."""

    def __init__(self):
        self.config_path: Optional[str] = None
        self.service_name = DEFAULT_SERVICE_NAME
        self.url: Optional[str] = None
        self.verbose = False
        self._service: Optional[VmwareV1] = None

    @property
    def service(self) -> VmwareV1:
        """Client built from the credentials file and environment on first use."""
        if self._service is None:
            self._service = VmwareV1.from_config(
                service_name=self.service_name,
                config_path=self.config_path,
                url=self.url,
            )
        return self._service


pass_context = click.make_pass_decorator(CLIContext, ensure=True)
