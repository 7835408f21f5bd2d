"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Vmwaas, a product of Garudex Labs

Request/response engine for the VMware as a Service SDK.

This package contains:
- URL template resolution
- Model serialization and merge-patch construction
- Request binding from typed options
- The execution pipeline with cancellation and retries
- Response decoding
"""

from vmwaas.core.context import Context
from vmwaas.core.patch import as_patch
from vmwaas.core.response import DetailedResponse
from vmwaas.core.retry import RetryPolicy
from vmwaas.core.serialization import UNSET, Model, wire

__all__ = [
    "Context",
    "DetailedResponse",
    "Model",
    "RetryPolicy",
    "UNSET",
    "as_patch",
    "wire",
]
