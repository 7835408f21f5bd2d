"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Vmwaas, a product of Garudex Labs

JSON Merge Patch documents built from desired-state models.
"""

from collections import OrderedDict
from typing import Any, Dict

from vmwaas.core.serialization import UNSET, Model, encode_value


def as_patch(model: Model) -> Dict[str, Any]:
    """
    Build a merge-patch document from the fields the caller assigned.

    Fields left UNSET are omitted. A field set to None appears as JSON null,
    which asks the server to remove it. Nested models become nested
    documents built by the same rule. Key order follows field declaration
    order.

    Args:
        model: Desired-state model, usually a ``*Patch`` class

    Returns:
        Ordered mapping keyed by wire names

    Example:
        >>> as_patch(ClusterPatch(host_count=2))
        OrderedDict([('host_count', 2)])
    """
    if not isinstance(model, Model):
        raise TypeError(f"expected a model instance, got {type(model).__name__}")
    document: Dict[str, Any] = OrderedDict()
    for attr, meta, _ in model.wire_fields():
        value = getattr(model, attr)
        if value is UNSET:
            continue
        if isinstance(value, Model):
            document[meta.name] = as_patch(value)
        else:
            document[meta.name] = encode_value(value)
    return document
