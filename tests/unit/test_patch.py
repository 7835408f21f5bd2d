"""
Unit tests for merge-patch documents.
"""

import json

import pytest
from hypothesis import given, strategies as st

from vmwaas.core.patch import as_patch
from vmwaas.core.serialization import UNSET
from vmwaas.sdk.models import ClusterPatch, FileSharesPrototype, VDCPatch


optional_ints = st.one_of(st.just(UNSET), st.none(), st.integers(min_value=0, max_value=10_000))
optional_bools = st.one_of(st.just(UNSET), st.none(), st.booleans())


class TestAsPatch:
    """Test patch construction from desired-state models."""

    def test_only_assigned_fields(self):
        """Test that unassigned fields are left out."""
        assert as_patch(ClusterPatch(host_count=3)) == {"host_count": 3}

    def test_empty_patch(self):
        """Test a patch with nothing assigned."""
        assert as_patch(VDCPatch()) == {}

    def test_explicit_zero_values_kept(self):
        """Test that assigned zero values are sent."""
        patch = VDCPatch(cpu=0, fast_provisioning_enabled=False)
        assert as_patch(patch) == {"cpu": 0, "fast_provisioning_enabled": False}

    def test_none_is_null(self):
        """Test that None asks the server to clear a field."""
        assert json.dumps(as_patch(VDCPatch(ram=None))) == '{"ram": null}'

    def test_nested_model(self):
        """Test nested models follow the same rule."""
        patch = ClusterPatch(
            file_shares=FileSharesPrototype(storage_two_iops_gb=200),
            host_count=4,
        )
        assert as_patch(patch) == {
            "file_shares": {"STORAGE_TWO_IOPS_GB": 200},
            "host_count": 4,
        }

    def test_declaration_order(self):
        """Test keys follow field declaration order."""
        patch = VDCPatch(ram=16, cpu=4)
        assert list(as_patch(patch)) == ["cpu", "ram"]

    def test_rejects_non_model(self):
        """Test plain mappings are not accepted."""
        with pytest.raises(TypeError):
            as_patch({"host_count": 3})

    @given(cpu=optional_ints, fast=optional_bools, ram=optional_ints)
    def test_keys_are_exactly_assigned_fields(self, cpu, fast, ram):
        """Property: a key appears if and only if its field was assigned."""
        patch = as_patch(VDCPatch(cpu=cpu, fast_provisioning_enabled=fast, ram=ram))
        expected = {
            name: value
            for name, value in (("cpu", cpu), ("fast_provisioning_enabled", fast), ("ram", ram))
            if value is not UNSET
        }
        assert dict(patch) == expected
