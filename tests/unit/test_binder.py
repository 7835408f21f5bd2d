"""
Unit tests for request binding.
"""

import json

import pytest

from vmwaas.core.binder import (
    JSON,
    MERGE_PATCH,
    Location,
    Operation,
    Param,
    bind_request,
)
from vmwaas.exceptions import (
    ErrorKind,
    InvalidOptionsError,
    ServiceURLMissingError,
    ValidationError,
)
from vmwaas.sdk.models import (
    ClusterPatch,
    ClusterPrototype,
    DirectorSitePVDC,
    FileSharesPrototype,
    PVDCPrototype,
    ResourceGroupIdentity,
    VDCDirectorSitePrototype,
    VDCEdgePrototype,
    VDCEdgePrototypePerformance,
)
from vmwaas.sdk.operations import OPERATIONS
from vmwaas.sdk.options import (
    AddTransitGatewayConnectionsOptions,
    CreateDirectorSitesOptions,
    CreateVdcOptions,
    GetDirectorSiteOptions,
    ListDirectorSitesOptions,
    ListVdcsOptions,
    SetOidcConfigurationOptions,
    UpdateDirectorSitesPvdcsClusterOptions,
    UpdateVdcOptions,
)

BASE_URL = "https://api.us-south.vmware.cloud.ibm.com/v1"


def bind(name, options, base_url=BASE_URL, default_headers=None):
    return bind_request(OPERATIONS[name], options, base_url, default_headers)


class TestBindValidation:
    """Test the pre-flight checks and their order."""

    def test_none_options(self):
        """Test that missing options are rejected."""
        with pytest.raises(InvalidOptionsError) as exc_info:
            bind("get_director_site", None)
        assert exc_info.value.kind == ErrorKind.INVALID_OPTIONS

    def test_wrong_options_type(self):
        """Test that options of another operation are rejected."""
        with pytest.raises(InvalidOptionsError):
            bind("get_director_site", ListDirectorSitesOptions())

    def test_missing_path_parameter(self):
        """Test that a missing path parameter fails validation."""
        with pytest.raises(ValidationError) as exc_info:
            bind("get_director_site", GetDirectorSiteOptions())
        assert "'id'" in str(exc_info.value)

    def test_empty_path_parameter(self):
        """Test that an empty path parameter fails validation."""
        with pytest.raises(ValidationError):
            bind("get_director_site", GetDirectorSiteOptions(""))

    def test_missing_body_field(self):
        """Test that a required body field is enforced."""
        with pytest.raises(ValidationError):
            bind("create_director_sites", CreateDirectorSitesOptions(name="site"))

    def test_invalid_nested_model(self):
        """Test that nested models are validated."""
        options = CreateDirectorSitesOptions(name="site", pvdcs=[PVDCPrototype(name="p")])
        with pytest.raises(ValidationError):
            bind("create_director_sites", options)

    def test_validation_before_url_check(self):
        """Test validation errors take precedence over a missing URL."""
        with pytest.raises(ValidationError):
            bind("get_director_site", GetDirectorSiteOptions(), base_url="")

    def test_missing_url(self):
        """Test that an unset service URL is reported."""
        with pytest.raises(ServiceURLMissingError) as exc_info:
            bind("get_director_site", GetDirectorSiteOptions("site-1"), base_url="")
        assert exc_info.value.kind == ErrorKind.URL_MISSING

    def test_zero_body_content_length(self):
        """Test a non-zero content length is refused for body-less operations."""
        with pytest.raises(ValidationError):
            bind("set_oidc_configuration", SetOidcConfigurationOptions("site-1", content_length=12))


class TestBindRequest:
    """Test URL, header, query and body construction."""

    def test_path_and_method(self):
        """Test path substitution and escaping."""
        request = bind("get_director_site", GetDirectorSiteOptions("site/1 a"))
        assert request.method == "GET"
        assert request.url == BASE_URL + "/director_sites/site%2F1%20a"
        assert request.body is None
        assert request.operation_id == "GetDirectorSite"

    def test_default_headers(self):
        """Test accept, SDK and transaction headers."""
        options = GetDirectorSiteOptions("site-1", x_global_transaction_id="tx-123", accept_language="fr")
        request = bind("get_director_site", options)
        assert request.headers["Accept"] == JSON
        assert request.headers["User-Agent"].startswith("vmwaas-python-sdk/")
        assert "operation_id=GetDirectorSite" in request.headers["X-IBMCloud-SDK-Analytics"]
        assert request.headers["Accept-Language"] == "fr"
        assert request.transaction_id == "tx-123"
        assert "Content-Type" not in request.headers

    def test_header_precedence(self):
        """Test that caller headers override defaults and typed headers."""
        options = GetDirectorSiteOptions("site-1", x_global_transaction_id="typed")
        options.set_headers({"x-global-transaction-id": "caller", "X-Custom": "1"})
        request = bind(
            "get_director_site",
            options,
            default_headers={"X-Custom": "0", "X-Default": "yes", "Accept": "text/plain"},
        )
        assert request.headers["X-Global-Transaction-ID"] == "caller"
        assert request.headers["X-Custom"] == "1"
        assert request.headers["X-Default"] == "yes"
        assert request.headers["Accept"] == JSON

    def test_json_body(self):
        """Test body fields are collected into one JSON document."""
        options = CreateDirectorSitesOptions(
            name="my-site",
            pvdcs=[PVDCPrototype(
                name="pvdc-a",
                data_center_name="dal10",
                clusters=[ClusterPrototype(
                    name="c1",
                    host_count=2,
                    host_profile="BM_2S_20_CORES_192_GB",
                    file_shares=FileSharesPrototype(storage_two_iops_gb=100),
                )],
            )],
            resource_group=ResourceGroupIdentity(id="rg-1"),
        )
        request = bind("create_director_sites", options)
        assert request.method == "POST"
        assert request.headers["Content-Type"] == JSON
        assert request.may_gzip
        body = json.loads(request.body)
        assert body["name"] == "my-site"
        assert body["resource_group"] == {"id": "rg-1"}
        assert body["pvdcs"][0]["clusters"][0]["file_shares"] == {"STORAGE_TWO_IOPS_GB": 100}
        assert "services" not in body

    def test_variant_bodies(self):
        """Test discriminated unions in request bodies."""
        options = CreateVdcOptions(
            name="vdc",
            director_site=VDCDirectorSitePrototype(id="site-1", pvdc=DirectorSitePVDC(id="pvdc-1")),
            edge=VDCEdgePrototypePerformance(size="medium"),
            cpu=0,
        )
        body = json.loads(bind("create_vdc", options).body)
        assert body["edge"] == {"type": "performance", "size": "medium"}
        assert body["cpu"] == 0

    def test_variant_fields_required_on_base(self):
        """Test a base edge tagged performance is rejected before sending."""
        options = CreateVdcOptions(
            name="vdc",
            director_site=VDCDirectorSitePrototype(id="site-1", pvdc=DirectorSitePVDC(id="pvdc-1")),
            edge=VDCEdgePrototype(type="performance"),
        )
        with pytest.raises(ValidationError, match="size"):
            bind("create_vdc", options)

    def test_merge_patch_document(self):
        """Test a patch model becomes the entire body."""
        options = UpdateDirectorSitesPvdcsClusterOptions(
            "site-1", "cluster-1", "pvdc-1", ClusterPatch(host_count=5)
        )
        request = bind("update_director_sites_pvdcs_cluster", options)
        assert request.method == "PATCH"
        assert request.url == BASE_URL + "/director_sites/site-1/pvdcs/pvdc-1/clusters/cluster-1"
        assert request.headers["Content-Type"] == MERGE_PATCH
        assert json.loads(request.body) == {"host_count": 5}

    def test_mapping_patch_document(self):
        """Test a plain mapping is accepted as the patch document."""
        request = bind("update_vdc", UpdateVdcOptions("vdc-1", {"cpu": 4, "ram": None}))
        assert json.loads(request.body) == {"cpu": 4, "ram": None}

    def test_patch_document_required(self):
        """Test that the patch document is required."""
        with pytest.raises(ValidationError):
            bind("update_vdc", UpdateVdcOptions("vdc-1"))

    def test_invalid_patch_document(self):
        """Test that other document types are refused."""
        with pytest.raises(ValidationError):
            bind("update_vdc", UpdateVdcOptions("vdc-1", ["cpu", 4]))

    def test_zero_body_operation(self):
        """Test body-less PUT carries Content-Length 0 and query parameters."""
        options = AddTransitGatewayConnectionsOptions("vdc-1", "edge-1", "tgw-1", region="us-south")
        request = bind("add_transit_gateway_connections", options)
        assert request.method == "PUT"
        assert request.body is None
        assert request.headers["Content-Length"] == "0"
        assert "Content-Type" not in request.headers
        assert request.params == [("region", "us-south")]
        assert not request.may_gzip

    def test_no_query_when_absent(self):
        """Test optional query parameters are omitted."""
        request = bind("add_transit_gateway_connections",
                       AddTransitGatewayConnectionsOptions("vdc-1", "edge-1", "tgw-1"))
        assert request.params == []

    def test_list_without_body(self):
        """Test a GET collection request."""
        request = bind("list_vdcs", ListVdcsOptions())
        assert request.url == BASE_URL + "/vdcs"
        assert request.transaction_id is None


class TestOperationDescriptor:
    """Test the Operation value object."""

    def test_may_gzip_follows_content_type(self):
        """Test only body-carrying operations may be compressed."""
        assert Operation("A", "POST", "/a", object, None, content_type=JSON).may_gzip
        assert not Operation("A", "GET", "/a", object, None).may_gzip

    def test_every_operation_registered(self):
        """Test the operation table is complete."""
        assert len(OPERATIONS) == 32
        for name, operation in OPERATIONS.items():
            assert operation.method in ("GET", "POST", "PUT", "PATCH", "DELETE")
            assert operation.path.startswith("/")
            if operation.method == "PATCH":
                assert operation.content_type == MERGE_PATCH

    def test_param_metadata(self):
        """Test field declarations carry their location."""
        param = Param(Location.QUERY, "region")
        assert param.location == Location.QUERY
        assert not param.required
