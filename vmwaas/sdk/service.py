"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Vmwaas, a product of Garudex Labs

Client for IBM Cloud for VMware as a Service (API v1).

Every operation takes its options value and an optional cancellation
Context, and returns ``(result, DetailedResponse)``. Failures raise a
VmwareError subclass whose ``response`` attribute holds the envelope when
an HTTP exchange took place.
"""

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

import requests
from requests.adapters import HTTPAdapter

from vmwaas.core.binder import bind_request
from vmwaas.core.context import Context
from vmwaas.core.pipeline import DEFAULT_HTTP_TIMEOUT, Pipeline
from vmwaas.core.response import DetailedResponse
from vmwaas.core.retry import RetryPolicy
from vmwaas.core.url import construct_url, url_for_region, validate_service_url
from vmwaas.exceptions import InvalidConfigurationError, VmwareError
from vmwaas.logging_config import get_logger, log_api_error
from vmwaas.sdk import models
from vmwaas.sdk.authenticators import Authenticator
from vmwaas.sdk.operations import OPERATIONS
from vmwaas.sdk.options import (
    AddTransitGatewayConnectionsOptions,
    CreateDirectorSitesOptions,
    CreateDirectorSitesPvdcsClustersOptions,
    CreateDirectorSitesPvdcsOptions,
    CreateDirectorSitesVcdaC2cConnectionOptions,
    CreateDirectorSitesVcdaConnectionEndpointsOptions,
    CreateVdcOptions,
    DeleteDirectorSiteOptions,
    DeleteDirectorSitesPvdcsClusterOptions,
    DeleteDirectorSitesVcdaC2cConnectionOptions,
    DeleteDirectorSitesVcdaConnectionEndpointsOptions,
    DeleteVdcOptions,
    EnableVcdaOnDataCenterOptions,
    EnableVeeamOnPvdcsListOptions,
    GetDirectorInstancesPvdcsClusterOptions,
    GetDirectorSiteOptions,
    GetDirectorSitesPvdcsOptions,
    GetOidcConfigurationOptions,
    GetVdcOptions,
    ListDirectorSiteHostProfilesOptions,
    ListDirectorSiteRegionsOptions,
    ListDirectorSitesOptions,
    ListDirectorSitesPvdcsClustersOptions,
    ListDirectorSitesPvdcsOptions,
    ListMultitenantDirectorSitesOptions,
    ListVdcsOptions,
    RemoveTransitGatewayConnectionsOptions,
    SetOidcConfigurationOptions,
    UpdateDirectorSitesPvdcsClusterOptions,
    UpdateDirectorSitesVcdaC2cConnectionOptions,
    UpdateDirectorSitesVcdaConnectionEndpointsOptions,
    UpdateVdcOptions,
)

logger = get_logger(__name__)

DEFAULT_SERVICE_URL = "https://api.us-south.vmware.cloud.ibm.com/v1"
DEFAULT_SERVICE_NAME = "vmware"
SERVICE_VERSION = "V1"
PARAMETERIZED_SERVICE_URL = "https://api.{region}.vmware.cloud.ibm.com/v1"

DEFAULT_URL_VARIABLES: Dict[str, str] = {
    "region": "us-south",
}

REGIONS = (
    "us-south",
    "us-east",
    "eu-de",
    "eu-gb",
    "eu-es",
    "jp-tok",
    "jp-osa",
    "au-syd",
    "ca-tor",
    "br-sao",
)

REGIONAL_SERVICE_URLS: Dict[str, str] = {
    region: PARAMETERIZED_SERVICE_URL.replace("{region}", region) for region in REGIONS
}


def construct_service_url(url_variables: Optional[Mapping[str, str]] = None) -> str:
    """
    Build a service URL from the parameterized template.

    Args:
        url_variables: Values for template variables; unspecified ones
            take their defaults ({"region": "us-south"})

    Returns:
        Resolved service URL

    Raises:
        InvalidConfigurationError: If a variable name is not recognized
    """
    return construct_url(PARAMETERIZED_SERVICE_URL, DEFAULT_URL_VARIABLES, url_variables)


def get_service_url_for_region(region: str) -> str:
    """
    Return the service URL for a region, e.g. "jp-tok".

    Raises:
        InvalidConfigurationError: If the region is unknown
    """
    return url_for_region(region, REGIONAL_SERVICE_URLS)


@dataclass(frozen=True)
class ServiceState:
    """
    Snapshot of a service's mutable settings.

    Setters replace the whole snapshot, and each operation reads it once,
    so a call never observes a half-applied change.
    """
    base_url: str
    default_headers: Mapping[str, str] = field(default_factory=dict)
    retry_policy: Optional[RetryPolicy] = None
    enable_gzip: bool = False
    disable_ssl: bool = False
    http_timeout: float = DEFAULT_HTTP_TIMEOUT


class VmwareV1:
    """
    IBM Cloud for VMware as a Service API client.

    Example:
        service = VmwareV1(IamAuthenticator(apikey="..."))
        sites, response = service.list_director_sites(ListDirectorSitesOptions())
        for site in sites.director_sites:
            print(site.name, site.status)
    """

    def __init__(
        self,
        authenticator: Authenticator,
        service_url: Optional[str] = None,
        service_name: str = DEFAULT_SERVICE_NAME,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        Args:
            authenticator: Attaches credentials to every request
            service_url: Base URL; defaults to DEFAULT_SERVICE_URL
            service_name: Name used for configuration lookup and analytics
            session: Optional pre-configured requests session

        Raises:
            InvalidConfigurationError: If the authenticator is missing or the URL is malformed
        """
        if authenticator is None:
            raise InvalidConfigurationError("authenticator must be provided")
        authenticator.validate()

        self.authenticator = authenticator
        self.service_name = service_name

        if session is None:
            session = requests.Session()
            adapter = HTTPAdapter(pool_connections=10, pool_maxsize=20)
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        self.session = session
        self._pipeline = Pipeline(session, authenticator)

        url = DEFAULT_SERVICE_URL if service_url is None else service_url
        self._state = ServiceState(base_url=validate_service_url(url))

    @classmethod
    def from_config(
        cls,
        service_name: str = DEFAULT_SERVICE_NAME,
        config_path: Optional[str] = None,
        url: Optional[str] = None,
    ) -> "VmwareV1":
        """
        Build a client from environment variables and a credentials file.

        Args:
            service_name: Prefix of the configuration keys ("vmware" reads VMWARE_*)
            config_path: Explicit credentials file
            url: Service URL overriding the configured one

        Raises:
            InvalidConfigurationError: If the configuration is invalid
        """
        from vmwaas.config.settings import build_authenticator, load_config

        config = load_config(service_name=service_name, config_path=config_path)
        service = cls(build_authenticator(config), service_name=service_name)
        service_url = url or config.url
        if service_url:
            service.set_service_url(service_url)
        service.set_enable_gzip_compression(config.enable_gzip)
        service.set_disable_ssl_verification(config.disable_ssl)
        if config.enable_retries:
            service.enable_retries(config.max_retries, config.retry_interval)
        logger.info(
            "service_configured",
            service_name=service_name,
            url=service.get_service_url(),
            auth_type=service.authenticator.authentication_type,
        )
        return service

    # Settings

    def _update(self, **changes: Any) -> None:
        self._state = dataclasses.replace(self._state, **changes)

    def get_service_url(self) -> str:
        return self._state.base_url

    def set_service_url(self, service_url: str) -> None:
        """
        Change the base URL.

        An empty string is accepted; operations then fail with URL_MISSING.

        Raises:
            InvalidConfigurationError: If the URL is malformed
        """
        self._update(base_url=validate_service_url(service_url))

    def set_default_headers(self, headers: Mapping[str, str]) -> None:
        """Headers sent with every request; operation and caller headers win."""
        if not isinstance(headers, Mapping):
            raise InvalidConfigurationError("headers must be a mapping")
        self._update(default_headers=dict(headers))

    def get_default_headers(self) -> Dict[str, str]:
        return dict(self._state.default_headers)

    def set_enable_gzip_compression(self, enabled: bool) -> None:
        self._update(enable_gzip=bool(enabled))

    def get_enable_gzip_compression(self) -> bool:
        return self._state.enable_gzip

    def set_disable_ssl_verification(self, disabled: bool) -> None:
        self._update(disable_ssl=bool(disabled))

    def set_http_timeout(self, seconds: float) -> None:
        """Per-attempt socket timeout; a context deadline may shorten it."""
        if seconds <= 0:
            raise InvalidConfigurationError(f"http timeout must be positive, got {seconds}")
        self._update(http_timeout=float(seconds))

    def enable_retries(self, max_retries: int = 0, max_retry_interval: float = 0) -> None:
        """
        Retry 429, 5xx (except 501) and transport failures.

        Args:
            max_retries: Retries after the first attempt; 0 selects the default (4)
            max_retry_interval: Cap on each backoff in seconds; 0 selects the default (30)
        """
        self._update(retry_policy=RetryPolicy.create(max_retries, max_retry_interval))

    def disable_retries(self) -> None:
        self._update(retry_policy=None)

    def get_retry_policy(self) -> Optional[RetryPolicy]:
        return self._state.retry_policy

    def clone(self) -> "VmwareV1":
        """
        Copy this client.

        The clone shares the authenticator and the connection pool but has
        its own settings; changing one never affects the other.
        """
        clone = self.__class__.__new__(self.__class__)
        clone.authenticator = self.authenticator
        clone.service_name = self.service_name
        clone.session = self.session
        clone._pipeline = self._pipeline
        clone._state = dataclasses.replace(self._state)
        return clone

    def close(self) -> None:
        """Close the connection pool and worker threads, which clones share."""
        self._pipeline.close()
        self.session.close()

    def __enter__(self) -> "VmwareV1":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _invoke(self, name: str, options: Any, ctx: Optional[Context]) -> Tuple[Any, DetailedResponse]:
        operation = OPERATIONS[name]
        state = self._state
        try:
            request = bind_request(
                operation,
                options,
                state.base_url,
                state.default_headers,
                self.service_name,
                SERVICE_VERSION,
            )
        except VmwareError as e:
            log_api_error(logger, operation.operation_id, kind=e.kind.value, message=e.message)
            raise
        return self._pipeline.execute(
            request,
            operation.result_type,
            ctx=ctx,
            retry_policy=state.retry_policy,
            enable_gzip=state.enable_gzip,
            verify=not state.disable_ssl,
            http_timeout=state.http_timeout,
        )

    # Director sites

    def create_director_sites(
        self, options: CreateDirectorSitesOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.DirectorSite], DetailedResponse]:
        """
        Create a director site instance.

        The instance is the infrastructure and VMware software stack
        (vCenter Server, NSX-T and Cloud Director) on which PVDCs and
        clusters are provisioned. The server accepts the order with 202.

        Args:
            options: Site name, PVDC prototypes and optional services
            ctx: Cancellation context

        Returns:
            Tuple of (DirectorSite, DetailedResponse)
        """
        return self._invoke("create_director_sites", options, ctx)

    def list_director_sites(
        self, options: ListDirectorSitesOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.DirectorSiteCollection], DetailedResponse]:
        """List director site instances."""
        return self._invoke("list_director_sites", options, ctx)

    def get_director_site(
        self, options: GetDirectorSiteOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.DirectorSite], DetailedResponse]:
        """Get a director site instance by ID."""
        return self._invoke("get_director_site", options, ctx)

    def delete_director_site(
        self, options: DeleteDirectorSiteOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.DirectorSite], DetailedResponse]:
        """Delete a director site instance by ID."""
        return self._invoke("delete_director_site", options, ctx)

    # Site services

    def enable_veeam_on_pvdcs_list(
        self, options: EnableVeeamOnPvdcsListOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.ServiceEnabled], DetailedResponse]:
        """Enable or disable Veeam backup on a director site."""
        return self._invoke("enable_veeam_on_pvdcs_list", options, ctx)

    def enable_vcda_on_data_center(
        self, options: EnableVcdaOnDataCenterOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.ServiceEnabled], DetailedResponse]:
        """Enable or disable VCDA on a director site."""
        return self._invoke("enable_vcda_on_data_center", options, ctx)

    def create_director_sites_vcda_connection_endpoints(
        self, options: CreateDirectorSitesVcdaConnectionEndpointsOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.VcdaConnection], DetailedResponse]:
        """
        Create a VCDA connection endpoint at a data center.

        The result is a VcdaConnectionPrivate or VcdaConnectionPublic,
        depending on the requested type.
        """
        return self._invoke("create_director_sites_vcda_connection_endpoints", options, ctx)

    def update_director_sites_vcda_connection_endpoints(
        self, options: UpdateDirectorSitesVcdaConnectionEndpointsOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.VcdaConnection], DetailedResponse]:
        """Replace the allow-list of a public VCDA connection endpoint."""
        return self._invoke("update_director_sites_vcda_connection_endpoints", options, ctx)

    def delete_director_sites_vcda_connection_endpoints(
        self, options: DeleteDirectorSitesVcdaConnectionEndpointsOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.VcdaConnection], DetailedResponse]:
        return self._invoke("delete_director_sites_vcda_connection_endpoints", options, ctx)

    def create_director_sites_vcda_c2c_connection(
        self, options: CreateDirectorSitesVcdaC2cConnectionOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.VcdaC2c], DetailedResponse]:
        """Create a cloud-to-cloud VCDA connection to a peer site."""
        return self._invoke("create_director_sites_vcda_c2c_connection", options, ctx)

    def update_director_sites_vcda_c2c_connection(
        self, options: UpdateDirectorSitesVcdaC2cConnectionOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.VcdaC2c], DetailedResponse]:
        """Update the note of a cloud-to-cloud connection."""
        return self._invoke("update_director_sites_vcda_c2c_connection", options, ctx)

    def delete_director_sites_vcda_c2c_connection(
        self, options: DeleteDirectorSitesVcdaC2cConnectionOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.VcdaC2c], DetailedResponse]:
        return self._invoke("delete_director_sites_vcda_c2c_connection", options, ctx)

    def get_oidc_configuration(
        self, options: GetOidcConfigurationOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.OIDC], DetailedResponse]:
        """Get the OIDC federation state of a director site."""
        return self._invoke("get_oidc_configuration", options, ctx)

    def set_oidc_configuration(
        self, options: SetOidcConfigurationOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.OIDC], DetailedResponse]:
        """
        Configure OIDC federation for a director site.

        Sent as a PUT without a body and with ``Content-Length: 0``.
        """
        return self._invoke("set_oidc_configuration", options, ctx)

    # Provider virtual data centers

    def list_director_sites_pvdcs(
        self, options: ListDirectorSitesPvdcsOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.PVDCCollection], DetailedResponse]:
        """List the provider virtual data centers in a director site."""
        return self._invoke("list_director_sites_pvdcs", options, ctx)

    def create_director_sites_pvdcs(
        self, options: CreateDirectorSitesPvdcsOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.PVDC], DetailedResponse]:
        """Create a provider virtual data center in a director site."""
        return self._invoke("create_director_sites_pvdcs", options, ctx)

    def get_director_sites_pvdcs(
        self, options: GetDirectorSitesPvdcsOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.PVDC], DetailedResponse]:
        return self._invoke("get_director_sites_pvdcs", options, ctx)

    # Clusters

    def list_director_sites_pvdcs_clusters(
        self, options: ListDirectorSitesPvdcsClustersOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.ClusterCollection], DetailedResponse]:
        """List the clusters of a provider virtual data center."""
        return self._invoke("list_director_sites_pvdcs_clusters", options, ctx)

    def create_director_sites_pvdcs_clusters(
        self, options: CreateDirectorSitesPvdcsClustersOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.Cluster], DetailedResponse]:
        """Create a cluster in a provider virtual data center."""
        return self._invoke("create_director_sites_pvdcs_clusters", options, ctx)

    def get_director_instances_pvdcs_cluster(
        self, options: GetDirectorInstancesPvdcsClusterOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.Cluster], DetailedResponse]:
        return self._invoke("get_director_instances_pvdcs_cluster", options, ctx)

    def update_director_sites_pvdcs_cluster(
        self, options: UpdateDirectorSitesPvdcsClusterOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.UpdateCluster], DetailedResponse]:
        """
        Resize a cluster or its file shares.

        ``options.body`` is sent as a JSON merge patch. Pass a ClusterPatch
        to send only the fields assigned on it:

            patch = ClusterPatch(host_count=3)
            service.update_director_sites_pvdcs_cluster(
                UpdateDirectorSitesPvdcsClusterOptions("site", "cluster", "pvdc", patch)
            )

        Returns:
            Tuple of (UpdateCluster, DetailedResponse)
        """
        return self._invoke("update_director_sites_pvdcs_cluster", options, ctx)

    def delete_director_sites_pvdcs_cluster(
        self, options: DeleteDirectorSitesPvdcsClusterOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.ClusterSummary], DetailedResponse]:
        return self._invoke("delete_director_sites_pvdcs_cluster", options, ctx)

    # Catalog

    def list_director_site_regions(
        self, options: ListDirectorSiteRegionsOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.DirectorSiteRegionCollection], DetailedResponse]:
        """List the regions where director sites can be created."""
        return self._invoke("list_director_site_regions", options, ctx)

    def list_multitenant_director_sites(
        self, options: ListMultitenantDirectorSitesOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.MultitenantDirectorSiteCollection], DetailedResponse]:
        return self._invoke("list_multitenant_director_sites", options, ctx)

    def list_director_site_host_profiles(
        self, options: ListDirectorSiteHostProfilesOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.DirectorSiteHostProfileCollection], DetailedResponse]:
        """List the host profiles available for clusters."""
        return self._invoke("list_director_site_host_profiles", options, ctx)

    # Virtual data centers

    def list_vdcs(
        self, options: ListVdcsOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.VDCCollection], DetailedResponse]:
        return self._invoke("list_vdcs", options, ctx)

    def create_vdc(
        self, options: CreateVdcOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.VDC], DetailedResponse]:
        """
        Create a virtual data center on a director site's PVDC.

        Args:
            options: VDC name, target site and PVDC, and optional edge,
                resource group and capacity
            ctx: Cancellation context

        Returns:
            Tuple of (VDC, DetailedResponse)
        """
        return self._invoke("create_vdc", options, ctx)

    def get_vdc(
        self, options: GetVdcOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.VDC], DetailedResponse]:
        return self._invoke("get_vdc", options, ctx)

    def update_vdc(
        self, options: UpdateVdcOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.VDC], DetailedResponse]:
        """Apply a VDCPatch (or merge-patch mapping) to a virtual data center."""
        return self._invoke("update_vdc", options, ctx)

    def delete_vdc(
        self, options: DeleteVdcOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.VDC], DetailedResponse]:
        return self._invoke("delete_vdc", options, ctx)

    # Transit gateways

    def add_transit_gateway_connections(
        self, options: AddTransitGatewayConnectionsOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.TransitGateway], DetailedResponse]:
        """
        Attach an IBM Transit Gateway to a VDC edge.

        Sent as a PUT without a body; ``options.region`` selects the
        transit gateway's region through the query string.
        """
        return self._invoke("add_transit_gateway_connections", options, ctx)

    def remove_transit_gateway_connections(
        self, options: RemoveTransitGatewayConnectionsOptions, ctx: Optional[Context] = None
    ) -> Tuple[Optional[models.TransitGateway], DetailedResponse]:
        """Detach an IBM Transit Gateway from a VDC edge."""
        return self._invoke("remove_transit_gateway_connections", options, ctx)
