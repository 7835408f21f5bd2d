"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Vmwaas, a product of Garudex Labs

Per-operation request options.

Every field records where it travels (path, query, body or header) and
whether the operation requires it. Fields default to None, meaning
"not supplied". Common headers live on the shared base classes and are
keyword-only, so operation fields can be passed positionally:

    CreateDirectorSitesPvdcsOptions("site-1", "pvdc-a", "dal10", clusters)
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from vmwaas.core.binder import body, document, header, path, query
from vmwaas.sdk.models import (
    ClusterPatch,
    ClusterPrototype,
    FileSharesPrototype,
    PVDCPrototype,
    ResourceGroupIdentity,
    ServiceIdentity,
    VDCDirectorSitePrototype,
    VDCEdgePrototype,
    VDCPatch,
)

# Base classes

@dataclass
class RequestOptions:
    """Fields shared by every operation."""
    accept_language: Optional[str] = header("Accept-Language", kw_only=True)
    headers: Optional[Dict[str, str]] = field(default=None, kw_only=True)

    def set_headers(self, headers: Mapping[str, str]) -> "RequestOptions":
        """Replace the caller-provided header map and return self."""
        self.headers = dict(headers)
        return self


@dataclass
class TransactionOptions(RequestOptions):
    """Options for operations that forward a caller transaction id."""
    x_global_transaction_id: Optional[str] = header("X-Global-Transaction-ID", kw_only=True)


# Director sites

@dataclass
class CreateDirectorSitesOptions(TransactionOptions):
    name: Optional[str] = body("name", required=True)
    pvdcs: Optional[List[PVDCPrototype]] = body("pvdcs", required=True)
    resource_group: Optional[ResourceGroupIdentity] = body("resource_group")
    services: Optional[List[ServiceIdentity]] = body("services")
    private_only: Optional[bool] = body("private_only")
    console_connection_type: Optional[str] = body("console_connection_type")
    ip_allow_list: Optional[List[str]] = body("ip_allow_list")


@dataclass
class ListDirectorSitesOptions(TransactionOptions):
    pass


@dataclass
class GetDirectorSiteOptions(TransactionOptions):
    id: Optional[str] = path("id")


@dataclass
class DeleteDirectorSiteOptions(TransactionOptions):
    id: Optional[str] = path("id")


# Site services

@dataclass
class EnableVeeamOnPvdcsListOptions(TransactionOptions):
    site_id: Optional[str] = path("site_id")
    enable: Optional[bool] = body("enable", required=True)


@dataclass
class EnableVcdaOnDataCenterOptions(TransactionOptions):
    site_id: Optional[str] = path("site_id")
    enable: Optional[bool] = body("enable", required=True)


@dataclass
class CreateDirectorSitesVcdaConnectionEndpointsOptions(TransactionOptions):
    site_id: Optional[str] = path("site_id")
    type: Optional[str] = body("type", required=True)
    data_center_name: Optional[str] = body("data_center_name", required=True)
    allow_list: Optional[List[str]] = body("allow_list")


@dataclass
class UpdateDirectorSitesVcdaConnectionEndpointsOptions(TransactionOptions):
    site_id: Optional[str] = path("site_id")
    id: Optional[str] = path("id")
    allow_list: Optional[List[str]] = body("allow_list")


@dataclass
class DeleteDirectorSitesVcdaConnectionEndpointsOptions(TransactionOptions):
    site_id: Optional[str] = path("site_id")
    id: Optional[str] = path("id")


@dataclass
class CreateDirectorSitesVcdaC2cConnectionOptions(TransactionOptions):
    site_id: Optional[str] = path("site_id")
    local_data_center_name: Optional[str] = body("local_data_center_name", required=True)
    local_site_name: Optional[str] = body("local_site_name", required=True)
    peer_site_name: Optional[str] = body("peer_site_name", required=True)
    peer_region: Optional[str] = body("peer_region", required=True)
    note: Optional[str] = body("note")


@dataclass
class UpdateDirectorSitesVcdaC2cConnectionOptions(TransactionOptions):
    site_id: Optional[str] = path("site_id")
    id: Optional[str] = path("id")
    note: Optional[str] = body("note")


@dataclass
class DeleteDirectorSitesVcdaC2cConnectionOptions(TransactionOptions):
    site_id: Optional[str] = path("site_id")
    id: Optional[str] = path("id")


@dataclass
class GetOidcConfigurationOptions(TransactionOptions):
    site_id: Optional[str] = path("site_id")


@dataclass
class SetOidcConfigurationOptions(RequestOptions):
    site_id: Optional[str] = path("site_id")
    content_length: Optional[int] = header("Content-Length")


# Provider virtual data centers and clusters

@dataclass
class ListDirectorSitesPvdcsOptions(TransactionOptions):
    site_id: Optional[str] = path("site_id")


@dataclass
class CreateDirectorSitesPvdcsOptions(TransactionOptions):
    site_id: Optional[str] = path("site_id")
    name: Optional[str] = body("name", required=True)
    data_center_name: Optional[str] = body("data_center_name", required=True)
    clusters: Optional[List[ClusterPrototype]] = body("clusters", required=True)


@dataclass
class GetDirectorSitesPvdcsOptions(TransactionOptions):
    site_id: Optional[str] = path("site_id")
    id: Optional[str] = path("id")


@dataclass
class ListDirectorSitesPvdcsClustersOptions(TransactionOptions):
    site_id: Optional[str] = path("site_id")
    pvdc_id: Optional[str] = path("pvdc_id")


@dataclass
class CreateDirectorSitesPvdcsClustersOptions(TransactionOptions):
    site_id: Optional[str] = path("site_id")
    pvdc_id: Optional[str] = path("pvdc_id")
    name: Optional[str] = body("name", required=True)
    host_count: Optional[int] = body("host_count", required=True)
    host_profile: Optional[str] = body("host_profile", required=True)
    file_shares: Optional[FileSharesPrototype] = body("file_shares", required=True)


@dataclass
class GetDirectorInstancesPvdcsClusterOptions(TransactionOptions):
    site_id: Optional[str] = path("site_id")
    id: Optional[str] = path("id")
    pvdc_id: Optional[str] = path("pvdc_id")


@dataclass
class UpdateDirectorSitesPvdcsClusterOptions(TransactionOptions):
    """``body`` is a ClusterPatch or a ready-made merge-patch mapping."""
    site_id: Optional[str] = path("site_id")
    id: Optional[str] = path("id")
    pvdc_id: Optional[str] = path("pvdc_id")
    body: Optional[Union[ClusterPatch, Mapping[str, Any]]] = document("body")


@dataclass
class DeleteDirectorSitesPvdcsClusterOptions(TransactionOptions):
    site_id: Optional[str] = path("site_id")
    id: Optional[str] = path("id")
    pvdc_id: Optional[str] = path("pvdc_id")


# Catalog

@dataclass
class ListDirectorSiteRegionsOptions(TransactionOptions):
    pass


@dataclass
class ListMultitenantDirectorSitesOptions(TransactionOptions):
    pass


@dataclass
class ListDirectorSiteHostProfilesOptions(TransactionOptions):
    pass


# Virtual data centers

@dataclass
class ListVdcsOptions(RequestOptions):
    pass


@dataclass
class CreateVdcOptions(RequestOptions):
    name: Optional[str] = body("name", required=True)
    director_site: Optional[VDCDirectorSitePrototype] = body("director_site", required=True)
    edge: Optional[VDCEdgePrototype] = body("edge")
    fast_provisioning_enabled: Optional[bool] = body("fast_provisioning_enabled")
    resource_group: Optional[ResourceGroupIdentity] = body("resource_group")
    cpu: Optional[int] = body("cpu")
    ram: Optional[int] = body("ram")
    rhel_byol: Optional[bool] = body("rhel_byol")
    windows_byol: Optional[bool] = body("windows_byol")


@dataclass
class GetVdcOptions(RequestOptions):
    id: Optional[str] = path("id")


@dataclass
class UpdateVdcOptions(RequestOptions):
    """``vdc_patch`` is a VDCPatch or a ready-made merge-patch mapping."""
    id: Optional[str] = path("id")
    vdc_patch: Optional[Union[VDCPatch, Mapping[str, Any]]] = document("VDC_patch")


@dataclass
class DeleteVdcOptions(RequestOptions):
    id: Optional[str] = path("id")


# Transit gateways

@dataclass
class AddTransitGatewayConnectionsOptions(RequestOptions):
    vdc_id: Optional[str] = path("vdc_id")
    edge_id: Optional[str] = path("edge_id")
    id: Optional[str] = path("id")
    content_length: Optional[int] = header("Content-Length")
    region: Optional[str] = query("region")


@dataclass
class RemoveTransitGatewayConnectionsOptions(RequestOptions):
    vdc_id: Optional[str] = path("vdc_id")
    edge_id: Optional[str] = path("edge_id")
    id: Optional[str] = path("id")
