"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Vmwaas, a product of Garudex Labs

Resource, prototype and patch models for the VMware as a Service API.

Prototype models are sent in request bodies; resource models are decoded
from responses. Server-computed fields are marked read-only and are not
emitted in request bodies.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Optional

from vmwaas.core.serialization import Model, wire


# Enumerations

class ResourceStatus(str, Enum):
    """Lifecycle states reported for sites, PVDCs, clusters, VDCs and edges."""
    CREATING = "creating"
    DELETED = "deleted"
    DELETING = "deleting"
    FAILED = "failed"
    MODIFYING = "modifying"
    READY_TO_USE = "ready_to_use"
    UPDATING = "updating"


class TenancyType(str, Enum):
    MULTITENANT = "multitenant"
    SINGLE_TENANT = "single_tenant"


class ServiceName(str, Enum):
    VCDA = "vcda"
    VEEAM = "veeam"


class StorageType(str, Enum):
    NFS = "nfs"


class BillingPlan(str, Enum):
    MONTHLY = "monthly"


class EdgeSize(str, Enum):
    MEDIUM = "medium"
    LARGE = "large"
    EXTRA_LARGE = "extra_large"


class EdgeType(str, Enum):
    EFFICIENCY = "efficiency"
    PERFORMANCE = "performance"


class ProviderTypeName(str, Enum):
    ON_DEMAND = "on_demand"
    RESERVED = "reserved"
    PAYGO = "paygo"


class StatusReasonCode(str, Enum):
    INSUFFICENT_CPU = "insufficent_cpu"
    INSUFFICENT_CPU_AND_RAM = "insufficent_cpu_and_ram"
    INSUFFICENT_RAM = "insufficent_ram"


class VcdaConnectionType(str, Enum):
    PRIVATE = "private"
    PUBLIC = "public"


class ConsoleConnectionType(str, Enum):
    PRIVATE = "private"
    PUBLIC = "public"


# Shared references

@dataclass
class ResourceGroupIdentity(Model):
    """Resource group to bill an instance to."""
    id: Optional[str] = wire("id", required=True)


@dataclass
class ResourceGroupReference(Model):
    id: Optional[str] = wire("id", required=True)
    name: Optional[str] = wire("name", required=True)
    crn: Optional[str] = wire("crn", required=True)


@dataclass
class DirectorSiteReference(Model):
    crn: Optional[str] = wire("crn", required=True)
    href: Optional[str] = wire("href", required=True)
    id: Optional[str] = wire("id", required=True)


@dataclass
class StatusReason(Model):
    """Why a VDC is in its current state."""
    code: Optional[str] = wire("code", required=True)
    message: Optional[str] = wire("message", required=True)
    more_info: Optional[str] = wire("more_info")


# File shares

@dataclass
class FileShares(Model):
    """Chosen storage policies and their sizes, in GB."""
    storage_point_two_five_iops_gb: Optional[int] = wire("STORAGE_POINT_TWO_FIVE_IOPS_GB")
    storage_two_iops_gb: Optional[int] = wire("STORAGE_TWO_IOPS_GB")
    storage_four_iops_gb: Optional[int] = wire("STORAGE_FOUR_IOPS_GB")
    storage_ten_iops_gb: Optional[int] = wire("STORAGE_TEN_IOPS_GB")


@dataclass
class FileSharesPrototype(FileShares):
    """File shares requested when creating or resizing a cluster."""
    pass


# Clusters

@dataclass
class ClusterPrototype(Model):
    name: Optional[str] = wire("name", required=True)
    host_count: Optional[int] = wire("host_count", required=True)
    host_profile: Optional[str] = wire("host_profile", required=True)
    file_shares: Optional[FileSharesPrototype] = wire("file_shares", required=True)


@dataclass
class ClusterSummary(Model):
    """Cluster as embedded in a PVDC or returned by a delete."""
    name: Optional[str] = wire("name", required=True)
    host_count: Optional[int] = wire("host_count", required=True)
    host_profile: Optional[str] = wire("host_profile", required=True)
    id: Optional[str] = wire("id", required=True, read_only=True)
    data_center_name: Optional[str] = wire("data_center_name", required=True)
    status: Optional[str] = wire("status", required=True, read_only=True)
    href: Optional[str] = wire("href", required=True, read_only=True)
    file_shares: Optional[FileShares] = wire("file_shares", required=True)


@dataclass
class Cluster(Model):
    id: Optional[str] = wire("id", required=True, read_only=True)
    name: Optional[str] = wire("name", required=True)
    href: Optional[str] = wire("href", required=True, read_only=True)
    ordered_at: Optional[datetime] = wire("ordered_at", required=True, read_only=True)
    provisioned_at: Optional[datetime] = wire("provisioned_at", read_only=True)
    host_count: Optional[int] = wire("host_count", required=True)
    status: Optional[str] = wire("status", required=True, read_only=True)
    data_center_name: Optional[str] = wire("data_center_name", required=True)
    director_site: Optional[DirectorSiteReference] = wire("director_site", required=True)
    host_profile: Optional[str] = wire("host_profile", required=True)
    storage_type: Optional[str] = wire("storage_type", required=True)
    billing_plan: Optional[str] = wire("billing_plan", required=True)
    file_shares: Optional[FileShares] = wire("file_shares", required=True)


@dataclass
class UpdateCluster(Cluster):
    """Cluster returned by a patch, with the tracking id of the change."""
    message: Optional[str] = wire("message", required=True, read_only=True)
    operation_id: Optional[str] = wire("operation_id", required=True, read_only=True)


@dataclass
class ClusterPatch(Model):
    """Desired cluster state; only assigned fields are sent."""
    file_shares: Optional[FileSharesPrototype] = wire("file_shares")
    host_count: Optional[int] = wire("host_count")


@dataclass
class ClusterCollection(Model):
    clusters: Optional[List[ClusterSummary]] = wire("clusters", required=True)


# Provider virtual data centers

@dataclass
class ProviderType(Model):
    name: Optional[str] = wire("name", required=True)


@dataclass
class PVDCPrototype(Model):
    name: Optional[str] = wire("name", required=True)
    data_center_name: Optional[str] = wire("data_center_name", required=True)
    clusters: Optional[List[ClusterPrototype]] = wire("clusters", required=True)


@dataclass
class PVDC(Model):
    name: Optional[str] = wire("name", required=True)
    data_center_name: Optional[str] = wire("data_center_name", required=True)
    id: Optional[str] = wire("id", required=True, read_only=True)
    href: Optional[str] = wire("href", required=True, read_only=True)
    clusters: Optional[List[ClusterSummary]] = wire("clusters")
    status: Optional[str] = wire("status", read_only=True)
    provider_types: Optional[List[ProviderType]] = wire("provider_types", read_only=True)


@dataclass
class PVDCCollection(Model):
    pvdcs: Optional[List[PVDC]] = wire("pvdcs", required=True)


# Director sites

@dataclass
class ServiceIdentity(Model):
    """Service to enable on a new director site."""
    name: Optional[str] = wire("name", required=True)


@dataclass
class Service(Model):
    name: Optional[str] = wire("name", required=True)
    id: Optional[str] = wire("id", required=True, read_only=True)
    ordered_at: Optional[datetime] = wire("ordered_at", required=True, read_only=True)
    provisioned_at: Optional[datetime] = wire("provisioned_at", read_only=True)
    status: Optional[str] = wire("status", required=True, read_only=True)
    console_url: Optional[str] = wire("console_url", read_only=True)


@dataclass
class DirectorSite(Model):
    crn: Optional[str] = wire("crn", required=True, read_only=True)
    href: Optional[str] = wire("href", required=True, read_only=True)
    id: Optional[str] = wire("id", required=True, read_only=True)
    ordered_at: Optional[datetime] = wire("ordered_at", required=True, read_only=True)
    provisioned_at: Optional[datetime] = wire("provisioned_at", read_only=True)
    name: Optional[str] = wire("name", required=True)
    status: Optional[str] = wire("status", required=True, read_only=True)
    resource_group: Optional[ResourceGroupReference] = wire("resource_group", required=True)
    pvdcs: Optional[List[PVDC]] = wire("pvdcs", required=True)
    type: Optional[str] = wire("type", required=True, read_only=True)
    services: Optional[List[Service]] = wire("services", required=True)
    rhel_vm_activation_key: Optional[str] = wire("rhel_vm_activation_key", read_only=True)
    private_only: Optional[bool] = wire("private_only")
    console_connection_type: Optional[str] = wire("console_connection_type")
    ip_allow_list: Optional[List[str]] = wire("ip_allow_list", omit_empty=True)


@dataclass
class DirectorSiteCollection(Model):
    director_sites: Optional[List[DirectorSite]] = wire("director_sites", required=True)


@dataclass
class DirectorSiteHostProfile(Model):
    id: Optional[str] = wire("id", required=True)
    cpu: Optional[int] = wire("cpu", required=True)
    family: Optional[str] = wire("family", required=True)
    processor: Optional[str] = wire("processor", required=True)
    ram: Optional[int] = wire("ram", required=True)
    socket: Optional[int] = wire("socket", required=True)
    speed: Optional[str] = wire("speed", required=True)
    manufacturer: Optional[str] = wire("manufacturer", required=True)
    features: Optional[List[str]] = wire("features", required=True)


@dataclass
class DirectorSiteHostProfileCollection(Model):
    director_site_host_profiles: Optional[List[DirectorSiteHostProfile]] = wire(
        "director_site_host_profiles", required=True
    )


@dataclass
class DataCenter(Model):
    display_name: Optional[str] = wire("display_name", required=True)
    name: Optional[str] = wire("name", required=True)
    uplink_speed: Optional[str] = wire("uplink_speed", required=True)


@dataclass
class DirectorSiteRegion(Model):
    name: Optional[str] = wire("name", required=True)
    data_centers: Optional[List[DataCenter]] = wire("data_centers", required=True)
    endpoint: Optional[str] = wire("endpoint", required=True)


@dataclass
class DirectorSiteRegionCollection(Model):
    director_site_regions: Optional[List[DirectorSiteRegion]] = wire(
        "director_site_regions", required=True
    )


@dataclass
class MultitenantPVDC(Model):
    name: Optional[str] = wire("name", required=True)
    id: Optional[str] = wire("id", required=True)
    data_center_name: Optional[str] = wire("data_center_name", required=True)
    provider_types: Optional[List[ProviderType]] = wire("provider_types", required=True)


@dataclass
class MultitenantDirectorSite(Model):
    name: Optional[str] = wire("name", required=True)
    display_name: Optional[str] = wire("display_name", required=True)
    id: Optional[str] = wire("id", required=True)
    region: Optional[str] = wire("region", required=True)
    pvdcs: Optional[List[MultitenantPVDC]] = wire("pvdcs", required=True)
    services: Optional[List[str]] = wire("services", required=True)


@dataclass
class MultitenantDirectorSiteCollection(Model):
    multitenant_director_sites: Optional[List[MultitenantDirectorSite]] = wire(
        "multitenant_director_sites", required=True
    )


# Site services: Veeam, VCDA, OIDC

@dataclass
class ServiceEnabled(Model):
    """Result of toggling Veeam or VCDA."""
    enabled: Optional[bool] = wire("enabled", required=True)


@dataclass
class VcdaConnection(Model):
    """
    VCDA connection endpoint at a data center.

    Decoding selects VcdaConnectionPrivate or VcdaConnectionPublic from the
    ``type`` property.
    """
    __discriminator__ = "type"

    id: Optional[str] = wire("id", required=True, read_only=True)
    type: Optional[str] = wire("type", required=True)
    data_center_name: Optional[str] = wire("data_center_name", required=True)
    status: Optional[str] = wire("status", read_only=True)
    url: Optional[str] = wire("url", read_only=True)


@dataclass
class VcdaConnectionPrivate(VcdaConnection, tag="private"):
    pass


@dataclass
class VcdaConnectionPublic(VcdaConnection, tag="public"):
    allow_list: Optional[List[str]] = wire("allow_list", required=True)


@dataclass
class VcdaC2c(Model):
    """Cloud-to-cloud VCDA connection between two director sites."""
    id: Optional[str] = wire("id", required=True, read_only=True)
    local_data_center_name: Optional[str] = wire("local_data_center_name", required=True)
    local_site_name: Optional[str] = wire("local_site_name", required=True)
    peer_site_name: Optional[str] = wire("peer_site_name", required=True)
    peer_region: Optional[str] = wire("peer_region", required=True)
    note: Optional[str] = wire("note")
    status: Optional[str] = wire("status", read_only=True)


@dataclass
class OIDC(Model):
    """OIDC federation state of a director site."""
    status: Optional[str] = wire("status", required=True, read_only=True)
    last_set_at: Optional[datetime] = wire("last_set_at", read_only=True)


# Virtual data centers

@dataclass
class VDCProviderType(Model):
    """Billing model of a VDC; selected by ``name``."""
    __discriminator__ = "name"

    name: Optional[str] = wire("name", required=True)


@dataclass
class VDCProviderTypeOnDemand(VDCProviderType, tag="on_demand"):
    pass


@dataclass
class VDCProviderTypeReserved(VDCProviderType, tag="reserved"):
    pass


@dataclass
class VDCProviderTypePaygo(VDCProviderType, tag="paygo"):
    pass


@dataclass
class DirectorSitePVDC(Model):
    id: Optional[str] = wire("id", required=True)
    provider_type: Optional[VDCProviderType] = wire("provider_type")


@dataclass
class VDCDirectorSitePrototype(Model):
    id: Optional[str] = wire("id", required=True)
    pvdc: Optional[DirectorSitePVDC] = wire("pvdc", required=True)


@dataclass
class VDCDirectorSite(Model):
    id: Optional[str] = wire("id", required=True)
    pvdc: Optional[DirectorSitePVDC] = wire("pvdc", required=True)
    url: Optional[str] = wire("url", required=True, read_only=True)


@dataclass
class VDCEdgePrototype(Model):
    """
    Edge to create with a VDC.

    Use VDCEdgePrototypeEfficiency or VDCEdgePrototypePerformance; the
    performance variant also requires a size.
    """
    __discriminator__ = "type"

    type: Optional[str] = wire("type", required=True)


@dataclass
class VDCEdgePrototypeEfficiency(VDCEdgePrototype, tag="efficiency"):
    pass


@dataclass
class VDCEdgePrototypePerformance(VDCEdgePrototype, tag="performance"):
    size: Optional[str] = wire("size", required=True)


@dataclass
class Edge(Model):
    __discriminator__ = "type"

    id: Optional[str] = wire("id", required=True, read_only=True)
    public_ips: Optional[List[str]] = wire("public_ips", required=True, read_only=True)
    status: Optional[str] = wire("status", required=True, read_only=True)
    type: Optional[str] = wire("type", required=True)


@dataclass
class EdgeEfficiency(Edge, tag="efficiency"):
    pass


@dataclass
class EdgePerformance(Edge, tag="performance"):
    size: Optional[str] = wire("size")


@dataclass
class VDC(Model):
    href: Optional[str] = wire("href", required=True, read_only=True)
    id: Optional[str] = wire("id", required=True, read_only=True)
    provisioned_at: Optional[datetime] = wire("provisioned_at", read_only=True)
    cpu: Optional[int] = wire("cpu")
    crn: Optional[str] = wire("crn", required=True, read_only=True)
    deleted_at: Optional[datetime] = wire("deleted_at", read_only=True)
    director_site: Optional[VDCDirectorSite] = wire("director_site", required=True)
    edges: Optional[List[Edge]] = wire("edges", required=True)
    status_reasons: Optional[List[StatusReason]] = wire("status_reasons", required=True, read_only=True)
    name: Optional[str] = wire("name", required=True)
    ordered_at: Optional[datetime] = wire("ordered_at", required=True, read_only=True)
    org_name: Optional[str] = wire("org_name", required=True, read_only=True)
    ram: Optional[int] = wire("ram")
    status: Optional[str] = wire("status", required=True, read_only=True)
    type: Optional[str] = wire("type", required=True, read_only=True)
    fast_provisioning_enabled: Optional[bool] = wire("fast_provisioning_enabled", required=True)
    rhel_byol: Optional[bool] = wire("rhel_byol", required=True)
    windows_byol: Optional[bool] = wire("windows_byol", required=True)


@dataclass
class VDCCollection(Model):
    vdcs: Optional[List[VDC]] = wire("vdcs", required=True)


@dataclass
class VDCPatch(Model):
    """Desired VDC state; only assigned fields are sent."""
    cpu: Optional[int] = wire("cpu")
    fast_provisioning_enabled: Optional[bool] = wire("fast_provisioning_enabled")
    ram: Optional[int] = wire("ram")


# Transit gateways

@dataclass
class TransitGatewayConnection(Model):
    name: Optional[str] = wire("name", required=True)
    transit_gateway_connection_name: Optional[str] = wire("transit_gateway_connection_name")
    status: Optional[str] = wire("status", required=True, read_only=True)
    local_gateway_ip: Optional[str] = wire("local_gateway_ip")
    remote_gateway_ip: Optional[str] = wire("remote_gateway_ip")
    local_tunnel_ip: Optional[str] = wire("local_tunnel_ip")
    remote_tunnel_ip: Optional[str] = wire("remote_tunnel_ip")
    local_bgp_asn: Optional[int] = wire("local_bgp_asn")
    remote_bgp_asn: Optional[int] = wire("remote_bgp_asn")
    network_account_id: Optional[str] = wire("network_account_id")
    network_type: Optional[str] = wire("network_type")
    base_network_type: Optional[str] = wire("base_network_type")
    zone: Optional[str] = wire("zone")


@dataclass
class TransitGateway(Model):
    """Transit gateway attached to a VDC edge."""
    id: Optional[str] = wire("id", required=True)
    connections: Optional[List[TransitGatewayConnection]] = wire("connections", required=True)
    status: Optional[str] = wire("status", required=True, read_only=True)
    region: Optional[str] = wire("region", required=True)
