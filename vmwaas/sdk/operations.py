"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Vmwaas, a product of Garudex Labs

Declarative table of the service's operations.

Each entry names the HTTP method, the path template, the options type the
binder accepts and the model the decoder produces.
"""

from typing import Dict

from vmwaas.core.binder import JSON, MERGE_PATCH, Operation
from vmwaas.sdk import models, options


def _op(operation_id: str, method: str, path: str, options_type, result_type, **kwargs) -> Operation:
    return Operation(operation_id, method, path, options_type, result_type, **kwargs)


OPERATIONS: Dict[str, Operation] = {
    # Director sites
    "create_director_sites": _op(
        "CreateDirectorSites", "POST", "/director_sites",
        options.CreateDirectorSitesOptions, models.DirectorSite, content_type=JSON,
    ),
    "list_director_sites": _op(
        "ListDirectorSites", "GET", "/director_sites",
        options.ListDirectorSitesOptions, models.DirectorSiteCollection,
    ),
    "get_director_site": _op(
        "GetDirectorSite", "GET", "/director_sites/{id}",
        options.GetDirectorSiteOptions, models.DirectorSite,
    ),
    "delete_director_site": _op(
        "DeleteDirectorSite", "DELETE", "/director_sites/{id}",
        options.DeleteDirectorSiteOptions, models.DirectorSite,
    ),
    # Site services
    "enable_veeam_on_pvdcs_list": _op(
        "EnableVeeamOnPvdcsList", "POST", "/director_sites/{site_id}/action/enable_veeam",
        options.EnableVeeamOnPvdcsListOptions, models.ServiceEnabled, content_type=JSON,
    ),
    "enable_vcda_on_data_center": _op(
        "EnableVcdaOnDataCenter", "POST", "/director_sites/{site_id}/action/enable_vcda",
        options.EnableVcdaOnDataCenterOptions, models.ServiceEnabled, content_type=JSON,
    ),
    "create_director_sites_vcda_connection_endpoints": _op(
        "CreateDirectorSitesVcdaConnectionEndpoints", "POST",
        "/director_sites/{site_id}/vcda/connection_endpoints",
        options.CreateDirectorSitesVcdaConnectionEndpointsOptions, models.VcdaConnection,
        content_type=JSON,
    ),
    "update_director_sites_vcda_connection_endpoints": _op(
        "UpdateDirectorSitesVcdaConnectionEndpoints", "PATCH",
        "/director_sites/{site_id}/services/vcda/connection_endpoints/{id}",
        options.UpdateDirectorSitesVcdaConnectionEndpointsOptions, models.VcdaConnection,
        content_type=MERGE_PATCH,
    ),
    "delete_director_sites_vcda_connection_endpoints": _op(
        "DeleteDirectorSitesVcdaConnectionEndpoints", "DELETE",
        "/director_sites/{site_id}/services/vcda/connection_endpoints/{id}",
        options.DeleteDirectorSitesVcdaConnectionEndpointsOptions, models.VcdaConnection,
    ),
    "create_director_sites_vcda_c2c_connection": _op(
        "CreateDirectorSitesVcdaC2cConnection", "POST",
        "/director_sites/{site_id}/services/vcda/c2c_connections",
        options.CreateDirectorSitesVcdaC2cConnectionOptions, models.VcdaC2c, content_type=JSON,
    ),
    "update_director_sites_vcda_c2c_connection": _op(
        "UpdateDirectorSitesVcdaC2cConnection", "PATCH",
        "/director_sites/{site_id}/services/vcda/c2c_connections/{id}",
        options.UpdateDirectorSitesVcdaC2cConnectionOptions, models.VcdaC2c,
        content_type=MERGE_PATCH,
    ),
    "delete_director_sites_vcda_c2c_connection": _op(
        "DeleteDirectorSitesVcdaC2cConnection", "DELETE",
        "/director_sites/{site_id}/services/vcda/c2c_connections/{id}",
        options.DeleteDirectorSitesVcdaC2cConnectionOptions, models.VcdaC2c,
    ),
    "get_oidc_configuration": _op(
        "GetOidcConfiguration", "GET", "/director_sites/{site_id}/oidc_configuration",
        options.GetOidcConfigurationOptions, models.OIDC,
    ),
    "set_oidc_configuration": _op(
        "SetOidcConfiguration", "PUT", "/director_sites/{site_id}/oidc_configuration",
        options.SetOidcConfigurationOptions, models.OIDC, zero_body=True,
    ),
    # Provider virtual data centers and clusters
    "list_director_sites_pvdcs": _op(
        "ListDirectorSitesPvdcs", "GET", "/director_sites/{site_id}/pvdcs",
        options.ListDirectorSitesPvdcsOptions, models.PVDCCollection,
    ),
    "create_director_sites_pvdcs": _op(
        "CreateDirectorSitesPvdcs", "POST", "/director_sites/{site_id}/pvdcs",
        options.CreateDirectorSitesPvdcsOptions, models.PVDC, content_type=JSON,
    ),
    "get_director_sites_pvdcs": _op(
        "GetDirectorSitesPvdcs", "GET", "/director_sites/{site_id}/pvdcs/{id}",
        options.GetDirectorSitesPvdcsOptions, models.PVDC,
    ),
    "list_director_sites_pvdcs_clusters": _op(
        "ListDirectorSitesPvdcsClusters", "GET", "/director_sites/{site_id}/pvdcs/{pvdc_id}/clusters",
        options.ListDirectorSitesPvdcsClustersOptions, models.ClusterCollection,
    ),
    "create_director_sites_pvdcs_clusters": _op(
        "CreateDirectorSitesPvdcsClusters", "POST", "/director_sites/{site_id}/pvdcs/{pvdc_id}/clusters",
        options.CreateDirectorSitesPvdcsClustersOptions, models.Cluster, content_type=JSON,
    ),
    "get_director_instances_pvdcs_cluster": _op(
        "GetDirectorInstancesPvdcsCluster", "GET",
        "/director_sites/{site_id}/pvdcs/{pvdc_id}/clusters/{id}",
        options.GetDirectorInstancesPvdcsClusterOptions, models.Cluster,
    ),
    "update_director_sites_pvdcs_cluster": _op(
        "UpdateDirectorSitesPvdcsCluster", "PATCH",
        "/director_sites/{site_id}/pvdcs/{pvdc_id}/clusters/{id}",
        options.UpdateDirectorSitesPvdcsClusterOptions, models.UpdateCluster,
        content_type=MERGE_PATCH,
    ),
    "delete_director_sites_pvdcs_cluster": _op(
        "DeleteDirectorSitesPvdcsCluster", "DELETE",
        "/director_sites/{site_id}/pvdcs/{pvdc_id}/clusters/{id}",
        options.DeleteDirectorSitesPvdcsClusterOptions, models.ClusterSummary,
    ),
    # Catalog
    "list_director_site_regions": _op(
        "ListDirectorSiteRegions", "GET", "/director_site_regions",
        options.ListDirectorSiteRegionsOptions, models.DirectorSiteRegionCollection,
    ),
    "list_multitenant_director_sites": _op(
        "ListMultitenantDirectorSites", "GET", "/multitenant_director_sites",
        options.ListMultitenantDirectorSitesOptions, models.MultitenantDirectorSiteCollection,
    ),
    "list_director_site_host_profiles": _op(
        "ListDirectorSiteHostProfiles", "GET", "/director_site_host_profiles",
        options.ListDirectorSiteHostProfilesOptions, models.DirectorSiteHostProfileCollection,
    ),
    # Virtual data centers
    "list_vdcs": _op(
        "ListVdcs", "GET", "/vdcs",
        options.ListVdcsOptions, models.VDCCollection,
    ),
    "create_vdc": _op(
        "CreateVdc", "POST", "/vdcs",
        options.CreateVdcOptions, models.VDC, content_type=JSON,
    ),
    "get_vdc": _op(
        "GetVdc", "GET", "/vdcs/{id}",
        options.GetVdcOptions, models.VDC,
    ),
    "update_vdc": _op(
        "UpdateVdc", "PATCH", "/vdcs/{id}",
        options.UpdateVdcOptions, models.VDC, content_type=MERGE_PATCH,
    ),
    "delete_vdc": _op(
        "DeleteVdc", "DELETE", "/vdcs/{id}",
        options.DeleteVdcOptions, models.VDC,
    ),
    # Transit gateways
    "add_transit_gateway_connections": _op(
        "AddTransitGatewayConnections", "PUT", "/vdcs/{vdc_id}/edges/{edge_id}/transit_gateways/{id}",
        options.AddTransitGatewayConnectionsOptions, models.TransitGateway, zero_body=True,
    ),
    "remove_transit_gateway_connections": _op(
        "RemoveTransitGatewayConnections", "DELETE", "/vdcs/{vdc_id}/edges/{edge_id}/transit_gateways/{id}",
        options.RemoveTransitGatewayConnectionsOptions, models.TransitGateway,
    ),
}
