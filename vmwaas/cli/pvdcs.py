"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Vmwaas, a product of Garudex Labs

CLI commands for provider virtual data centers and their clusters.
"""

import click

from vmwaas.cli.context import CLIContext, pass_context
from vmwaas.cli.output import fail, print_model, print_table
from vmwaas.exceptions import VmwareError
from vmwaas.sdk.models import ClusterPatch
from vmwaas.sdk.options import (
    GetDirectorInstancesPvdcsClusterOptions,
    GetDirectorSitesPvdcsOptions,
    ListDirectorSitesPvdcsClustersOptions,
    ListDirectorSitesPvdcsOptions,
    UpdateDirectorSitesPvdcsClusterOptions,
)


@click.command('list')
@click.argument('site_id')
@pass_context
def list_pvdcs(ctx: CLIContext, site_id: str):
    """List the provider virtual data centers of a director site."""
    try:
        pvdcs, _ = ctx.service.list_director_sites_pvdcs(ListDirectorSitesPvdcsOptions(site_id))
    except VmwareError as e:
        fail(e)
    print_table(
        "Provider VDCs",
        pvdcs.pvdcs if pvdcs else [],
        ("id", "name", "data_center_name", "status"),
    )


@click.command('get')
@click.argument('site_id')
@click.argument('pvdc_id')
@pass_context
def get_pvdc(ctx: CLIContext, site_id: str, pvdc_id: str):
    """Show a provider virtual data center."""
    try:
        pvdc, _ = ctx.service.get_director_sites_pvdcs(GetDirectorSitesPvdcsOptions(site_id, pvdc_id))
    except VmwareError as e:
        fail(e)
    print_model(pvdc)


@click.command('list')
@click.argument('site_id')
@click.argument('pvdc_id')
@pass_context
def list_clusters(ctx: CLIContext, site_id: str, pvdc_id: str):
    """List the clusters of a provider virtual data center."""
    try:
        clusters, _ = ctx.service.list_director_sites_pvdcs_clusters(
            ListDirectorSitesPvdcsClustersOptions(site_id, pvdc_id)
        )
    except VmwareError as e:
        fail(e)
    print_table(
        "Clusters",
        clusters.clusters if clusters else [],
        ("id", "name", "host_count", "host_profile", "status"),
    )


@click.command('get')
@click.argument('site_id')
@click.argument('pvdc_id')
@click.argument('cluster_id')
@pass_context
def get_cluster(ctx: CLIContext, site_id: str, pvdc_id: str, cluster_id: str):
    """Show a cluster."""
    try:
        cluster, _ = ctx.service.get_director_instances_pvdcs_cluster(
            GetDirectorInstancesPvdcsClusterOptions(site_id, cluster_id, pvdc_id)
        )
    except VmwareError as e:
        fail(e)
    print_model(cluster)


@click.command('resize')
@click.argument('site_id')
@click.argument('pvdc_id')
@click.argument('cluster_id')
@click.option('--host-count', '-n', type=click.IntRange(min=1), required=True, help='Target number of hosts')
@pass_context
def resize_cluster(ctx: CLIContext, site_id: str, pvdc_id: str, cluster_id: str, host_count: int):
    """
    Change the number of hosts in a cluster.

    Examples:

        vmwaas clusters resize SITE PVDC CLUSTER --host-count 4
    """
    try:
        cluster, _ = ctx.service.update_director_sites_pvdcs_cluster(
            UpdateDirectorSitesPvdcsClusterOptions(
                site_id, cluster_id, pvdc_id, ClusterPatch(host_count=host_count)
            )
        )
    except VmwareError as e:
        fail(e)
    click.echo(f"✓ Resize of cluster {cluster_id} to {host_count} hosts accepted")
    print_model(cluster)
