"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Vmwaas, a product of Garudex Labs

CLI commands for the read-only catalog: regions, host profiles and
multitenant director sites.
"""

import click

from vmwaas.cli.context import CLIContext, pass_context
from vmwaas.cli.output import fail, print_table
from vmwaas.exceptions import VmwareError
from vmwaas.sdk.options import (
    ListDirectorSiteHostProfilesOptions,
    ListDirectorSiteRegionsOptions,
    ListMultitenantDirectorSitesOptions,
)


@click.command('regions')
@pass_context
def list_regions(ctx: CLIContext):
    """List the regions where director sites can be created."""
    try:
        regions, _ = ctx.service.list_director_site_regions(ListDirectorSiteRegionsOptions())
    except VmwareError as e:
        fail(e)
    print_table("Regions", regions.director_site_regions if regions else [], ("name", "endpoint"))


@click.command('host-profiles')
@pass_context
def list_host_profiles(ctx: CLIContext):
    """List the host profiles available for clusters."""
    try:
        profiles, _ = ctx.service.list_director_site_host_profiles(ListDirectorSiteHostProfilesOptions())
    except VmwareError as e:
        fail(e)
    print_table(
        "Host Profiles",
        profiles.director_site_host_profiles if profiles else [],
        ("id", "family", "cpu", "ram", "socket", "speed"),
    )


@click.command('multitenant-sites')
@pass_context
def list_multitenant_sites(ctx: CLIContext):
    """List the multitenant director sites."""
    try:
        sites, _ = ctx.service.list_multitenant_director_sites(ListMultitenantDirectorSitesOptions())
    except VmwareError as e:
        fail(e)
    print_table(
        "Multitenant Director Sites",
        sites.multitenant_director_sites if sites else [],
        ("id", "name", "display_name", "region"),
    )
