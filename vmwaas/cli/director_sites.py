"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Vmwaas, a product of Garudex Labs

CLI commands for director site instances and their OIDC configuration.
"""

import click

from vmwaas.cli.context import CLIContext, pass_context
from vmwaas.cli.output import fail, print_model, print_table
from vmwaas.exceptions import VmwareError
from vmwaas.sdk.options import (
    DeleteDirectorSiteOptions,
    GetDirectorSiteOptions,
    GetOidcConfigurationOptions,
    ListDirectorSitesOptions,
    SetOidcConfigurationOptions,
)

SITE_COLUMNS = ("id", "name", "status", "type", "ordered_at")


@click.command('list')
@click.option('--json', 'as_json', is_flag=True, help='Print the raw collection as JSON')
@pass_context
def list_sites(ctx: CLIContext, as_json: bool):
    """
    List director site instances.

    Examples:

        vmwaas sites list

        vmwaas sites list --json
    """
    try:
        sites, _ = ctx.service.list_director_sites(ListDirectorSitesOptions())
    except VmwareError as e:
        fail(e)

    if as_json:
        print_model(sites)
    else:
        print_table("Director Sites", sites.director_sites if sites else [], SITE_COLUMNS)


@click.command('get')
@click.argument('site_id')
@pass_context
def get_site(ctx: CLIContext, site_id: str):
    """Show a director site instance."""
    try:
        site, _ = ctx.service.get_director_site(GetDirectorSiteOptions(site_id))
    except VmwareError as e:
        fail(e)
    print_model(site)


@click.command('delete')
@click.argument('site_id')
@click.option('--yes', '-y', is_flag=True, help='Do not ask for confirmation')
@pass_context
def delete_site(ctx: CLIContext, site_id: str, yes: bool):
    """
    Delete a director site instance.

    Deletion removes every PVDC, cluster and VDC of the site.
    """
    if not yes:
        click.confirm(f"Delete director site {site_id}?", abort=True)
    try:
        site, response = ctx.service.delete_director_site(DeleteDirectorSiteOptions(site_id))
    except VmwareError as e:
        fail(e)
    click.echo(f"✓ Deletion of director site {site_id} accepted (status {response.get_status_code()})")
    if ctx.verbose:
        print_model(site)


@click.command('get')
@click.argument('site_id')
@pass_context
def get_oidc(ctx: CLIContext, site_id: str):
    """Show the OIDC configuration of a director site."""
    try:
        oidc, _ = ctx.service.get_oidc_configuration(GetOidcConfigurationOptions(site_id))
    except VmwareError as e:
        fail(e)
    print_model(oidc)


@click.command('set')
@click.argument('site_id')
@pass_context
def set_oidc(ctx: CLIContext, site_id: str):
    """Configure OIDC federation with IBM Cloud IAM for a director site."""
    try:
        oidc, _ = ctx.service.set_oidc_configuration(
            SetOidcConfigurationOptions(site_id, content_length=0)
        )
    except VmwareError as e:
        fail(e)
    click.echo(f"✓ OIDC configuration requested for director site {site_id}")
    print_model(oidc)
