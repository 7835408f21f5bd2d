"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Vmwaas, a product of Garudex Labs

CLI entry point for the VMware as a Service SDK.

Provides read and housekeeping commands over director sites, provider
virtual data centers, clusters, the catalog and virtual data centers.
"""

import sys
from pathlib import Path
from typing import Optional

import click

from vmwaas._version import __version__
from vmwaas.cli.context import CLIContext, pass_context
from vmwaas.logging_config import get_logger, setup_logging


@click.group()
@click.option(
    '--config',
    '-c',
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
    default=None,
    help='Path to credentials file (default: $VMWARE_CREDENTIALS_FILE or ./vmware-credentials.env)',
)
@click.option(
    '--url',
    '-u',
    default=None,
    help='Service URL overriding the configured one',
)
@click.option(
    '--service-name',
    default='vmware',
    show_default=True,
    help='Prefix of the configuration keys',
)
@click.option(
    '--log-level',
    '-l',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], case_sensitive=False),
    default='WARNING',
    help='Set logging level',
)
@click.option(
    '--verbose',
    '-v',
    is_flag=True,
    help='Enable verbose output',
)
@click.version_option(version=__version__, prog_name='vmwaas')
@pass_context
def cli(ctx: CLIContext, config: Optional[Path], url: Optional[str], service_name: str,
        log_level: str, verbose: bool):
    """
    vmwaas - Manage IBM Cloud for VMware as a Service resources.

    Credentials are read from VMWARE_* environment variables and the
    credentials file.
    """
    ctx.verbose = verbose
    ctx.config_path = str(config) if config else None
    ctx.url = url
    ctx.service_name = service_name

    # Set up logging
    try:
        setup_logging(level="DEBUG" if verbose else log_level.upper(), json_format=False)
    except Exception as e:
        click.echo(f"Error: Failed to set up logging: {e}", err=True)
        sys.exit(1)

    if verbose:
        logger = get_logger("cli")
        logger.info(f"Using credentials file: {ctx.config_path or 'default lookup'}")


@cli.group()
def sites():
    """Manage director site instances."""
    pass


from vmwaas.cli.director_sites import delete_site, get_oidc, get_site, list_sites, set_oidc
sites.add_command(list_sites)
sites.add_command(get_site)
sites.add_command(delete_site)


@cli.group()
def oidc():
    """Manage OIDC federation of director sites."""
    pass


oidc.add_command(get_oidc)
oidc.add_command(set_oidc)


@cli.group()
def pvdcs():
    """Query provider virtual data centers."""
    pass


from vmwaas.cli.pvdcs import get_cluster, get_pvdc, list_clusters, list_pvdcs, resize_cluster
pvdcs.add_command(list_pvdcs)
pvdcs.add_command(get_pvdc)


@cli.group()
def clusters():
    """Query and resize clusters."""
    pass


clusters.add_command(list_clusters)
clusters.add_command(get_cluster)
clusters.add_command(resize_cluster)


@cli.group()
def catalog():
    """Browse regions, host profiles and multitenant sites."""
    pass


from vmwaas.cli.catalog import list_host_profiles, list_multitenant_sites, list_regions
catalog.add_command(list_regions)
catalog.add_command(list_host_profiles)
catalog.add_command(list_multitenant_sites)


@cli.group()
def vdcs():
    """Manage virtual data centers."""
    pass


from vmwaas.cli.vdcs import delete_vdc, get_vdc, list_vdcs
vdcs.add_command(list_vdcs)
vdcs.add_command(get_vdc)
vdcs.add_command(delete_vdc)


if __name__ == '__main__':
    cli()
