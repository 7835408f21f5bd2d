"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Vmwaas, a product of Garudex Labs

CLI commands for virtual data centers.
"""

import click

from vmwaas.cli.context import CLIContext, pass_context
from vmwaas.cli.output import fail, print_model, print_table
from vmwaas.exceptions import VmwareError
from vmwaas.sdk.options import DeleteVdcOptions, GetVdcOptions, ListVdcsOptions


@click.command('list')
@click.option('--json', 'as_json', is_flag=True, help='Print the raw collection as JSON')
@pass_context
def list_vdcs(ctx: CLIContext, as_json: bool):
    """List virtual data centers."""
    try:
        vdcs, _ = ctx.service.list_vdcs(ListVdcsOptions())
    except VmwareError as e:
        fail(e)

    if as_json:
        print_model(vdcs)
    else:
        print_table("Virtual Data Centers", vdcs.vdcs if vdcs else [], ("id", "name", "status", "org_name"))


@click.command('get')
@click.argument('vdc_id')
@pass_context
def get_vdc(ctx: CLIContext, vdc_id: str):
    """Show a virtual data center."""
    try:
        vdc, _ = ctx.service.get_vdc(GetVdcOptions(vdc_id))
    except VmwareError as e:
        fail(e)
    print_model(vdc)


@click.command('delete')
@click.argument('vdc_id')
@click.option('--yes', '-y', is_flag=True, help='Do not ask for confirmation')
@pass_context
def delete_vdc(ctx: CLIContext, vdc_id: str, yes: bool):
    """Delete a virtual data center."""
    if not yes:
        click.confirm(f"Delete virtual data center {vdc_id}?", abort=True)
    try:
        _, response = ctx.service.delete_vdc(DeleteVdcOptions(vdc_id))
    except VmwareError as e:
        fail(e)
    click.echo(f"✓ Deletion of virtual data center {vdc_id} accepted (status {response.get_status_code()})")
