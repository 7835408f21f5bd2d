"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Vmwaas, a product of Garudex Labs

Rendering helpers shared by CLI commands.
"""

import sys
from typing import Any, Iterable, NoReturn, Sequence

import click
from rich.console import Console
from rich.table import Table

from vmwaas.core.serialization import Model, is_set, to_json
from vmwaas.exceptions import VmwareError


def print_model(model: Any) -> None:
    """Print a model (or None) as highlighted JSON."""
    if model is None:
        click.echo("No content.")
        return
    Console().print_json(to_json(model))


def print_table(title: str, items: Iterable[Model], columns: Sequence[str]) -> None:
    """Print one row per model, showing the named attributes."""
    items = list(items or [])
    if not items:
        click.echo(f"No {title.lower()} found.")
        return

    table = Table(title=title)
    for column in columns:
        table.add_column(column.replace("_", " ").title())
    for item in items:
        table.add_row(*(_cell(getattr(item, column, None)) for column in columns))
    Console().print(table)


def _cell(value: Any) -> str:
    if value is None or not is_set(value):
        return "-"
    if hasattr(value, "value"):
        return str(value.value)
    return str(value)


def fail(error: VmwareError) -> NoReturn:
    """Report an SDK error on stderr and exit with status 1."""
    click.echo(f"Error: {error.message}", err=True)
    if error.transaction_id:
        click.echo(f"Transaction ID: {error.transaction_id}", err=True)
    sys.exit(1)
