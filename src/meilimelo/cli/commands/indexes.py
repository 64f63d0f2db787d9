"""Index management commands."""

import anyio
import typer
from rich.console import Console

from ..common import (
    check_single_format,
    config_option,
    host_option,
    json_output_option,
    key_option,
    table_output_option,
    timeout_option,
    with_error_handling,
    xml_output_option,
)
from ..formatters import json_output, tables
from ..helpers.client_factory import create_client

console = Console()


@with_error_handling
def list_indexes(
    json_out: bool = json_output_option,
    table: bool = table_output_option,
    xml: bool = xml_output_option,
    host: str = host_option,
    key: str = key_option,
    config: str = config_option,
    timeout: float = timeout_option,
):
    """List all indexes."""
    check_single_format(json_out, table, xml)

    meili = create_client(host, key, config, timeout)
    indexes = anyio.run(meili.indices)

    if json_out:
        console.print_json(data=json_output.format_indexes_json(indexes))
        return
    if not indexes:
        console.print("[yellow]No indexes found[/yellow]")
        return
    if xml:
        console.print(json_output.format_indexes_xml(indexes))
    else:
        console.print(tables.format_indexes_table(indexes))


@with_error_handling
def create_index(
    uid: str = typer.Argument(..., help="Unique ID of the new index"),
    name: str = typer.Argument(None, help="Human-readable name (default: the UID)"),
    host: str = host_option,
    key: str = key_option,
    config: str = config_option,
    timeout: float = timeout_option,
):
    """Create a new index."""
    meili = create_client(host, key, config, timeout)
    index = anyio.run(meili.create_index, uid, name or uid)
    console.print(f"[green]Created index {index.uid} ({index.name})[/green]")


@with_error_handling
def delete_index(
    uid: str = typer.Argument(..., help="Unique ID of the index to delete"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    host: str = host_option,
    key: str = key_option,
    config: str = config_option,
    timeout: float = timeout_option,
):
    """Delete an index and all of its documents."""
    if not yes and not typer.confirm(f"Delete index {uid}?"):
        console.print("[yellow]Aborted[/yellow]")
        raise typer.Exit(0)

    meili = create_client(host, key, config, timeout)
    anyio.run(meili.delete_index, uid)
    console.print(f"[green]Deleted index {uid}[/green]")
