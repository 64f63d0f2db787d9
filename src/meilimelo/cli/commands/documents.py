"""Document commands."""

import json
from pathlib import Path

import anyio
import typer
from rich.console import Console

from ...schema import Document
from ..common import (
    config_option,
    host_option,
    json_output_option,
    key_option,
    timeout_option,
    with_error_handling,
)
from ..formatters import json_output, tables
from ..helpers.client_factory import create_client

console = Console()


@with_error_handling
def list_documents(
    index: str = typer.Argument(..., help="Index to browse"),
    limit: int = typer.Option(20, help="Number of documents to return"),
    offset: int = typer.Option(0, help="Number of documents to skip"),
    json_out: bool = json_output_option,
    host: str = host_option,
    key: str = key_option,
    config: str = config_option,
    timeout: float = timeout_option,
):
    """List documents of an index in storage order."""
    meili = create_client(host, key, config, timeout)
    docs = anyio.run(meili.list_documents, index, Document, limit, offset)

    if json_out:
        console.print_json(data=json_output.format_documents_json(docs))
        return
    if not docs:
        console.print("[yellow]No documents found[/yellow]")
        return
    console.print(tables.format_documents_table(docs, title=f"{index} (offset {offset})"))


@with_error_handling
def get_document(
    index: str = typer.Argument(..., help="Index holding the document"),
    uid: str = typer.Argument(..., help="Unique ID of the document"),
    host: str = host_option,
    key: str = key_option,
    config: str = config_option,
    timeout: float = timeout_option,
):
    """Print a single document as JSON."""
    meili = create_client(host, key, config, timeout)
    doc = anyio.run(meili.get_document, index, uid, Document)
    console.print_json(data=doc.document())


@with_error_handling
def delete_document(
    index: str = typer.Argument(..., help="Index holding the document"),
    uid: str = typer.Argument(..., help="Unique ID of the document"),
    host: str = host_option,
    key: str = key_option,
    config: str = config_option,
    timeout: float = timeout_option,
):
    """Delete a single document."""
    meili = create_client(host, key, config, timeout)
    update = anyio.run(meili.delete_document, index, uid)
    console.print(f"[green]Deletion enqueued (update {update.id})[/green]")


@with_error_handling
def insert(
    index: str = typer.Argument(..., help="Index into which documents are inserted"),
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON file with a list of documents"),
    host: str = host_option,
    key: str = key_option,
    config: str = config_option,
    timeout: float = timeout_option,
):
    """Insert documents from a JSON file."""
    payload = json.loads(file.read_text())
    if isinstance(payload, dict):
        payload = [payload]
    if not isinstance(payload, list) or not all(isinstance(d, dict) for d in payload):
        console.print("[red]Expected a JSON object or a list of JSON objects[/red]")
        raise typer.Exit(1)

    meili = create_client(host, key, config, timeout)
    update = anyio.run(meili.insert, index, payload)
    console.print(f"[green]Inserted {len(payload)} documents (update {update.id})[/green]")
