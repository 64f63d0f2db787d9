"""Search command."""

from typing import List, Optional

import anyio
import typer
from rich.console import Console

from ...results import Results
from ...schema import Document
from ...search import Query
from ...utils.logging import trace
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
from ..helpers.client_factory import create_client, parse_crop, parse_facets

console = Console()


def _split(values: Optional[str]) -> Optional[List[str]]:
    if values is None:
        return None
    return [v.strip() for v in values.split(",") if v.strip()]


@trace
async def run_search(query: Query) -> Results[Document]:
    return await query.run(Document)


@with_error_handling
def search(
    index: str = typer.Argument(..., help="Index to search"),
    text: str = typer.Argument(None, help="Search text (omit to match all documents)"),
    filters: str = typer.Option(None, help="Raw filter expression, e.g. 'age > 23'"),
    facet: List[str] = typer.Option(
        None, "--facet", help="Facet group 'attr:value|attr:value' (OR); repeat to AND groups"
    ),
    limit: int = typer.Option(None, help="Number of hits to return"),
    offset: int = typer.Option(None, help="Number of hits to skip"),
    retrieve: str = typer.Option(None, help="Comma-separated attributes to retrieve"),
    highlight: str = typer.Option(None, help="Comma-separated attributes to highlight"),
    crop: List[str] = typer.Option(None, "--crop", help="Attribute to crop: 'attr' or 'attr:length'"),
    crop_length: int = typer.Option(None, help="Default crop length"),
    distribution: str = typer.Option(None, help="Comma-separated facets to count values for"),
    json_out: bool = json_output_option,
    table: bool = table_output_option,
    xml: bool = xml_output_option,
    host: str = host_option,
    key: str = key_option,
    config: str = config_option,
    timeout: float = timeout_option,
):
    """Search an index and print the hits.

    Use --json for machine output; --facet and --distribution expose facet
    filtering and value counts.
    """
    check_single_format(json_out, table, xml)

    try:
        facets = parse_facets(facet)
        crops = parse_crop(crop)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from e

    meili = create_client(host, key, config, timeout)
    query = meili.search(index)
    if text is not None:
        query = query.query(text)
    if filters is not None:
        query = query.filters(filters)
    if facets is not None:
        query = query.facets(facets)
    if limit is not None:
        query = query.limit(limit)
    if offset is not None:
        query = query.offset(offset)
    if retrieve is not None:
        query = query.retrieve(_split(retrieve))
    if highlight is not None:
        query = query.highlight(_split(highlight))
    if crops:
        query = query.crop(crops)
    if crop_length is not None:
        query = query.crop_length(crop_length)
    if distribution is not None:
        query = query.distribution(_split(distribution))

    results = anyio.run(run_search, query)

    if json_out:
        console.print_json(data=json_output.format_search_json(results))
        return
    elif xml:
        console.print(json_output.format_search_results_xml(results))
        return

    if not len(results):
        console.print("[yellow]No results found[/yellow]")
    else:
        console.print(tables.format_hits_table(results))
    if results.distribution:
        console.print(tables.format_distribution_table(results.distribution))
