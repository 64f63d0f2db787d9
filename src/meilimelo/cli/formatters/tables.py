"""Reusable table formatting utilities for CLI output."""

from rich.table import Table
from typing import Any, Dict, List, Optional
from ...indices import Index
from ...results import Results
from ...schema import Schema


def _cell(value: Any, width: int = 60) -> str:
    text = "" if value is None else str(value)
    text = text.splitlines()[0] if text else text
    return (text[: width - 3] + "...") if len(text) > width else text


def _columns(rows: List[Dict[str, Any]]) -> List[str]:
    columns: List[str] = []
    for row in rows:
        for key in row:
            if key not in columns:
                columns.append(key)
    return columns


def format_documents_table(docs: List[Schema], title: Optional[str] = None) -> Table:
    """Format documents as a rich table, one column per attribute.

    Args:
        docs: Documents to format
        title: Optional custom title for the table

    Returns:
        Formatted Rich table
    """
    rows = [doc.document() for doc in docs]
    table = Table(title=title or f"Documents ({len(rows)} shown)")
    table.add_column("#", style="cyan", width=4)
    columns = _columns(rows)
    for column in columns:
        table.add_column(column, style="white")

    for rank, row in enumerate(rows, start=1):
        table.add_row(str(rank), *[_cell(row.get(column)) for column in columns])

    return table


def format_hits_table(results: Results) -> Table:
    """Format search hits as a rich table.

    Args:
        results: Decoded search results

    Returns:
        Formatted Rich table
    """
    title = (
        f"Hits for {results.query!r}: {len(results)} shown of "
        f"{'' if results.exhaustive_hits else '~'}{results.nb_hits} "
        f"(offset {results.offset}, {results.duration} ms)"
    )
    return format_documents_table(list(results), title=title)


def format_distribution_table(distribution: Dict[str, Dict[str, int]]) -> Table:
    """Format a facet distribution as a rich table.

    Args:
        distribution: Facet attribute -> facet value -> count

    Returns:
        Formatted Rich table
    """
    table = Table(title="Facet Distribution")
    table.add_column("Facet", style="cyan")
    table.add_column("Value", style="yellow")
    table.add_column("Count", style="green")

    for facet, counts in distribution.items():
        for value, count in sorted(counts.items(), key=lambda kv: kv[1], reverse=True):
            table.add_row(facet, value, str(count))

    return table


def format_indexes_table(indexes: List[Index]) -> Table:
    """Format indexes as a rich table.

    Args:
        indexes: List of Index objects to format

    Returns:
        Formatted Rich table
    """
    table = Table(title="Indexes")
    table.add_column("UID", style="cyan", no_wrap=True)
    table.add_column("Name", style="yellow")
    table.add_column("Primary Key", style="green")
    table.add_column("Created", style="magenta")
    table.add_column("Updated", style="magenta")

    for index in indexes:
        table.add_row(
            index.uid,
            index.name,
            index.primary_key or "?",
            index.created_at or "?",
            index.updated_at or "?",
        )

    return table
