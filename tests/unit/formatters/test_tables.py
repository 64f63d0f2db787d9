"""Unit tests for table formatters."""

from rich.table import Table

from meilimelo import Document, Index, Results
from meilimelo.cli.formatters.tables import (
    format_distribution_table,
    format_documents_table,
    format_hits_table,
    format_indexes_table,
)


def test_format_hits_table(employee_schema, search_response):
    """Test formatting hits with one column per attribute."""
    results = Results[employee_schema].model_validate(search_response)

    table = format_hits_table(results)

    assert isinstance(table, Table)
    assert "3 shown of ~3" in table.title
    assert [c.header for c in table.columns] == ["#", "firstname", "lastname", "roles"]
    assert table.row_count == 3


def test_format_hits_table_does_not_consume(employee_schema, search_response):
    results = Results[employee_schema].model_validate(search_response)

    format_hits_table(results)

    assert len(list(results)) == 3


def test_format_documents_table_heterogeneous():
    """Test columns are the union of attributes, in first-seen order."""
    docs = [Document(id=1, title="Dune"), Document(id=2, author="Herbert")]

    table = format_documents_table(docs)

    assert table.title == "Documents (2 shown)"
    assert [c.header for c in table.columns] == ["#", "id", "title", "author"]


def test_format_documents_table_empty():
    table = format_documents_table([])

    assert isinstance(table, Table)
    assert table.row_count == 0


def test_format_distribution_table():
    table = format_distribution_table({"roles": {"Tech": 2, "Lead": 5}, "company": {"ACME": 1}})

    assert table.title == "Facet Distribution"
    assert len(table.columns) == 3
    assert table.row_count == 3


def test_format_indexes_table():
    indexes = [Index(uid="employees", name="Employees", primaryKey="id")]

    table = format_indexes_table(indexes)

    assert table.title == "Indexes"
    assert len(table.columns) == 5
    assert table.row_count == 1
