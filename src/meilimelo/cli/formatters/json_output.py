"""JSON and XML output formatting utilities for CLI."""

from typing import Any

from jinja2 import Environment

from ...indices import Index
from ...results import Results
from ...schema import Schema

_env = Environment(autoescape=True)


def format_search_json(results: Results) -> dict[str, Any]:
    """Format search results as JSON.

    Args:
        results: Decoded search results

    Returns:
        Dictionary ready for JSON serialization, using the wire field names
    """
    return {
        "query": results.query,
        "nbHits": results.nb_hits,
        "exhaustiveNbHits": results.exhaustive_hits,
        "exhaustiveFacetsCount": results.exhaustive_facets,
        "facetsDistribution": results.distribution,
        "limit": results.limit,
        "offset": results.offset,
        "processingTimeMs": results.duration,
        "hits": [hit.model_dump(mode="json", by_alias=True, exclude_none=True) for hit in results],
    }


def format_documents_json(docs: list[Schema]) -> dict[str, Any]:
    """Format documents as JSON.

    Args:
        docs: Documents to format

    Returns:
        Dictionary ready for JSON serialization
    """
    return {"documents": [doc.document() for doc in docs]}


def format_indexes_json(indexes: list[Index]) -> dict[str, Any]:
    """Format indexes as JSON.

    Args:
        indexes: List of Index objects

    Returns:
        Dictionary ready for JSON serialization
    """
    return {"indexes": [index.model_dump(mode="json", by_alias=True) for index in indexes]}


# XML Templates
SEARCH_RESULTS_XML_TEMPLATE = _env.from_string("""<?xml version="1.0" encoding="UTF-8"?>
<search_results query="{{ results.query }}" nb_hits="{{ results.nb_hits }}" offset="{{ results.offset }}" limit="{{ results.limit }}" processing_time_ms="{{ results.duration }}">
{%- for hit in hits %}
  <hit rank="{{ loop.index }}">
    {%- for key, value in hit.items() %}
    <attribute name="{{ key }}">{{ value }}</attribute>
    {%- endfor %}
  </hit>
{%- endfor %}
{%- if results.distribution %}
  <facets_distribution>
  {%- for facet, counts in results.distribution.items() %}
    <facet name="{{ facet }}">
    {%- for value, count in counts.items() %}
      <value name="{{ value }}" count="{{ count }}"/>
    {%- endfor %}
    </facet>
  {%- endfor %}
  </facets_distribution>
{%- endif %}
</search_results>""")

INDEXES_XML_TEMPLATE = _env.from_string("""<?xml version="1.0" encoding="UTF-8"?>
<indexes count="{{ indexes|length }}">
{%- for index in indexes %}
  <index uid="{{ index.uid }}">
    <name>{{ index.name }}</name>
    <primary_key>{{ index.primary_key or '' }}</primary_key>
    <created_at>{{ index.created_at or '' }}</created_at>
    <updated_at>{{ index.updated_at or '' }}</updated_at>
  </index>
{%- endfor %}
</indexes>""")


def format_search_results_xml(results: Results) -> str:
    """Format search results as XML using Jinja template."""
    hits = [hit.document() for hit in results]
    return SEARCH_RESULTS_XML_TEMPLATE.render(results=results, hits=hits)


def format_indexes_xml(indexes: list[Index]) -> str:
    """Format indexes as XML using Jinja template."""
    return INDEXES_XML_TEMPLATE.render(indexes=indexes)
