"""meilimelo: typed asynchronous client for MeiliSearch.

Build search queries with a fluent immutable builder, encode facet filters,
and decode result sets into your own pydantic schema types.
"""

from .client import MeiliMelo
from .config import ClientConfig, config_from_env, load_config_from_yaml, save_config_to_yaml
from .documents import Update
from .errors import (
    BuilderConsumedError,
    InvalidQueryError,
    MeiliMeloError,
    QueryConsumedError,
    QueryError,
    ResultsConsumedError,
    SchemaError,
    UpstreamError,
)
from .facets import FacetBuilder, Facets
from .indices import Index
from .results import Results
from .schema import Document, Schema, schema
from .search import At, Attr, Crop, Query

__all__ = [
    # Client
    "MeiliMelo",
    "Query",
    "Crop",
    "Attr",
    "At",
    "FacetBuilder",
    "Facets",
    "Results",
    "Schema",
    "Document",
    "schema",
    "Index",
    "Update",
    # Errors
    "MeiliMeloError",
    "UpstreamError",
    "InvalidQueryError",
    "QueryError",
    "BuilderConsumedError",
    "QueryConsumedError",
    "ResultsConsumedError",
    "SchemaError",
    # Configuration
    "ClientConfig",
    "config_from_env",
    "load_config_from_yaml",
    "save_config_to_yaml",
]

__version__ = "0.1.0"
