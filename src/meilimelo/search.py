"""Search query builder.

``Query`` is an immutable value describing one search request. Every setter
returns a new query with a single field changed, so intermediate queries can be
kept and branched from freely. ``run()`` performs the request and decodes the
response into ``Results`` of the given schema; a query can only be run once.

Example:
    ```python
    results = await (
        meili.search("employees")
        .query("johnson")
        .filters("age > 23")
        .crop([Attr("overview"), At("description", 10)])
        .limit(10)
        .run(Employee)
    )
    ```

See https://docs.meilisearch.com/guides/advanced_guides/search_parameters.html
for the meaning of each parameter.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, TypeAdapter

from . import protocol
from .errors import QueryConsumedError
from .facets import Facets
from .results import Results
from .schema import Schema, ensure_schema
from .utils.logging import trace

if TYPE_CHECKING:
    from .client import MeiliMelo

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Schema)


class Crop(BaseModel, ABC):
    """Attribute crop instruction."""

    model_config = ConfigDict(frozen=True)

    attribute: str

    @abstractmethod
    def serialize(self) -> str: ...


class Attr(Crop):
    """Crop ``attribute`` at the query's global ``crop_length``."""

    def __init__(self, attribute: str, **data: Any):
        super().__init__(attribute=attribute, **data)

    def serialize(self) -> str:
        return self.attribute


class At(Crop):
    """Crop ``attribute`` at an explicit length."""

    length: int

    def __init__(self, attribute: str, length: int, **data: Any):
        super().__init__(attribute=attribute, length=length, **data)

    def serialize(self) -> str:
        return f"{self.attribute}:{self.length}"


def _names(attributes: str | Iterable[str]) -> list[str]:
    # a bare string names one attribute
    if isinstance(attributes, str):
        return [attributes]
    return list(attributes)


class Query(BaseModel):
    """Utility to build and run a search query.

    Obtained from ``MeiliMelo.search(index)``. Unset parameters are left out of
    the request body and resolved by the backend.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, arbitrary_types_allowed=True)

    meili: MeiliMelo = Field(exclude=True, repr=False)
    index: str = Field(exclude=True)

    text: str | None = Field(default=None, alias="q")
    filter_expression: str | None = Field(default=None, alias="filters")
    facet_filters: list[list[str]] | None = Field(default=None, alias="facetFilters")
    page_limit: int | None = Field(default=None, alias="limit")
    page_offset: int | None = Field(default=None, alias="offset")
    attributes_to_retrieve: list[str] | None = Field(default=None, alias="attributesToRetrieve")
    attributes_to_crop: list[str] | None = Field(default=None, alias="attributesToCrop")
    default_crop_length: int | None = Field(default=None, alias="cropLength")
    attributes_to_highlight: list[str] | None = Field(default=None, alias="attributesToHighlight")
    facets_distribution: list[str] | None = Field(default=None, alias="facetsDistribution")
    matches: bool = Field(default=False, alias="matches")

    _spent: bool = PrivateAttr(default=False)

    def _with(self, **update: Any) -> Query:
        if self._spent:
            raise QueryConsumedError("query was already run")
        return self.model_copy(update=update)

    def query(self, query: str) -> Query:
        """Set the free-text query; unset means match all documents."""
        return self._with(text=query)

    def filters(self, filters: str) -> Query:
        """Set a raw filter expression, e.g. ``"company = ACME AND age > 23"``.

        The expression is sent as-is; its grammar is checked by the backend.
        """
        return self._with(filter_expression=filters)

    def limit(self, limit: int) -> Query:
        return self._with(page_limit=limit)

    def offset(self, offset: int) -> Query:
        return self._with(page_offset=offset)

    def facets(self, facets: Facets) -> Query:
        """Install facet filters built with ``FacetBuilder``."""
        return self._with(facet_filters=facets.groups)

    def retrieve(self, attributes: str | Iterable[str]) -> Query:
        """Restrict the attributes returned for each hit."""
        return self._with(attributes_to_retrieve=_names(attributes))

    def highlight(self, attributes: str | Iterable[str]) -> Query:
        """Highlight matches in these attributes of the formatted hits."""
        return self._with(attributes_to_highlight=_names(attributes))

    def distribution(self, facets: str | Iterable[str]) -> Query:
        """Request value counts for these facet attributes."""
        return self._with(facets_distribution=_names(facets))

    def crop(self, attributes: Iterable[Crop]) -> Query:
        """Crop attributes to ``crop_length`` or to their own length."""
        return self._with(attributes_to_crop=[spec.serialize() for spec in attributes])

    def crop_length(self, length: int) -> Query:
        return self._with(default_crop_length=length)

    def body(self) -> dict[str, Any]:
        """JSON body of the search request."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @property
    def path(self) -> str:
        return f"/indexes/{self.index}/search"

    @trace
    async def run(self, schema: type[S]) -> Results[S]:
        """Run the search and decode hits as ``schema``.

        Raises:
            InvalidQueryError: The query was refused by the instance
            UpstreamError: Communication failed or the response was unreadable
            QueryConsumedError: This query was already run
            SchemaError: ``schema`` is not a usable document type
        """
        ensure_schema(schema)
        if self._spent:
            raise QueryConsumedError("query was already run")
        self._spent = True

        body = self.body()
        logger.debug("Searching %s with %s", self.index, body)
        return await protocol.call(
            self.meili,
            "POST",
            self.path,
            TypeAdapter(Results[schema]),
            success=protocol.ok_only,
            json=body,
        )
