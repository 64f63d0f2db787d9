"""Descriptor to a MeiliSearch instance.

``MeiliMelo`` is an immutable value: the host, an optional secret key and the
httpx settings used for every call. It can be shared across any number of
concurrent queries.

Example:
    ```python
    meili = MeiliMelo(host="http://localhost:7700").with_secret_key("abcdef")

    results = await (
        meili.search("employees")
        .query("johnson")
        .facets(FacetBuilder("company", "ACME Corp").build())
        .distribution(["roles"])
        .limit(10)
        .run(Employee)
    )
    for employee in results:
        print(employee.firstname, employee.lastname)
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from . import documents, indices
from .documents import Update
from .indices import Index
from .schema import Schema
from .search import Query

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-Meili-API-Key"
DEFAULT_TIMEOUT = httpx.Timeout(5.0)

S = TypeVar("S", bound=Schema)


class MeiliMelo(BaseModel):
    """Read-only descriptor of a MeiliSearch instance."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    host: str = Field(description="Scheme, hostname and port of the instance")
    secret_key: SecretStr | None = Field(default=None, description="Secret key sent with each request")
    timeout: float | None = Field(default=None, gt=0, description="httpx timeout in seconds")
    transport: httpx.AsyncBaseTransport | None = Field(default=None, exclude=True, repr=False)

    @field_validator("host")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    def with_secret_key(self, key: str) -> MeiliMelo:
        """Return a copy of this descriptor authenticating with ``key``."""
        return self.model_copy(update={"secret_key": SecretStr(key)})

    def request(self, method: str, path: str, **kwargs: Any) -> httpx.Request:
        """Build a request against ``path``, authenticated when a key is set."""
        headers = dict(kwargs.pop("headers", None) or {})
        if self.secret_key is not None:
            headers[API_KEY_HEADER] = self.secret_key.get_secret_value()
        timeout = httpx.Timeout(self.timeout) if self.timeout is not None else DEFAULT_TIMEOUT
        return httpx.Request(
            method,
            f"{self.host}{path}",
            headers=headers,
            extensions={"timeout": timeout.as_dict()},
            **kwargs,
        )

    async def send(self, request: httpx.Request) -> httpx.Response:
        """Send ``request`` on a short-lived client and return the read response."""
        logger.debug("%s %s", request.method, request.url.path)
        async with httpx.AsyncClient(transport=self.transport) as http:
            response = await http.send(request)
        logger.debug("%s %s -> %s", request.method, request.url.path, response.status_code)
        return response

    def search(self, index: str) -> Query:
        """Initialize a search query against ``index``.

        The returned ``Query`` is an immutable builder: every setter returns a
        new query, and ``run()`` finally performs the search.
        """
        return Query(meili=self, index=index)

    async def indices(self) -> list[Index]:
        """List all available indices."""
        return await indices.list_indices(self)

    async def create_index(self, uid: str, name: str) -> Index:
        """Create a new index.

        Args:
            uid: Unique ID for the new index
            name: Human-readable name for the index
        """
        return await indices.create(self, uid, name)

    async def delete_index(self, uid: str) -> None:
        """Delete an existing index."""
        await indices.delete(self, uid)

    async def insert(self, index: str, docs: Sequence[Schema | dict[str, Any]]) -> Update:
        """Index a collection of documents.

        Args:
            index: Name of the index into which documents are inserted
            docs: Schema instances or plain mappings to insert
        """
        return await documents.insert(self, index, docs)

    async def list_documents(
        self, index: str, schema: type[S], limit: int = 20, offset: int = 0
    ) -> list[S]:
        """List documents of ``index`` in storage order."""
        return await documents.list_documents(self, index, schema, limit, offset)

    async def get_document(self, index: str, uid: str, schema: type[S]) -> S:
        """Fetch a single document by its unique ID."""
        return await documents.get(self, index, uid, schema)

    async def delete_document(self, index: str, uid: str) -> Update:
        """Delete a single document by its unique ID."""
        return await documents.delete(self, index, uid)


Query.model_rebuild(_types_namespace={"MeiliMelo": MeiliMelo})
