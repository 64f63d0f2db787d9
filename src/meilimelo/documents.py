"""Document calls: insert, list, point lookup and deletion."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from . import protocol
from .schema import Schema, ensure_schema

if TYPE_CHECKING:
    from .client import MeiliMelo

S = TypeVar("S", bound=Schema)


class Update(BaseModel):
    """Descriptor for an asynchronous upstream operation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(alias="updateId")


_update_adapter = TypeAdapter(Update)


def _payload(docs: Sequence[Schema | dict[str, Any]]) -> list[dict[str, Any]]:
    return [doc.document() if isinstance(doc, Schema) else dict(doc) for doc in docs]


async def insert(meili: MeiliMelo, index: str, docs: Sequence[Schema | dict[str, Any]]) -> Update:
    path = f"/indexes/{index}/documents"
    return await protocol.call(meili, "POST", path, _update_adapter, json=_payload(docs))


async def list_documents(
    meili: MeiliMelo, index: str, schema: type[S], limit: int, offset: int
) -> list[S]:
    ensure_schema(schema)
    return await protocol.call(
        meili,
        "GET",
        f"/indexes/{index}/documents",
        TypeAdapter(list[schema]),
        params={"limit": limit, "offset": offset},
    )


async def get(meili: MeiliMelo, index: str, uid: str, schema: type[S]) -> S:
    ensure_schema(schema)
    path = f"/indexes/{index}/documents/{uid}"
    return await protocol.call(meili, "GET", path, TypeAdapter(schema))


async def delete(meili: MeiliMelo, index: str, uid: str) -> Update:
    path = f"/indexes/{index}/documents/{uid}"
    return await protocol.call(meili, "DELETE", path, _update_adapter)
