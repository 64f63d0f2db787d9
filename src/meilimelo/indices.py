"""Index lifecycle calls."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from . import protocol

if TYPE_CHECKING:
    from .client import MeiliMelo


class Index(BaseModel):
    """MeiliSearch index descriptor."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    uid: str
    name: str
    primary_key: str | None = Field(default=None, alias="primaryKey")
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")


_index_adapter = TypeAdapter(Index)
_index_list_adapter = TypeAdapter(list[Index])


async def list_indices(meili: MeiliMelo) -> list[Index]:
    return await protocol.call(meili, "GET", "/indexes", _index_list_adapter)


async def create(meili: MeiliMelo, uid: str, name: str) -> Index:
    return await protocol.call(meili, "POST", "/indexes", _index_adapter, json={"uid": uid, "name": name})


async def delete(meili: MeiliMelo, uid: str) -> None:
    await protocol.call(meili, "DELETE", f"/indexes/{uid}", None)
