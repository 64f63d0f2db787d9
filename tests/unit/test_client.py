"""Tests for the MeiliMelo descriptor and the index/document calls."""

import json

import httpx
import pytest
from pydantic import ValidationError

from meilimelo import Document, Index, InvalidQueryError, MeiliMelo, Update, UpstreamError


def test_descriptor_defaults():
    meili = MeiliMelo(host="http://localhost:7700/")

    assert meili.host == "http://localhost:7700"
    assert meili.secret_key is None
    assert meili.timeout is None


def test_with_secret_key_returns_copy():
    """with_secret_key never mutates the original descriptor."""
    meili = MeiliMelo(host="http://localhost:7700")
    keyed = meili.with_secret_key("abcdef")

    assert meili.secret_key is None
    assert keyed.secret_key.get_secret_value() == "abcdef"
    assert "abcdef" not in repr(keyed)


def test_descriptor_frozen():
    meili = MeiliMelo(host="http://localhost:7700")

    with pytest.raises(ValidationError):
        meili.host = "http://elsewhere"


def test_request_attaches_key():
    meili = MeiliMelo(host="http://localhost:7700").with_secret_key("abcdef")

    request = meili.request("GET", "/indexes")

    assert str(request.url) == "http://localhost:7700/indexes"
    assert request.headers["X-Meili-API-Key"] == "abcdef"


def test_request_without_key():
    request = MeiliMelo(host="http://localhost:7700").request("GET", "/indexes")

    assert "X-Meili-API-Key" not in request.headers


def test_request_timeout_extension():
    meili = MeiliMelo(host="http://localhost:7700", timeout=2.5)

    request = meili.request("GET", "/indexes")

    assert request.extensions["timeout"] == httpx.Timeout(2.5).as_dict()


@pytest.mark.anyio
async def test_indices(mock_meili):
    payload = [
        {
            "uid": "employees",
            "name": "Employees",
            "primaryKey": "id",
            "createdAt": "2020-05-01T10:00:00Z",
            "updatedAt": "2020-05-02T10:00:00Z",
        },
        {"uid": "movies", "name": "Movies", "primaryKey": None},
    ]
    meili, requests = mock_meili(payload=payload)

    indexes = await meili.indices()

    assert [i.uid for i in indexes] == ["employees", "movies"]
    assert isinstance(indexes[0], Index)
    assert indexes[0].primary_key == "id"
    assert indexes[1].created_at is None
    assert requests[0].method == "GET"
    assert requests[0].url.path == "/indexes"


@pytest.mark.anyio
async def test_create_index(mock_meili):
    meili, requests = mock_meili(status_code=201, payload={"uid": "employees", "name": "Employees"})

    index = await meili.create_index("employees", "Employees")

    assert index.uid == "employees"
    assert requests[0].method == "POST"
    assert json.loads(requests[0].content) == {"uid": "employees", "name": "Employees"}


@pytest.mark.anyio
async def test_delete_index(mock_meili):
    meili, requests = mock_meili(status_code=204)

    assert await meili.delete_index("employees") is None
    assert requests[0].method == "DELETE"
    assert requests[0].url.path == "/indexes/employees"


@pytest.mark.anyio
async def test_delete_missing_index(mock_meili, error_response):
    meili, _ = mock_meili(status_code=404, payload={**error_response, "errorCode": "index_not_found"})

    with pytest.raises(InvalidQueryError) as exc_info:
        await meili.delete_index("nope")

    assert exc_info.value.error.code == "index_not_found"


@pytest.mark.anyio
async def test_insert_schema_documents(mock_meili, employee_schema):
    """Schema instances are sent without their formatted companion."""
    meili, requests = mock_meili(status_code=202, payload={"updateId": 7})

    update = await meili.insert(
        "employees",
        [employee_schema(firstname="Luke", lastname="Skywalker"), {"firstname": "Leia"}],
    )

    assert isinstance(update, Update)
    assert update.id == 7
    assert requests[0].url.path == "/indexes/employees/documents"
    assert json.loads(requests[0].content) == [
        {"firstname": "Luke", "lastname": "Skywalker", "roles": []},
        {"firstname": "Leia"},
    ]


@pytest.mark.anyio
async def test_list_documents(mock_meili, employee_schema):
    meili, requests = mock_meili(payload=[{"firstname": "Luke"}, {"firstname": "Leia"}])

    docs = await meili.list_documents("employees", employee_schema, limit=2, offset=4)

    assert [d.firstname for d in docs] == ["Luke", "Leia"]
    assert requests[0].url.path == "/indexes/employees/documents"
    assert requests[0].url.params["limit"] == "2"
    assert requests[0].url.params["offset"] == "4"


@pytest.mark.anyio
async def test_get_document(mock_meili):
    meili, requests = mock_meili(payload={"id": "lskywalker", "firstname": "Luke"})

    doc = await meili.get_document("employees", "lskywalker", Document)

    assert doc.document() == {"id": "lskywalker", "firstname": "Luke"}
    assert requests[0].method == "GET"
    assert requests[0].url.path == "/indexes/employees/documents/lskywalker"


@pytest.mark.anyio
async def test_delete_document_uses_delete(mock_meili):
    meili, requests = mock_meili(status_code=202, payload={"updateId": 3})

    update = await meili.delete_document("employees", "lskywalker")

    assert update.id == 3
    assert requests[0].method == "DELETE"
    assert requests[0].url.path == "/indexes/employees/documents/lskywalker"


@pytest.mark.anyio
async def test_collaborator_unreadable_body(mock_meili):
    meili, _ = mock_meili(status_code=202, content=b"not json")

    with pytest.raises(UpstreamError):
        await meili.delete_document("employees", "lskywalker")
