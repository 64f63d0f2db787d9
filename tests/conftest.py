"""Shared test fixtures for pytest."""

import httpx
import pytest

from meilimelo import MeiliMelo, Schema, schema

HOST = "http://meili.test:7700"


@schema
class Employee(Schema):
    firstname: str = ""
    lastname: str = ""
    roles: list[str] = []


@pytest.fixture(scope="session")
def anyio_backend():
    """Configure pytest-anyio to only use asyncio backend."""
    return "asyncio"


@pytest.fixture
def employee_schema():
    """Schema type with a generated formatted companion."""
    return Employee


@pytest.fixture
def search_response():
    """Well-formed MeiliSearch search response."""
    return {
        "hits": [
            {
                "firstname": "Luke",
                "lastname": "Skywalker",
                "roles": ["Tech"],
                "_formatted": {
                    "firstname": "Luke",
                    "lastname": "<em>Sky</em>walker",
                    "roles": ["Tech"],
                },
            },
            {"firstname": "Anakin", "lastname": "Skywalker", "roles": ["Lead", "Tech"]},
            {"firstname": "Shmi", "lastname": "Skywalker", "roles": []},
        ],
        "offset": 0,
        "limit": 20,
        "nbHits": 3,
        "exhaustiveNbHits": False,
        "exhaustiveFacetsCount": True,
        "facetsDistribution": {"roles": {"Tech": 2, "Lead": 1}},
        "processingTimeMs": 4,
        "query": "sky",
    }


@pytest.fixture
def error_response():
    """Well-formed MeiliSearch error payload."""
    return {
        "errorType": "invalid_request_error",
        "errorCode": "invalid_filter",
        "message": "Invalid syntax for the filter parameter: age >",
        "errorLink": "https://docs.meilisearch.com/errors#invalid_filter",
    }


@pytest.fixture
def mock_meili():
    """Factory for a MeiliMelo descriptor backed by httpx.MockTransport.

    Returns ``(meili, requests)`` where ``requests`` collects every request
    the transport received.
    """

    def factory(status_code=200, payload=None, content=None, key=None, handler=None):
        requests = []

        def respond(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if handler is not None:
                return handler(request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            if payload is None:
                return httpx.Response(status_code)
            return httpx.Response(status_code, json=payload)

        meili = MeiliMelo(host=HOST, transport=httpx.MockTransport(respond))
        if key is not None:
            meili = meili.with_secret_key(key)
        return meili, requests

    return factory
