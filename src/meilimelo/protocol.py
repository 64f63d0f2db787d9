"""Request execution and response decoding.

Every call goes through the same four steps: build the request, send it,
branch on the status code, and decode the body into the expected shape. Failures map onto
the two error kinds of ``meilimelo.errors``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from .errors import InvalidQueryError, QueryError, UpstreamError

if TYPE_CHECKING:
    from .client import MeiliMelo

logger = logging.getLogger(__name__)

T = TypeVar("T")

_query_error_adapter = TypeAdapter(QueryError)

MAX_PORT = 65535


def ok_only(response: httpx.Response) -> bool:
    return response.status_code == httpx.codes.OK


def any_success(response: httpx.Response) -> bool:
    return response.is_success


def build(meili: MeiliMelo, method: str, path: str, **kwargs: Any) -> httpx.Request:
    """Build a request against ``meili``, rejecting hosts that cannot be reached."""
    try:
        request = meili.request(method, path, **kwargs)
    except httpx.InvalidURL as e:
        raise UpstreamError(e, "invalid request URL") from e
    port = request.url.port
    if port is not None and not 0 < port <= MAX_PORT:
        cause = httpx.InvalidURL(f"Invalid port: {port}")
        raise UpstreamError(cause, "invalid request URL") from cause
    return request


async def execute(meili: MeiliMelo, request: httpx.Request) -> httpx.Response:
    """Send ``request``, wrapping transport failures into ``UpstreamError``."""
    try:
        return await meili.send(request)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.debug("Request %s %s failed: %s", request.method, request.url.path, e)
        raise UpstreamError(e) from e


def decode(response: httpx.Response, adapter: TypeAdapter[T]) -> T:
    """Validate the body of ``response`` against ``adapter``."""
    try:
        return adapter.validate_json(response.content)
    except ValidationError as e:
        raise UpstreamError(e, "unreadable response body") from e


def rejection(response: httpx.Response) -> InvalidQueryError:
    """Decode the error payload of a non-success response."""
    error = decode(response, _query_error_adapter)
    logger.warning(
        "MeiliSearch rejected %s %s (%s): %s",
        response.request.method,
        response.request.url.path,
        error.code,
        error.message,
    )
    return InvalidQueryError(error, status_code=response.status_code)


async def call(
    meili: MeiliMelo,
    method: str,
    path: str,
    adapter: TypeAdapter[T] | None,
    success: Callable[[httpx.Response], bool] = any_success,
    **kwargs: Any,
) -> T | None:
    """Build and execute a request, then decode its outcome.

    Args:
        meili: Descriptor used to build and send the request
        method: HTTP method
        path: Path below the host, e.g. ``/indexes``
        adapter: Shape of a successful body; ``None`` ignores the body
        success: Predicate selecting the success branch
        **kwargs: Passed to ``httpx.Request`` (``json``, ``params``)

    Returns:
        The decoded body, or ``None`` when no adapter is given

    Raises:
        InvalidQueryError: The backend rejected the request
        UpstreamError: The URL was invalid, sending failed, or either body
            shape was unreadable
    """
    request = build(meili, method, path, **kwargs)
    response = await execute(meili, request)
    if not success(response):
        raise rejection(response)
    if adapter is None:
        return None
    return decode(response, adapter)
