"""Error taxonomy for the MeiliSearch client.

Every failure of a backend call surfaces as one of two exceptions:

- ``UpstreamError``: the request could not be sent, or the response body could
  not be decoded (success or error shape alike).
- ``InvalidQueryError``: the backend answered with a non-success status and a
  well-formed error payload.

The remaining exceptions signal misuse of the client API itself.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class QueryError(BaseModel):
    """Structured error payload returned by MeiliSearch."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: str = Field(alias="errorType")
    code: str = Field(alias="errorCode")
    message: str
    link: str = Field(alias="errorLink")


class MeiliMeloError(Exception):
    """Base class for all errors raised by meilimelo."""


class UpstreamError(MeiliMeloError):
    """Communication with the instance failed, or its response was unreadable."""

    def __init__(self, cause: BaseException, message: str = "upstream error"):
        super().__init__(f"{message}: {cause}")
        self.cause = cause


class InvalidQueryError(MeiliMeloError):
    """The crafted request was refused by the instance."""

    def __init__(self, error: QueryError, status_code: int | None = None):
        super().__init__(f"meilisearch query error [{error.code}]: {error.message}")
        self.error = error
        self.status_code = status_code


class BuilderConsumedError(MeiliMeloError, RuntimeError):
    """A facet builder was used after ``build()``."""


class QueryConsumedError(MeiliMeloError, RuntimeError):
    """A query was reused after it has been run."""


class ResultsConsumedError(MeiliMeloError, RuntimeError):
    """A result set was iterated after its hits were consumed."""


class SchemaError(MeiliMeloError, TypeError):
    """A type does not satisfy the schema capability."""
