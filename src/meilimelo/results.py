from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .errors import ResultsConsumedError

T = TypeVar("T")


class Results(BaseModel, Generic[T]):
    """Decoded search response.

    Hits keep the order assigned by the backend. Iterating the results
    (``for hit in results``) can be repeated; ``consume()`` hands the hits over
    exactly once, after which the result set is exhausted.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    query: str
    exhaustive_hits: bool = Field(alias="exhaustiveNbHits")
    nb_hits: int = Field(alias="nbHits")
    exhaustive_facets: bool | None = Field(default=None, alias="exhaustiveFacetsCount")
    distribution: dict[str, dict[str, int]] | None = Field(
        default=None, alias="facetsDistribution"
    )
    limit: int
    offset: int
    duration: int = Field(alias="processingTimeMs", description="Processing time in milliseconds")
    hits: tuple[T, ...]

    _consumed: bool = PrivateAttr(default=False)

    def _check(self) -> None:
        if self._consumed:
            raise ResultsConsumedError("hits were already consumed")

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        self._check()
        return iter(self.hits)

    def __len__(self) -> int:
        return len(self.hits)

    def __getitem__(self, i: int) -> T:
        self._check()
        return self.hits[i]

    def consume(self) -> Iterator[T]:
        """Yield every hit once, in order, and exhaust the result set."""
        self._check()
        self._consumed = True
        return iter(self.hits)
