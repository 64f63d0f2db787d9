"""Facet filter DSL.

``FacetBuilder`` accumulates ``attribute:value`` clauses. Clauses chained with
``or_`` widen the current group; ``and_`` closes it and opens a new one. The
backend ORs clauses within a group and ANDs the groups together.

Example:
    ```python
    facets = (
        FacetBuilder("company", "ACME Corp")
        .or_("company", "Big Corp")
        .and_("roles", "Tech")
        .build()
    )
    facets.groups  # [["company:ACME Corp", "company:Big Corp"], ["roles:Tech"]]
    ```
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .errors import BuilderConsumedError


def _clause(key: str, value: str) -> str:
    return f"{key}:{value}"


class Facets(BaseModel):
    """Finished facet filter, ready to be installed on a query."""

    model_config = ConfigDict(frozen=True)

    accumulator: tuple[tuple[str, ...], ...]

    @property
    def groups(self) -> list[list[str]]:
        """Groups as fresh lists, in the shape sent as ``facetFilters``."""
        return [list(group) for group in self.accumulator]

    def __len__(self) -> int:
        return len(self.accumulator)


class FacetBuilder:
    """Builder for facet filters.

    Calling ``build()`` produces a ``Facets`` value that can be fed to
    ``Query.facets()``. The builder cannot be used once built.
    """

    def __init__(self, key: str, value: str):
        self._current: list[str] = [_clause(key, value)]
        self._accumulator: list[list[str]] = []
        self._built = False

    @classmethod
    def start(cls, key: str, value: str) -> FacetBuilder:
        """Begin a builder with one open group containing ``key:value``."""
        return cls(key, value)

    def _check(self) -> None:
        if self._built:
            raise BuilderConsumedError("FacetBuilder was already built")

    def or_(self, key: str, value: str) -> FacetBuilder:
        """Add ``key:value`` to the currently open group."""
        self._check()
        self._current.append(_clause(key, value))
        return self

    def and_(self, key: str, value: str) -> FacetBuilder:
        """Close the open group and start a new one seeded with ``key:value``."""
        self._check()
        self._accumulator.append(self._current)
        self._current = [_clause(key, value)]
        return self

    def build(self) -> Facets:
        self._check()
        self._built = True
        self._accumulator.append(self._current)
        facets = Facets(accumulator=tuple(tuple(group) for group in self._accumulator))
        self._current, self._accumulator = [], []
        return facets
