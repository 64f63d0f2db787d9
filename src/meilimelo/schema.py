"""Schema capability for document types.

A document type usable with search and document calls is a ``Schema``: a
pydantic model that can be built with no arguments, dumped to JSON and
validated from JSON.

MeiliSearch returns augmented copies of each hit (highlights, crops) under a
``_formatted`` key. The ``schema`` decorator declares that companion for you:

```python
@schema
class Employee(Schema):
    firstname: str = ""
    lastname: str = ""

# Employee now carries ``formatted: FormattedEmployee | None`` (wire name
# ``_formatted``) where ``FormattedEmployee`` mirrors the fields above.
```
"""

from __future__ import annotations

from copy import copy
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, create_model

from .errors import SchemaError

FORMATTED_ALIAS = "_formatted"

S = TypeVar("S", bound="Schema")


class Schema(BaseModel):
    """Base class for MeiliSearch documents."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def document(self) -> dict[str, Any]:
        """Return the JSON-ready document, without the formatted companion."""
        return self.model_dump(mode="json", by_alias=True, exclude={"formatted"})


def ensure_schema(cls: Any) -> type[Schema]:
    """Check that ``cls`` satisfies the schema capability and return it.

    Raises:
        SchemaError: If ``cls`` is not a ``Schema`` subclass or cannot be
            constructed without arguments.
    """
    if not isinstance(cls, type) or not issubclass(cls, Schema):
        raise SchemaError(f"{cls!r} is not a meilimelo Schema")
    try:
        cls()
    except ValidationError as e:
        raise SchemaError(
            f"{cls.__name__} is not default-constructible; give every field a default"
        ) from e
    return cls


def schema(cls: type[S]) -> type[S]:
    """Attach a ``Formatted<Name>`` companion field to a schema model."""
    if not isinstance(cls, type) or not issubclass(cls, BaseModel):
        raise SchemaError(f"@schema expects a pydantic model, got {cls!r}")

    fields = {
        name: (info.annotation, copy(info))
        for name, info in cls.model_fields.items()
        if name != "formatted"
    }
    formatted = create_model(
        f"Formatted{cls.__name__}",
        __base__=Schema,
        __module__=cls.__module__,
        **fields,
    )

    bases = (cls,) if issubclass(cls, Schema) else (cls, Schema)
    decorated = create_model(
        cls.__name__,
        __base__=bases,
        __module__=cls.__module__,
        __doc__=cls.__doc__,
        formatted=(Optional[formatted], Field(default=None, alias=FORMATTED_ALIAS)),
    )
    decorated.__qualname__ = cls.__qualname__
    return decorated


class Document(Schema):
    """Schemaless document: every attribute is kept as-is."""

    model_config = ConfigDict(extra="allow")

    formatted: Optional[dict[str, Any]] = Field(default=None, alias=FORMATTED_ALIAS)
