"""Field metadata resolution for record types.

A field annotation uses the ``name[,modifier]*`` syntax. Recognized modifiers
are ``omitempty`` and ``-``; an annotation of exactly ``-`` hides the field.

Dataclasses carry annotations in field metadata::

    @dataclass
    class Query:
        page: int = query_field("page,omitempty", default=0)

Pydantic models carry them as ``Annotated`` markers::

    class Query(BaseModel):
        page: Annotated[int, QueryTag("page,omitempty")] = 0
"""

from __future__ import annotations

import dataclasses
import functools
import logging
from typing import Any

from pydantic import BaseModel


logger = logging.getLogger(__name__)

DEFAULT_TAG_KEY = "query"
RECORD_CACHE_SIZE = 256

OMIT_EMPTY = "omitempty"
IGNORE = "-"


@dataclasses.dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """Effective output name and modifiers of one record field."""

    name: str
    omit_empty: bool = False
    ignore: bool = False


@dataclasses.dataclass(frozen=True, slots=True)
class QueryTag:
    """Annotation marker holding a ``name[,modifier]*`` string."""

    tag: str


@dataclasses.dataclass(frozen=True, slots=True)
class RecordField:
    """A public record attribute paired with its resolved descriptor."""

    attr: str
    descriptor: FieldDescriptor


def parse_tag(declared_name: str, tag: str | None) -> FieldDescriptor:
    """Resolve the descriptor of a field from its declared name and annotation."""
    if not tag:
        return FieldDescriptor(declared_name)

    name, *modifiers = tag.split(",")
    return FieldDescriptor(
        name=name or declared_name,
        omit_empty=OMIT_EMPTY in modifiers,
        ignore=IGNORE in modifiers or name == IGNORE,
    )


def query_field(tag: str, *, tag_key: str = DEFAULT_TAG_KEY, **kwargs: Any) -> Any:
    """Build a dataclass field carrying a query annotation."""
    metadata = {**kwargs.pop("metadata", {}), tag_key: tag}
    return dataclasses.field(metadata=metadata, **kwargs)


def is_private(name: str) -> bool:
    return name.startswith("_")


def is_record(value: Any) -> bool:
    """Return True for dataclass instances and pydantic model instances."""
    if isinstance(value, BaseModel):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _pydantic_tag(metadata: list[Any]) -> str | None:
    for meta in metadata:
        if isinstance(meta, QueryTag):
            return meta.tag
    return None


def _declared_fields(cls: type, tag_key: str) -> list[tuple[str, str | None]]:
    if issubclass(cls, BaseModel):
        return [(name, _pydantic_tag(info.metadata)) for name, info in cls.model_fields.items()]
    return [(field.name, field.metadata.get(tag_key)) for field in dataclasses.fields(cls)]


@functools.lru_cache(maxsize=RECORD_CACHE_SIZE)
def record_fields(cls: type, tag_key: str = DEFAULT_TAG_KEY) -> tuple[RecordField, ...]:
    """Resolve the public fields of a record type once, in declaration order."""
    resolved: list[RecordField] = []
    for name, tag in _declared_fields(cls, tag_key):
        if is_private(name):
            logger.debug("skipping private field %s.%s", cls.__qualname__, name)
            continue
        resolved.append(RecordField(name, parse_tag(name, tag)))
    return tuple(resolved)
