"""Shape classification of runtime values.

Every value the flattener meets is normalized into one ``Shape`` so that the
traversal dispatches over a closed set of cases.
"""

from __future__ import annotations

import asyncio
import dataclasses
import datetime as dt
import enum
import io
import queue
import types
from collections.abc import AsyncIterator, Awaitable, Iterator, Mapping, Sequence, Set
from typing import Any

from url_values.key_mapping import is_record


class Shape(enum.Enum):
    ABSENT = "absent"
    RECORD = "record"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"
    UNSUPPORTED = "unsupported"


_TEXT_TYPES = (str, bytes, bytearray)

# Function-like, channel-like and stream-like values carry no data to encode.
_UNSUPPORTED_TYPES = (
    types.ModuleType,
    Iterator,
    AsyncIterator,
    Awaitable,
    queue.Queue,
    queue.SimpleQueue,
    asyncio.Queue,
    io.IOBase,
)


@dataclasses.dataclass(frozen=True, slots=True)
class Scalar:
    """Signal that a value is a leaf; the caller decides its key."""

    value: Any
    text: str


def classify(value: Any) -> Shape:
    """Return the shape of value."""
    if value is None:
        return Shape.ABSENT
    if is_record(value):
        return Shape.RECORD
    if isinstance(value, Mapping):
        return Shape.MAPPING
    if isinstance(value, _TEXT_TYPES):
        return Shape.SCALAR
    if isinstance(value, (Sequence, Set)):
        return Shape.SEQUENCE
    if isinstance(value, _UNSUPPORTED_TYPES) or callable(value):
        return Shape.UNSUPPORTED
    return Shape.SCALAR


def _float_text(value: float) -> str:
    text = repr(value)
    return text.removesuffix(".0")


def scalar_text(value: Any) -> str:
    """Return the natural textual form of a scalar value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, enum.Enum):
        return scalar_text(value.value)
    if isinstance(value, float):
        return _float_text(value)
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, (dt.datetime, dt.date, dt.time)):
        return value.isoformat()
    return str(value)


def sort_key(value: Any) -> tuple[str, str]:
    """Total order for mapping keys and set members, ties broken by type name."""
    return scalar_text(value), type(value).__qualname__


def elements(value: Sequence[Any] | Set[Any]) -> list[Any]:
    """Return the elements of an ordered sequence; sets come out in textual order."""
    if isinstance(value, Set):
        return sorted(value, key=sort_key)
    return list(value)
