"""Canonical query string encoding of multi-valued mappings."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlencode


if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


def as_pairs(values: Mapping[str, Iterable[str]]) -> list[tuple[str, str]]:
    """Expand a multi-valued mapping into key-sorted ``(key, value)`` pairs."""
    return [(key, value) for key in sorted(values) for value in values[key]]


def encode_query(values: Mapping[str, Iterable[str]]) -> str:
    """Encode values as ``key=value`` pairs sorted by key and joined with ``&``.

    Keys and values are percent-encoded with ``quote_plus`` rules, so spaces
    become ``+`` and every reserved character is escaped.
    """
    return urlencode(as_pairs(values))
