"""Multi-valued mapping of query keys to string values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import override

from url_values.key_mapping import KeyMapper
from url_values.mappings.encoding import encode_query


class URLValues(MutableMapping[str, list[str]]):
    """Dict-like mapping from a query key to every value produced for it.

    Values of one key keep the order they were added in and are never
    de-duplicated, matching repeated query parameters.
    """

    def __init__(self, data: Mapping[str, Iterable[str]] | None = None) -> None:
        super().__init__()
        self._data: dict[str, list[str]] = {}
        if data is not None:
            for key, values in data.items():
                self.extend(key, values)

    @override
    def __getitem__(self, key: str) -> list[str]:
        return self._data[key]

    @override
    def __setitem__(self, key: str, value: list[str]) -> None:
        self._data[key] = list(value)

    @override
    def __delitem__(self, key: str) -> None:
        del self._data[key]

    @override
    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    @override
    def __len__(self) -> int:
        return len(self._data)

    def add(self, key: str, value: str) -> None:
        """Append a value under key."""
        self._data.setdefault(key, []).append(value)

    def extend(self, key: str, values: Iterable[str]) -> None:
        """Append several values under key, keeping their order."""
        self._data.setdefault(key, []).extend(values)

    def get_first(self, key: str) -> str:
        """Return the first value stored under key, or an empty string."""
        values = self._data.get(key)
        return values[0] if values else ""

    def merge(self, other: Mapping[str, Iterable[str]], prefix: str, mapper: KeyMapper | None = None) -> None:
        """Merge every entry of other, re-keyed as ``prefix<sep>key``."""
        mapper = mapper or KeyMapper()
        for key, values in other.items():
            self.extend(mapper.join(prefix, key), values)

    def encode(self) -> str:
        """Render the canonical ``a=1&b=2`` query string."""
        return encode_query(self)

    def to_dict(self) -> dict[str, list[str]]:
        return {key: list(values) for key, values in self._data.items()}

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"