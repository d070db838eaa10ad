"""Flatten nested values into multi-valued URL query mappings.

A record such as::

    Request(
        logo=Logo(
            url="https://example.com/favicon.ico",
            dimension=Dimension(width=100, height=120, extra={"shade": "45%"}),
        ),
        source="https://example.com",
    )

flattens to keys joined along the path to each leaf::

    logo.dimension.extra.shade=45%25&logo.dimension.height=120&logo.dimension.width=100
    &logo.url=https%3A%2F%2Fexample.com%2Ffavicon.ico&source=https%3A%2F%2Fexample.com
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from url_values.errors import CyclicValueError, InvalidValueError
from url_values.flattening.blank import is_blank, is_blank_field
from url_values.flattening.shapes import Scalar, Shape, classify, elements, scalar_text, sort_key
from url_values.key_mapping import KeyMapper, record_fields
from url_values.key_mapping.tags import DEFAULT_TAG_KEY
from url_values.mappings import URLValues


if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence, Set


logger = logging.getLogger(__name__)


class ValueFlattener:
    """Turn records, mappings and sequences into :class:`URLValues`."""

    def __init__(self, sep: str = ".", tag_key: str = DEFAULT_TAG_KEY) -> None:
        """Create a flattener.

        Parameters
        ----------
        sep
            Separator placed between key path segments.
        tag_key
            Dataclass field metadata key holding ``name[,modifier]*`` annotations.
        """
        super().__init__()
        if not tag_key:
            msg = "tag_key must not be empty"
            raise ValueError(msg)
        self._mapper = KeyMapper(sep=sep)
        self.tag_key = tag_key

    @property
    def sep(self) -> str:
        return self._mapper.sep

    def flatten(self, value: Any) -> URLValues | Scalar:
        """Flatten value, or return a :class:`Scalar` when value is a leaf.

        Raises
        ------
        InvalidValueError
            If value is None or has an unsupported shape.
        CyclicValueError
            If value contains itself.
        """
        return self._visit(value, None, set())

    def to_url_values(self, value: Any) -> URLValues:
        """Flatten a record, mapping or sequence into :class:`URLValues`."""
        result = self.flatten(value)
        if isinstance(result, Scalar):
            msg = f"invalid value: {type(value).__name__} has no keys to encode"
            logger.debug(msg)
            raise InvalidValueError(msg)
        return result

    def _visit(self, value: Any, path: str | None, active: set[int]) -> URLValues | Scalar:
        shape = classify(value)
        if shape is Shape.ABSENT:
            # Absent values below the root are skipped by their container.
            msg = "invalid value: None"
            logger.debug(msg)
            raise InvalidValueError(msg, path)
        if shape is Shape.SCALAR:
            return Scalar(value, scalar_text(value))
        if shape is Shape.UNSUPPORTED:
            msg = f"unsupported value of type {type(value).__name__}"
            logger.debug("%s at %r", msg, path)
            raise InvalidValueError(msg, path)

        marker = id(value)
        if marker in active:
            msg = f"cyclic reference to {type(value).__name__}"
            logger.debug("%s at %r", msg, path)
            raise CyclicValueError(msg, path)
        active.add(marker)
        try:
            if shape is Shape.RECORD:
                return self._visit_record(value, path, active)
            if shape is Shape.MAPPING:
                return self._visit_mapping(value, path, active)
            return self._visit_sequence(value, path, active)
        finally:
            active.discard(marker)

    def _visit_record(self, record: Any, path: str | None, active: set[int]) -> URLValues:
        values = URLValues()
        for field in record_fields(type(record), self.tag_key):
            descriptor = field.descriptor
            if descriptor.ignore:
                logger.debug("skipping ignored field %r", self._mapper.child(path, field.attr))
                continue

            field_path = self._mapper.child(path, descriptor.name)
            field_value = getattr(record, field.attr)
            if field_value is None:
                logger.debug("skipping absent field %r", field_path)
                continue

            nested = self._visit(field_value, field_path, active)
            if isinstance(nested, Scalar):
                if descriptor.omit_empty and is_blank_field(field_value):
                    logger.debug("omitting empty field %r", field_path)
                    continue
                values.add(descriptor.name, nested.text)
            else:
                values.merge(nested, descriptor.name, self._mapper)
        return values

    def _visit_mapping(self, mapping: Mapping[Any, Any], path: str | None, active: set[int]) -> URLValues:
        values = URLValues()
        for key, item in sorted(mapping.items(), key=lambda entry: sort_key(entry[0])):
            if item is None:
                continue
            name = scalar_text(key)
            nested = self._visit(item, self._mapper.child(path, name), active)
            if isinstance(nested, Scalar):
                if not is_blank(item):
                    values.add(name, nested.text)
            else:
                values.merge(nested, name, self._mapper)
        return values

    def _visit_sequence(self, sequence: Sequence[Any] | Set[Any], path: str | None, active: set[int]) -> URLValues:
        values = URLValues()
        for index, item in enumerate(elements(sequence)):
            if item is None:
                continue
            name = str(index)
            nested = self._visit(item, self._mapper.child(path, name), active)
            if isinstance(nested, Scalar):
                if not is_blank(item):
                    values.add(name, nested.text)
            elif nested:
                # Nested elements collapse into a single encoded sub-query.
                values.add(name, nested.encode())
        return values


_default_flattener = ValueFlattener()


def flatten(value: Any) -> URLValues | Scalar:
    """Flatten value with the default separator and annotation key."""
    return _default_flattener.flatten(value)


def to_url_values(value: Any) -> URLValues:
    """Flatten value into :class:`URLValues` with the default settings."""
    return _default_flattener.to_url_values(value)


def to_query_string(value: Any) -> str:
    """Flatten value and render its canonical query string."""
    return to_url_values(value).encode()
