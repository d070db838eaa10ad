"""Exceptions raised while flattening values into URL query values."""

from __future__ import annotations


class FlattenError(ValueError):
    """Base class for flattening failures."""

    def __init__(self, msg: str, path: str | None = None) -> None:
        super().__init__(msg if path is None else f"{msg} at {path!r}")
        self.path = path


class InvalidValueError(FlattenError):
    """The value is absent at the root or has a shape that cannot be encoded."""


class CyclicValueError(FlattenError):
    """The value refers back to one of its own containers."""
