"""Blankness rules used to elide empty values from query output."""

from __future__ import annotations

from collections.abc import Collection
from decimal import Decimal
from fractions import Fraction
from typing import Any


_NUMERIC_TYPES = (int, float, complex, Decimal, Fraction)


def is_blank(value: Any) -> bool:
    """Return True if value would leave a query parameter blank.

    Blank values are the empty string, None, the boolean False and empty
    collections, e.g. ``value=`` or ``value=false``. Numeric zero is not
    blank; see :func:`is_zero`.
    """
    if value is None or value is False:
        return True
    if isinstance(value, (str, bytes)):
        return not value
    if isinstance(value, Collection):
        return len(value) == 0
    return False


def is_zero(value: Any) -> bool:
    """Return True if value equals the zero value of its own type."""
    if isinstance(value, bool):
        return not value
    if isinstance(value, _NUMERIC_TYPES):
        return value == 0
    return is_blank(value)


def is_blank_field(value: Any) -> bool:
    """Blankness applied to record fields marked ``omitempty``."""
    return is_blank(value) or is_zero(value)
