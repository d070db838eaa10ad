"""Shape classification, blankness rules and the value flattener."""

from .blank import is_blank, is_blank_field, is_zero
from .flattener import ValueFlattener, flatten, to_query_string, to_url_values
from .shapes import Scalar, Shape, classify, scalar_text


__all__ = [
    "Scalar",
    "Shape",
    "ValueFlattener",
    "classify",
    "flatten",
    "is_blank",
    "is_blank_field",
    "is_zero",
    "scalar_text",
    "to_query_string",
    "to_url_values",
]
