"""url-values - flatten nested values into URL query strings"""

from ._version import version as __version__
from .errors import CyclicValueError, FlattenError, InvalidValueError
from .flattening import Scalar, ValueFlattener, flatten, is_blank, is_zero, to_query_string, to_url_values
from .key_mapping import FieldDescriptor, KeyMapper, QueryTag, parse_tag, query_field
from .mappings import URLValues, encode_query


__all__ = [
    "CyclicValueError",
    "FieldDescriptor",
    "FlattenError",
    "InvalidValueError",
    "KeyMapper",
    "QueryTag",
    "Scalar",
    "URLValues",
    "ValueFlattener",
    "__version__",
    "encode_query",
    "flatten",
    "is_blank",
    "is_zero",
    "parse_tag",
    "query_field",
    "to_query_string",
    "to_url_values",
]
