"""Key path joining and field metadata resolution."""

from .mapper import KeyMapper
from .tags import FieldDescriptor, QueryTag, RecordField, is_record, parse_tag, query_field, record_fields


__all__ = [
    "FieldDescriptor",
    "KeyMapper",
    "QueryTag",
    "RecordField",
    "is_record",
    "parse_tag",
    "query_field",
    "record_fields",
]
