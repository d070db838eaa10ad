"""Flat query value mappings and their canonical encoding."""

from .encoding import encode_query
from .values import URLValues


__all__ = ["URLValues", "encode_query"]
