"""Utilities for pagination header and query parameter parsing."""

from .link_header import LinkRelationParser, parse_link_header
from .query_params import extract_int_param, extract_param

__all__ = ["LinkRelationParser", "extract_int_param", "extract_param", "parse_link_header"]
