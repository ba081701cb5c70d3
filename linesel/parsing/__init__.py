"""
Line selection parsers.

- Mini-language strings ("10-20", "42 +/-3")
- Structured range records ({"start": 10, "stop": 20})
- Mixed inputs (ints, strings, records, lists)
- Path-embedded specs ("file.py:42")
"""

from .inputs import parse_ranges
from .path_spec import extract_path_spec, find_spec_separator
from .spec_string import (
    ParseResult,
    parse_context_suffix,
    parse_line_spec,
    try_parse_context_suffix,
    try_parse_line_spec,
)
from .structured import StructuredSpec, parse_structured_spec

__all__ = [
    "ParseResult",
    "StructuredSpec",
    "extract_path_spec",
    "find_spec_separator",
    "parse_context_suffix",
    "parse_line_spec",
    "parse_ranges",
    "parse_structured_spec",
    "try_parse_context_suffix",
    "try_parse_line_spec",
]
