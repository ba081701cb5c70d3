"""
linesel - Sparse line selection for line-oriented text scans.

Provides:
- A compact line-spec mini-language ("42", "10-20", "-50", "100-", "42 +/-3")
- Structured range records ({"start": 10, "stop": 20, "inclusive": False})
- Path-embedded specs ("src/app.py:42")
- Canonical range merging with context expansion and from-end references
- Streaming membership and early-exit queries for a forward line scan
"""

from loguru import logger as _logger

from .config import EngineConfig, get_default_config, set_default_config
from .constants import MAX_LINE_NUMBER, UNBOUNDED
from .options import LineOptions, build_selection
from .parsing import (
    ParseResult,
    StructuredSpec,
    extract_path_spec,
    parse_line_spec,
    parse_structured_spec,
    try_parse_line_spec,
)
from .ranges import normalize_ranges, widen_range
from .scan import iter_selected_lines
from .selection import LineSelection
from .types import (
    AmbiguousStructError,
    ConfigurationError,
    LineRange,
    LineSelError,
    LineSpecError,
    MalformedContextError,
    MalformedNumeralError,
    OutOfDomainError,
    UnresolvedSelectionError,
    UnsupportedInputError,
)
from .utils.logger import configure_logging

__version__ = "0.1.0"

_logger.disable("linesel")

__all__ = [
    "MAX_LINE_NUMBER",
    "UNBOUNDED",
    "AmbiguousStructError",
    "ConfigurationError",
    "EngineConfig",
    "LineOptions",
    "LineRange",
    "LineSelError",
    "LineSelection",
    "LineSpecError",
    "MalformedContextError",
    "MalformedNumeralError",
    "OutOfDomainError",
    "ParseResult",
    "StructuredSpec",
    "UnresolvedSelectionError",
    "UnsupportedInputError",
    "build_selection",
    "configure_logging",
    "extract_path_spec",
    "get_default_config",
    "iter_selected_lines",
    "normalize_ranges",
    "parse_line_spec",
    "parse_structured_spec",
    "set_default_config",
    "try_parse_line_spec",
    "widen_range",
]
