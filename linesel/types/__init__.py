"""
linesel type definitions.

This module exports the range value type and the error hierarchy.
"""

# Core types
from .core import LineRange

# Error types
from .errors import (
    AmbiguousStructError,
    ConfigurationError,
    ErrorCode,
    ErrorContext,
    ErrorSeverity,
    LineSelError,
    LineSpecError,
    MalformedContextError,
    MalformedNumeralError,
    OutOfDomainError,
    UnresolvedSelectionError,
    UnsupportedInputError,
)

__all__ = [
    # Core types
    "LineRange",
    # Error types
    "ErrorCode",
    "ErrorSeverity",
    "ErrorContext",
    "LineSelError",
    "LineSpecError",
    "MalformedNumeralError",
    "OutOfDomainError",
    "MalformedContextError",
    "UnsupportedInputError",
    "AmbiguousStructError",
    "UnresolvedSelectionError",
    "ConfigurationError",
]
