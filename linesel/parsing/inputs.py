"""Dispatch raw selection inputs to the matching parser.

Accepted shapes: an integer (one line), a string (line-spec mini-language),
a structured record (mapping or ``StructuredSpec``), or a list/tuple of
those. ``None`` is handled by ``LineSelection.parse`` as "all lines".
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from linesel.constants import MAX_LINE_NUMBER
from linesel.parsing.spec_string import parse_line_spec
from linesel.parsing.structured import StructuredSpec, parse_structured_spec
from linesel.types.core import LineRange
from linesel.types.errors import ErrorContext, OutOfDomainError, UnsupportedInputError

_OPERATION = "parse_selection"


def _parse_line_number(value: int) -> LineRange:
    if value < 1:
        raise OutOfDomainError(
            f"Line number must be >= 1, got {value}",
            context=ErrorContext(operation=_OPERATION),
        )
    if value > MAX_LINE_NUMBER:
        raise OutOfDomainError(
            f"Line number exceeds the maximum {MAX_LINE_NUMBER}, got {value}",
            context=ErrorContext(operation=_OPERATION),
        )
    return LineRange.single(value)


def _parse_scalar(value: Any) -> list[LineRange]:
    if isinstance(value, bool):
        raise UnsupportedInputError(
            "A boolean is not a line selection",
            context=ErrorContext(operation=_OPERATION),
        )
    if isinstance(value, int):
        return [_parse_line_number(value)]
    if isinstance(value, str):
        return [parse_line_spec(value)]
    if isinstance(value, (StructuredSpec, Mapping)):
        return parse_structured_spec(value)
    raise UnsupportedInputError(
        f"Invalid type for line selection: {type(value).__name__}",
        context=ErrorContext(operation=_OPERATION),
    )


def parse_ranges(value: Any) -> list[LineRange]:
    """Parse one raw input into unmerged ranges.

    List elements are parsed independently and pooled; nested lists and
    null elements are rejected.
    """
    if isinstance(value, (list, tuple)):
        ranges: list[LineRange] = []
        for index, item in enumerate(value):
            if item is None or isinstance(item, (list, tuple)):
                raise UnsupportedInputError(
                    f"List element {index} must be a line number, line spec or range record, "
                    f"got {type(item).__name__}",
                    context=ErrorContext(operation=_OPERATION, additional_info={"index": index}),
                )
            ranges.extend(_parse_scalar(item))
        return ranges
    return _parse_scalar(value)
