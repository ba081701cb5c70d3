"""Structured range records.

A record names its lines with a closed set of fields::

    {"start": 10, "stop": 20}                  lines 10..20
    {"start": 1, "stop": 11, "inclusive": False}  lines 1..10
    {"start": 100}                             lines 100..end
    {"stop": 50}                               lines 1..50
    {"line": 42, "context": 3}                 lines 39..45
    {"lines": [3, 7], "after": 1}              lines 3..4 and 7..8

The first resolvable group wins: start/stop, then line, then lines.
``context`` overrides ``before`` and ``after``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields
from typing import Any

from linesel.constants import MAX_LINE_NUMBER, STRUCT_FIELDS, UNBOUNDED
from linesel.ranges import validate_context, widen_range
from linesel.types.core import LineRange
from linesel.types.errors import (
    AmbiguousStructError,
    ErrorContext,
    MalformedNumeralError,
    OutOfDomainError,
    UnsupportedInputError,
)

_OPERATION = "parse_structured_spec"


def _ctx(field_name: str | None = None) -> ErrorContext:
    return ErrorContext(operation=_OPERATION, field=field_name)


def _int_field(name: str, value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedNumeralError(
            f"Field '{name}' must be an integer, got {type(value).__name__}",
            context=_ctx(name),
        )
    return value


def _lines_entry(value: Any) -> int:
    if value is None:
        raise MalformedNumeralError("Field 'lines' cannot contain null entries", context=_ctx("lines"))
    return _int_field("lines", value)  # type: ignore[return-value]


def _require_line(name: str, value: int) -> int:
    if value < 1:
        raise OutOfDomainError(f"Field '{name}' must be >= 1, got {value}", context=_ctx(name))
    return _below_limit(name, value)


def _below_limit(name: str, value: int) -> int:
    if value > MAX_LINE_NUMBER:
        raise OutOfDomainError(
            f"Field '{name}' exceeds the maximum line number {MAX_LINE_NUMBER}, got {value}",
            context=_ctx(name),
        )
    return value


@dataclass(frozen=True)
class StructuredSpec:
    """One structured line selection record."""

    start: int | None = None
    stop: int | None = None
    line: int | None = None
    lines: tuple[int, ...] | None = None
    before: int | None = None
    after: int | None = None
    context: int | None = None
    inclusive: bool = True

    def __post_init__(self) -> None:
        for name in ("start", "stop", "line", "before", "after", "context"):
            _int_field(name, getattr(self, name))
        if not isinstance(self.inclusive, bool):
            raise UnsupportedInputError(
                f"Field 'inclusive' must be a boolean, got {type(self.inclusive).__name__}",
                context=_ctx("inclusive"),
            )
        if self.lines is not None:
            if isinstance(self.lines, (str, bytes)) or not isinstance(self.lines, Sequence):
                raise UnsupportedInputError(
                    f"Field 'lines' must be a list of integers, got {type(self.lines).__name__}",
                    context=_ctx("lines"),
                )
            object.__setattr__(self, "lines", tuple(_lines_entry(v) for v in self.lines))

    @classmethod
    def from_mapping(cls, record: Mapping[str, Any]) -> StructuredSpec:
        """Build from a mapping, rejecting field names outside the known set."""
        unknown = sorted(str(key) for key in record if key not in STRUCT_FIELDS)
        if unknown:
            raise AmbiguousStructError(
                f"Unrecognized range record field(s): {', '.join(unknown)}",
                context=ErrorContext(
                    operation=_OPERATION,
                    additional_info={"allowed": sorted(STRUCT_FIELDS)},
                ),
            )
        values = {key: value for key, value in record.items() if value is not None}
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Fields that are set, in declaration order."""
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                result[f.name] = list(value) if f.name == "lines" else value
        return result

    @property
    def effective_context(self) -> tuple[int, int]:
        """``(before, after)`` with ``context`` taking precedence."""
        if self.context is not None:
            before = after = self.context
        else:
            before, after = self.before or 0, self.after or 0
        validate_context(before, after, operation=_OPERATION)
        return before, after

    def base_ranges(self) -> list[LineRange]:
        """Ranges named by the record, before context is applied."""
        if self.start is not None:
            start = _require_line("start", self.start)
            if self.stop is None:
                return [LineRange(start, UNBOUNDED)]
            stop = _below_limit("stop", self.stop if self.inclusive else self.stop - 1)
            if stop < start:
                relation = ">=" if self.inclusive else ">"
                raise OutOfDomainError(
                    f"Line range stop must be {relation} start, got {self.start}-{self.stop}",
                    context=_ctx("stop"),
                )
            return [LineRange(start, stop)]

        if self.stop is not None:
            stop = _below_limit("stop", self.stop if self.inclusive else self.stop - 1)
            if stop < 1:
                raise OutOfDomainError(
                    f"Line range stop must leave at least line 1, got {self.stop}"
                    + ("" if self.inclusive else " (exclusive)"),
                    context=_ctx("stop"),
                )
            return [LineRange(1, stop)]

        if self.line is not None:
            return [LineRange.single(_require_line("line", self.line))]

        if self.lines:
            return [LineRange.single(_require_line("lines", value)) for value in self.lines]

        raise UnsupportedInputError(
            "Range record must specify start/stop, line, or lines",
            context=_ctx(),
        )

    def to_ranges(self) -> list[LineRange]:
        """Ranges named by the record with its context applied."""
        ranges = self.base_ranges()
        before, after = self.effective_context
        if before or after:
            ranges = [widen_range(rng, before, after) for rng in ranges]
        return ranges


def parse_structured_spec(record: StructuredSpec | Mapping[str, Any]) -> list[LineRange]:
    """Parse one structured record into its ranges (context applied, not yet merged)."""
    if isinstance(record, StructuredSpec):
        return record.to_ranges()
    if isinstance(record, Mapping):
        return StructuredSpec.from_mapping(record).to_ranges()
    raise UnsupportedInputError(
        f"Range record must be a mapping, got {type(record).__name__}",
        context=_ctx(),
    )
