"""Line-spec mini-language parser.

Turns one textual token into one ``LineRange``::

    42            single line
    10-20         lines 10..20        (also 10...20)
    -50           lines 1..50         (also ...50)
    100-          lines 100..end      (also 100...)
    +3            third line from the end
    +10-          last ten lines      (also +10...)
    42 +/-3       line 42 widened by 3 on both sides
    42 -2 +5      line 42 widened by 2 before and 5 after

A ``-`` separates a range only when a digit sits right before it and a
digit, the end of the token, or a context suffix follows it. A leading
``-`` is a head marker. The context suffix starts at the first whitespace
after the range separator that is followed by ``+`` or ``-``.

Every step returns a ``ParseResult`` instead of raising, so callers that
need a best-effort parse (the path extractor) can branch on ``ok``;
``parse_line_spec`` is the raising front end.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Generic, TypeVar

from linesel.config import get_default_config
from linesel.constants import (
    FROM_END_PREFIX,
    MAX_LINE_NUMBER,
    RANGE_DASH,
    RANGE_ELLIPSIS,
    SYMMETRIC_CONTEXT_MARKERS,
    UNBOUNDED,
)
from linesel.ranges import widen_range
from linesel.types.core import LineRange
from linesel.types.errors import (
    ErrorContext,
    LineSpecError,
    MalformedContextError,
    MalformedNumeralError,
    OutOfDomainError,
    UnsupportedInputError,
)

T = TypeVar("T")

_DIGITS = frozenset(string.digits)
_OPERATION = "parse_line_spec"


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of a parse step: either a value or the error that stopped it."""

    value: T | None = None
    error: LineSpecError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising the stored error if the parse failed."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    @classmethod
    def success(cls, value: T) -> ParseResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: LineSpecError) -> ParseResult[T]:
        return cls(error=error)


def _ctx(spec: str) -> ErrorContext:
    return ErrorContext(operation=_OPERATION, spec=spec)


def _is_digits(text: str) -> bool:
    return bool(text) and all(ch in _DIGITS for ch in text)


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


def _parse_number(text: str, spec: str) -> ParseResult[int]:
    if not _is_digits(text):
        return ParseResult.failure(
            MalformedNumeralError(f"Invalid line number {text!r} in line spec {spec!r}", context=_ctx(spec))
        )
    value = int(text)
    if value > MAX_LINE_NUMBER:
        return ParseResult.failure(
            OutOfDomainError(
                f"Line number {text} in line spec {spec!r} exceeds the maximum {MAX_LINE_NUMBER}",
                context=_ctx(spec),
            )
        )
    return ParseResult.success(value)


def _parse_bound(text: str, spec: str, allow_from_end: bool) -> ParseResult[int]:
    """Parse a range bound; ``+N`` yields the from-end marker ``-N``."""
    if not text.startswith(FROM_END_PREFIX):
        return _parse_number(text, spec)

    if not allow_from_end:
        return ParseResult.failure(
            MalformedNumeralError(
                f"From-end reference {text!r} in line spec {spec!r} is disabled",
                context=_ctx(spec),
            )
        )
    offset = _parse_number(text[1:], spec)
    if not offset.ok:
        return offset
    if offset.value == 0:
        return ParseResult.failure(
            OutOfDomainError(f"From-end offset must be >= 1, got {text!r}", context=_ctx(spec))
        )
    return ParseResult.success(-offset.unwrap())


def _checked_range(start: int, end: int, spec: str) -> ParseResult[LineRange]:
    """Validate bounds before a ``LineRange`` is built."""
    if start == 0 or end == 0:
        return ParseResult.failure(
            OutOfDomainError(f"Line number must be >= 1, got 0 in {spec!r}", context=_ctx(spec))
        )
    if start > 0 and end < 0:
        return ParseResult.failure(
            OutOfDomainError(
                f"Range {spec!r} cannot start at a line and end at a from-end reference",
                context=_ctx(spec),
            )
        )
    if start < 0 and 0 < end < UNBOUNDED:
        return ParseResult.failure(
            OutOfDomainError(
                f"Range {spec!r} cannot start at a from-end reference and end at a line",
                context=_ctx(spec),
            )
        )
    if end < start:
        return ParseResult.failure(
            OutOfDomainError(f"Line range end must be >= start in {spec!r}", context=_ctx(spec))
        )
    return ParseResult.success(LineRange(start, end))


# ---------------------------------------------------------------------------
# Token structure
# ---------------------------------------------------------------------------


def _find_range_separator(text: str) -> tuple[int, int] | None:
    """Locate the range separator as ``(position, length)``."""
    pos = text.find(RANGE_ELLIPSIS)
    if pos >= 0:
        return pos, len(RANGE_ELLIPSIS)

    for pos, ch in enumerate(text):
        if ch != RANGE_DASH or pos == 0 or text[pos - 1] not in _DIGITS:
            continue
        rest = text[pos + 1 :]
        if not rest or rest[0] in _DIGITS:
            return pos, 1
        if rest[0].isspace() and rest.lstrip()[:1] in ("+", "-"):
            return pos, 1
    return None


def _find_context_boundary(text: str, search_from: int) -> int | None:
    """Index of the first whitespace (at or after ``search_from``) followed by ``+`` or ``-``."""
    for pos in range(search_from, len(text)):
        if not text[pos].isspace():
            continue
        following = text[pos:].lstrip()
        if following[:1] in ("+", "-"):
            return pos
    return None


# ---------------------------------------------------------------------------
# Context suffix
# ---------------------------------------------------------------------------


def _parse_amount(text: str, spec: str) -> ParseResult[int]:
    if not _is_digits(text):
        return ParseResult.failure(
            MalformedContextError(f"Invalid context amount {text!r} in {spec!r}", context=_ctx(spec))
        )
    return ParseResult.success(int(text))


def try_parse_context_suffix(suffix: str, spec: str | None = None) -> ParseResult[tuple[int, int]]:
    """Parse ``+/-N``, ``-/+N``, or ``-B``/``+A`` in either order into ``(before, after)``."""
    spec = suffix if spec is None else spec
    text = suffix.strip()
    if not text:
        return ParseResult.failure(MalformedContextError(f"Empty context suffix in {spec!r}", context=_ctx(spec)))

    for marker in SYMMETRIC_CONTEXT_MARKERS:
        if text.startswith(marker):
            amount = _parse_amount(text[len(marker) :].strip(), spec)
            if not amount.ok:
                return ParseResult.failure(amount.error)  # type: ignore[arg-type]
            return ParseResult.success((amount.unwrap(), amount.unwrap()))

    before: int | None = None
    after: int | None = None
    pos = 0
    while pos < len(text):
        ch = text[pos]
        if ch.isspace():
            pos += 1
            continue
        if ch not in ("+", "-"):
            return ParseResult.failure(
                MalformedContextError(f"Unexpected {ch!r} in context suffix of {spec!r}", context=_ctx(spec))
            )

        end = pos + 1
        while end < len(text) and text[end] in _DIGITS:
            end += 1
        if end == pos + 1:
            return ParseResult.failure(
                MalformedContextError(f"'{ch}' must be followed by a number in {spec!r}", context=_ctx(spec))
            )
        amount = int(text[pos + 1 : end])

        if ch == "-":
            if before is not None:
                return ParseResult.failure(
                    MalformedContextError(f"Duplicate before-context in {spec!r}", context=_ctx(spec))
                )
            before = amount
        else:
            if after is not None:
                return ParseResult.failure(
                    MalformedContextError(f"Duplicate after-context in {spec!r}", context=_ctx(spec))
                )
            after = amount
        pos = end

    return ParseResult.success((before or 0, after or 0))


def parse_context_suffix(suffix: str) -> tuple[int, int]:
    """Raising form of ``try_parse_context_suffix``."""
    return try_parse_context_suffix(suffix).unwrap()


# ---------------------------------------------------------------------------
# Line spec
# ---------------------------------------------------------------------------


def _parse_range_part(
    line_spec: str, separator: tuple[int, int] | None, spec: str, allow_from_end: bool
) -> ParseResult[LineRange]:
    if separator is not None:
        pos, length = separator
        start_text = line_spec[:pos].strip()
        end_text = line_spec[pos + length :].strip()
        if not start_text and not end_text:
            return ParseResult.failure(
                MalformedNumeralError(f"Range {spec!r} has no line numbers", context=_ctx(spec))
            )

        start, end = 1, UNBOUNDED
        if start_text:
            parsed = _parse_bound(start_text, spec, allow_from_end)
            if not parsed.ok:
                return ParseResult.failure(parsed.error)  # type: ignore[arg-type]
            start = parsed.unwrap()
        if end_text:
            parsed = _parse_bound(end_text, spec, allow_from_end)
            if not parsed.ok:
                return ParseResult.failure(parsed.error)  # type: ignore[arg-type]
            end = parsed.unwrap()
        return _checked_range(start, end, spec)

    if line_spec.startswith(RANGE_DASH):
        parsed = _parse_number(line_spec[1:].strip(), spec)
        if not parsed.ok:
            return ParseResult.failure(parsed.error)  # type: ignore[arg-type]
        return _checked_range(1, parsed.unwrap(), spec)

    parsed = _parse_bound(line_spec, spec, allow_from_end)
    if not parsed.ok:
        return ParseResult.failure(parsed.error)  # type: ignore[arg-type]
    line = parsed.unwrap()
    return _checked_range(line, line, spec)


def try_parse_line_spec(text: object, *, allow_from_end: bool | None = None) -> ParseResult[LineRange]:
    """Parse one line-spec token without raising.

    Args:
        text: The token, e.g. ``"10-20 +/-2"``.
        allow_from_end: Accept ``+N`` from-end forms. Defaults to the
            engine config.

    Returns:
        A ``ParseResult`` holding the range (context already applied) or
        the error describing why the token is invalid.
    """
    if not isinstance(text, str):
        return ParseResult.failure(
            UnsupportedInputError(
                f"Line spec must be a string, got {type(text).__name__}",
                context=ErrorContext(operation=_OPERATION),
            )
        )
    if allow_from_end is None:
        allow_from_end = get_default_config().allow_from_end

    spec = text
    trimmed = text.strip()
    if not trimmed:
        return ParseResult.failure(MalformedNumeralError("Empty line spec", context=_ctx(spec)))

    separator = _find_range_separator(trimmed)
    search_from = separator[0] + separator[1] if separator else 0
    boundary = _find_context_boundary(trimmed, search_from)

    if boundary is None:
        return _parse_range_part(trimmed, separator, spec, allow_from_end)

    line_spec = trimmed[:boundary].rstrip()
    parsed = _parse_range_part(line_spec, separator, spec, allow_from_end)
    if not parsed.ok:
        return parsed

    context = try_parse_context_suffix(trimmed[boundary:], spec)
    if not context.ok:
        return ParseResult.failure(context.error)  # type: ignore[arg-type]

    before, after = context.unwrap()
    return ParseResult.success(widen_range(parsed.unwrap(), before, after))


def parse_line_spec(text: str, *, allow_from_end: bool | None = None) -> LineRange:
    """Parse one line-spec token into a ``LineRange``.

    Raises:
        MalformedNumeralError: Non-numeric text where a number was expected.
        OutOfDomainError: Line 0, or a range ending before it starts.
        MalformedContextError: A context suffix that cannot be parsed.
        UnsupportedInputError: ``text`` is not a string.
    """
    return try_parse_line_spec(text, allow_from_end=allow_from_end).unwrap()
