"""Range arithmetic: canonical merging, context widening, from-end resolution.

All functions are pure and return new ``LineRange`` values. The canonical
form produced by ``normalize_ranges`` is sorted by start with no two ranges
overlapping or touching (``next.start <= prev.end + 1`` always merges).
"""

from __future__ import annotations

from collections.abc import Iterable
from operator import attrgetter

from linesel.constants import UNBOUNDED
from linesel.types.core import LineRange
from linesel.types.errors import ErrorContext, OutOfDomainError


def normalize_ranges(ranges: Iterable[LineRange]) -> list[LineRange]:
    """Sort and merge ranges into canonical form.

    From-end markers and line ranges are merged separately: a marker's
    position is unknown until resolution, so it can never absorb or be
    absorbed by an ordinary range. Markers come first in the result.

    The output depends only on the multiset of input ranges, never on
    their order.
    """
    markers: list[LineRange] = []
    lines: list[LineRange] = []
    for rng in ranges:
        (markers if rng.is_from_end else lines).append(rng)
    return _merge(markers) + _merge(lines)


def _merge(ranges: list[LineRange]) -> list[LineRange]:
    if not ranges:
        return []

    ordered = sorted(ranges, key=attrgetter("start"))
    merged = [ordered[0]]
    for current in ordered[1:]:
        last = merged[-1]
        if current.start <= last.end + 1:
            if current.end > last.end:
                merged[-1] = LineRange(last.start, current.end)
        else:
            merged.append(current)
    return merged


def validate_context(before: int, after: int, operation: str = "add_context") -> None:
    """Reject negative context amounts."""
    for name, amount in (("before", before), ("after", after)):
        if amount < 0:
            raise OutOfDomainError(
                f"Context '{name}' must be >= 0, got {amount}",
                context=ErrorContext(operation=operation, field=name),
            )


def widen_range(rng: LineRange, before: int, after: int) -> LineRange:
    """Widen a range by ``before`` lines at the start and ``after`` at the end.

    Ordinary ranges clamp their start at line 1; the end saturates at
    ``UNBOUNDED``. From-end markers widen in from-end space: the start
    moves further from the end (clamped later, at resolution) and an end
    pushed past the last line becomes ``UNBOUNDED``.
    """
    validate_context(before, after, operation="widen_range")

    if rng.is_unbounded:
        end = UNBOUNDED
    elif rng.is_from_end:
        end = rng.end + after
        if end >= 0:
            end = UNBOUNDED
    else:
        end = min(rng.end + after, UNBOUNDED)

    if rng.is_from_end:
        start = rng.start - before
    else:
        start = max(1, rng.start - before)

    return LineRange(start, end)


def resolve_range(rng: LineRange, total_lines: int) -> LineRange:
    """Turn from-end markers into line numbers for an input of ``total_lines``.

    Marker ``-k`` becomes ``total_lines - k + 1``, clamped to at least 1.
    Ordinary ranges are returned unchanged.
    """
    if total_lines < 0:
        raise OutOfDomainError(
            f"Total line count must be >= 0, got {total_lines}",
            context=ErrorContext(operation="resolve_from_end", field="total_lines"),
        )
    if not rng.is_from_end:
        return rng

    start = max(1, total_lines + rng.start + 1)
    if rng.is_unbounded:
        return LineRange(start, UNBOUNDED)
    return LineRange(start, max(1, total_lines + rng.end + 1))
