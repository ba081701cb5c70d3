"""Line selection: canonical ranges plus the streaming membership queries.

A ``LineSelection`` is built once from one or more parsed specs, then
queried line by line during a forward scan::

    selection = LineSelection.parse(["10-20", {"line": 42, "context": 2}])
    for number, line in enumerate(lines, 1):
        if selection.is_exhausted(number):
            break
        if selection.should_include(number):
            emit(number, line)

Selections holding from-end references (``"+5"``) must be resolved
against the input's line count first. Use ``resolved(total_lines)`` to
derive a per-input copy so one parsed selection can serve many inputs.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable
from operator import attrgetter
from typing import Any

from linesel.constants import UNBOUNDED
from linesel.parsing.inputs import parse_ranges
from linesel.ranges import normalize_ranges, resolve_range, validate_context, widen_range
from linesel.types.core import LineRange
from linesel.types.errors import ErrorContext, UnresolvedSelectionError
from linesel.utils.logger import logger

_start_of = attrgetter("start")


class LineSelection:
    """Either "all lines" or a canonical list of line ranges.

    Resolved ranges are kept sorted, merged and non-touching after every
    mutation. Unresolved from-end ranges are held apart until
    ``resolve_from_end`` folds them in.
    """

    __slots__ = ("_match_all", "_ranges", "_from_end")

    def __init__(self, ranges: Iterable[LineRange] = (), *, match_all: bool = False) -> None:
        self._match_all = match_all
        self._ranges: list[LineRange] = []
        self._from_end: list[LineRange] = []
        if not match_all:
            self._set_ranges(ranges)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def all(cls) -> LineSelection:
        """Selection matching every line."""
        return cls(match_all=True)

    @classmethod
    def from_ranges(cls, ranges: Iterable[LineRange]) -> LineSelection:
        """Selection over exactly these ranges (an empty iterable matches nothing)."""
        return cls(ranges)

    @classmethod
    def parse(cls, value: Any) -> LineSelection:
        """Build a selection from a raw input.

        Args:
            value: ``None`` (all lines), an int, a line-spec string, a
                range record, or a list mixing those.

        Raises:
            LineSpecError: A subclass describing the first invalid input.
        """
        if value is None:
            return cls.all()
        ranges = parse_ranges(value)
        if not ranges:
            return cls.all()
        selection = cls(ranges)
        logger.debug("Parsed line selection {!r} into {}", value, selection.describe())
        return selection

    def copy(self) -> LineSelection:
        clone = LineSelection.__new__(LineSelection)
        clone._match_all = self._match_all
        clone._ranges = list(self._ranges)
        clone._from_end = list(self._from_end)
        return clone

    def _set_ranges(self, ranges: Iterable[LineRange]) -> None:
        normalized = normalize_ranges(ranges)
        self._from_end = [rng for rng in normalized if rng.is_from_end]
        self._ranges = [rng for rng in normalized if not rng.is_from_end]

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def is_all(self) -> bool:
        return self._match_all

    @property
    def ranges(self) -> tuple[LineRange, ...]:
        """Resolved canonical ranges, ascending."""
        return tuple(self._ranges)

    @property
    def from_end_ranges(self) -> tuple[LineRange, ...]:
        """Ranges still waiting for ``resolve_from_end``."""
        return tuple(self._from_end)

    def has_from_end_references(self) -> bool:
        return bool(self._from_end)

    def min_line(self) -> int:
        """First selected line; 1 when everything (or nothing) is selected."""
        if self._match_all or not self._ranges:
            return 1
        return self._ranges[0].start

    def max_line(self) -> int:
        """Last selected line; ``UNBOUNDED`` when everything (or nothing) is selected."""
        if self._match_all or not self._ranges:
            return UNBOUNDED
        return self._ranges[-1].end

    def describe(self) -> str:
        if self._match_all:
            return "all lines"
        parts = [_describe_range(rng) for rng in self._from_end + self._ranges]
        if not parts:
            return "no lines"
        return "lines " + ", ".join(parts)

    # ------------------------------------------------------------------
    # Streaming queries
    # ------------------------------------------------------------------

    def _require_resolved(self, operation: str) -> None:
        if self._from_end:
            raise UnresolvedSelectionError(
                f"Cannot {operation} with unresolved from-end references "
                f"({', '.join(rng.to_spec() for rng in self._from_end)})",
                context=ErrorContext(operation=operation),
            )

    def should_include(self, line_number: int) -> bool:
        """True when ``line_number`` falls in a selected range."""
        if self._match_all:
            return True
        self._require_resolved("should_include")
        index = bisect_right(self._ranges, line_number, key=_start_of) - 1
        return index >= 0 and self._ranges[index].end >= line_number

    def is_exhausted(self, line_number: int) -> bool:
        """True once no line at or after ``line_number`` can match."""
        if self._match_all:
            return False
        self._require_resolved("is_exhausted")
        if not self._ranges:
            return True
        return line_number > self._ranges[-1].end

    def __contains__(self, line_number: object) -> bool:
        return isinstance(line_number, int) and self.should_include(line_number)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_context(self, before: int, after: int) -> None:
        """Widen every range by ``before``/``after`` lines and re-merge.

        Applies to unresolved from-end ranges too; widening before or
        after resolution selects the same lines.
        """
        validate_context(before, after)
        if self._match_all or (before == 0 and after == 0):
            return
        self._set_ranges(widen_range(rng, before, after) for rng in self._from_end + self._ranges)
        logger.debug("Applied context -{} +{}: {}", before, after, self.describe())

    def resolve_from_end(self, total_lines: int) -> None:
        """Rewrite from-end references for an input of ``total_lines`` lines."""
        if not self._from_end:
            return
        resolved = [resolve_range(rng, total_lines) for rng in self._from_end]
        self._set_ranges(self._ranges + resolved)
        logger.debug("Resolved from-end references against {} lines: {}", total_lines, self.describe())

    def resolved(self, total_lines: int) -> LineSelection:
        """Copy of this selection resolved for one input; ``self`` is untouched."""
        clone = self.copy()
        clone.resolve_from_end(total_lines)
        return clone

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LineSelection):
            return NotImplemented
        return (
            self._match_all == other._match_all
            and self._ranges == other._ranges
            and self._from_end == other._from_end
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._match_all:
            return "LineSelection.all()"
        return f"LineSelection({[*self._from_end, *self._ranges]!r})"


def _describe_range(rng: LineRange) -> str:
    start = f"+{-rng.start}" if rng.is_from_end else str(rng.start)
    if rng.is_unbounded:
        return f"{start}-end"
    if rng.start == rng.end:
        return start
    end = f"+{-rng.end}" if rng.end < 0 else str(rng.end)
    return f"{start}-{end}"
