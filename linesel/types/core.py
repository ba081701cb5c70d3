"""
Core types for line selection.

``LineRange`` is the value every parser produces and every selection
stores: a closed interval over 1-based line numbers.
"""

from dataclasses import dataclass

from linesel.constants import UNBOUNDED


@dataclass(frozen=True, order=True)
class LineRange:
    """Represents an inclusive range of lines.

    Positive bounds are ordinary 1-based line numbers. Negative bounds are
    unresolved from-end markers (``-1`` is the last line) that only become
    line numbers once the total line count of an input is known. ``end``
    may be ``UNBOUNDED`` to mean "through the end of input".
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start == 0 or self.end == 0:
            raise ValueError("line numbers are 1-based, 0 is not a line")
        if self.start > 0 and self.end < 0:
            raise ValueError("a range cannot start at a line and end at a from-end marker")
        if self.start >= UNBOUNDED or self.end > UNBOUNDED:
            raise ValueError("line numbers must stay below the UNBOUNDED sentinel")
        if self.end < self.start:
            raise ValueError("end must be >= start")

    @classmethod
    def single(cls, line: int) -> "LineRange":
        """Range covering exactly one line."""
        return cls(line, line)

    @classmethod
    def head(cls, end: int) -> "LineRange":
        """Lines 1..end."""
        return cls(1, end)

    @classmethod
    def tail(cls, start: int) -> "LineRange":
        """Lines start..end of input."""
        return cls(start, UNBOUNDED)

    @property
    def is_unbounded(self) -> bool:
        return self.end == UNBOUNDED

    @property
    def is_from_end(self) -> bool:
        """True while the range still holds an unresolved from-end marker."""
        return self.start < 0

    @property
    def line_count(self) -> int:
        """Number of lines in this range."""
        return self.end - self.start + 1

    def contains(self, line: int) -> bool:
        """Check if a line number is within this range (inclusive)."""
        return self.start <= line <= self.end

    def to_spec(self) -> str:
        """Render the range in line-spec mini-language form."""
        start = _spec_bound(self.start)
        if self.is_unbounded:
            return f"{start}-"
        if self.start == self.end:
            return start
        if self.is_from_end:
            return f"{start}...{_spec_bound(self.end)}"
        if self.start == 1:
            return f"-{self.end}"
        return f"{start}-{self.end}"


def _spec_bound(value: int) -> str:
    return f"+{-value}" if value < 0 else str(value)
