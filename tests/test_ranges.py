"""
Tests for the range model: LineRange, normalization, widening, resolution.
"""

import pytest

from linesel import MAX_LINE_NUMBER, UNBOUNDED, LineRange, OutOfDomainError, normalize_ranges, widen_range
from linesel.ranges import resolve_range


class TestLineRange:
    """Tests for the LineRange value type."""

    def test_contains_is_inclusive(self):
        rng = LineRange(10, 20)
        assert rng.contains(10)
        assert rng.contains(20)
        assert not rng.contains(9)
        assert not rng.contains(21)

    def test_line_count(self):
        assert LineRange(10, 20).line_count == 11
        assert LineRange.single(5).line_count == 1

    def test_constructors(self):
        assert LineRange.single(7) == LineRange(7, 7)
        assert LineRange.head(50) == LineRange(1, 50)
        assert LineRange.tail(100) == LineRange(100, UNBOUNDED)
        assert LineRange.tail(100).is_unbounded

    def test_rejects_end_before_start(self):
        with pytest.raises(ValueError):
            LineRange(20, 10)

    def test_rejects_line_zero(self):
        with pytest.raises(ValueError):
            LineRange(0, 5)

    def test_rejects_bounds_at_sentinel(self):
        with pytest.raises(ValueError):
            LineRange(UNBOUNDED, UNBOUNDED)
        with pytest.raises(ValueError):
            LineRange(5, UNBOUNDED + 1)

    def test_rejects_mixed_marker_end(self):
        with pytest.raises(ValueError):
            LineRange(5, -1)

    def test_from_end_marker(self):
        rng = LineRange(-3, -3)
        assert rng.is_from_end
        assert not LineRange(3, 3).is_from_end

    def test_frozen(self):
        rng = LineRange(1, 2)
        with pytest.raises(AttributeError):
            rng.start = 5  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("rng", "expected"),
        [
            (LineRange(42, 42), "42"),
            (LineRange(10, 20), "10-20"),
            (LineRange(1, 50), "-50"),
            (LineRange(100, UNBOUNDED), "100-"),
            (LineRange(-3, -3), "+3"),
            (LineRange(-10, UNBOUNDED), "+10-"),
            (LineRange(-5, -2), "+5...+2"),
        ],
    )
    def test_to_spec(self, rng, expected):
        assert rng.to_spec() == expected


class TestNormalizeRanges:
    """Tests for sorting and merging."""

    def test_empty(self):
        assert normalize_ranges([]) == []

    def test_sorts(self):
        result = normalize_ranges([LineRange(30, 40), LineRange(1, 5)])
        assert result == [LineRange(1, 5), LineRange(30, 40)]

    def test_merges_overlap(self):
        result = normalize_ranges([LineRange(1, 10), LineRange(5, 20)])
        assert result == [LineRange(1, 20)]

    def test_merges_adjacent(self):
        result = normalize_ranges([LineRange(1, 10), LineRange(11, 20)])
        assert result == [LineRange(1, 20)]

    def test_keeps_gap_of_one(self):
        result = normalize_ranges([LineRange(1, 10), LineRange(12, 20)])
        assert result == [LineRange(1, 10), LineRange(12, 20)]

    def test_contained_range_absorbed(self):
        result = normalize_ranges([LineRange(1, 100), LineRange(10, 20)])
        assert result == [LineRange(1, 100)]

    def test_unbounded_absorbs_later(self):
        result = normalize_ranges([LineRange(50, UNBOUNDED), LineRange(60, 70), LineRange(1, 2)])
        assert result == [LineRange(1, 2), LineRange(50, UNBOUNDED)]

    def test_from_end_markers_kept_apart(self):
        """A marker's position is unknown, so it never merges with line ranges."""
        result = normalize_ranges([LineRange(1, 3), LineRange(-5, UNBOUNDED), LineRange(-7, -6)])
        assert result == [LineRange(-7, UNBOUNDED), LineRange(1, 3)]


class TestWidenRange:
    """Tests for context widening."""

    def test_symmetric(self):
        assert widen_range(LineRange(42, 42), 3, 3) == LineRange(39, 45)

    def test_clamps_start_at_one(self):
        assert widen_range(LineRange(2, 5), 10, 0) == LineRange(1, 5)

    def test_after_is_not_clamped(self):
        assert widen_range(LineRange(2, 5), 0, 1000) == LineRange(2, 1005)

    def test_end_at_last_line_saturates(self):
        widened = widen_range(LineRange.single(MAX_LINE_NUMBER), 2, 5)
        assert widened == LineRange(MAX_LINE_NUMBER - 2, UNBOUNDED)
        assert widened.is_unbounded

    def test_unbounded_end_saturates(self):
        assert widen_range(LineRange(10, UNBOUNDED), 2, 5) == LineRange(8, UNBOUNDED)

    def test_near_unbounded_saturates(self):
        assert widen_range(LineRange(10, UNBOUNDED - 1), 0, 5).end == UNBOUNDED

    def test_repeated_application_clamps_each_pass(self):
        once = widen_range(LineRange(10, 10), 2, 0)
        twice = widen_range(once, 2, 0)
        assert twice == LineRange(6, 10)

    def test_zero_is_identity(self):
        assert widen_range(LineRange(10, 20), 0, 0) == LineRange(10, 20)

    def test_negative_amount_rejected(self):
        with pytest.raises(OutOfDomainError):
            widen_range(LineRange(10, 20), -1, 0)

    def test_from_end_widening(self):
        assert widen_range(LineRange(-3, -3), 2, 1) == LineRange(-5, -2)

    def test_from_end_after_past_last_line_is_unbounded(self):
        assert widen_range(LineRange(-2, -2), 0, 5) == LineRange(-2, UNBOUNDED)


class TestResolveRange:
    """Tests for from-end resolution of a single range."""

    def test_last_line(self):
        assert resolve_range(LineRange(-1, -1), 100) == LineRange(100, 100)

    def test_tenth_from_end(self):
        assert resolve_range(LineRange(-10, -10), 100) == LineRange(91, 91)

    def test_tail_of_last_lines(self):
        assert resolve_range(LineRange(-10, UNBOUNDED), 100) == LineRange(91, UNBOUNDED)

    def test_clamps_before_first_line(self):
        assert resolve_range(LineRange(-10, -8), 3) == LineRange(1, 1)

    def test_ordinary_range_untouched(self):
        assert resolve_range(LineRange(5, 9), 100) == LineRange(5, 9)

    def test_negative_total_rejected(self):
        with pytest.raises(OutOfDomainError):
            resolve_range(LineRange(-1, -1), -1)
