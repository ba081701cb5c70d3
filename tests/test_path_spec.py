"""
Tests for splitting embedded line specs off paths.
"""

import pytest

from linesel import UNBOUNDED, LineRange, LineSelection, extract_path_spec
from linesel.parsing import find_spec_separator


class TestFindSpecSeparator:
    """Tests for locating the candidate colon."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("file.py:42", 7),
            ("file.py:-5", 7),
            ("file.py:...5", 7),
            ("a:b:c.txt:10-20", 9),
            ("file.py", None),
            ("file.py:", None),
            ("file.py:abc", None),
            ("file.py:-x", None),
            ("C:\\path.txt", None),
            ("C:/path.txt", None),
            ("C:1\\file.txt", None),
            ("C:/dir/file.py:10", 14),
            (":5", None),
            ("::5", 1),
        ],
    )
    def test_candidates(self, path, expected):
        assert find_spec_separator(path) == expected


class TestExtractPathSpec:
    """Tests for the best-effort split."""

    def test_single_line(self):
        path, selection = extract_path_spec("file.py:42")
        assert path == "file.py"
        assert selection.ranges == (LineRange(42, 42),)

    def test_context_suffix(self):
        path, selection = extract_path_spec("file.py:42 +/-3")
        assert path == "file.py"
        assert selection.ranges == (LineRange(39, 45),)

    def test_range_forms(self):
        assert extract_path_spec("src/app.py:10-20")[1].ranges == (LineRange(10, 20),)
        assert extract_path_spec("src/app.py:-5")[1].ranges == (LineRange(1, 5),)
        assert extract_path_spec("src/app.py:...5")[1].ranges == (LineRange(1, 5),)
        assert extract_path_spec("src/app.py:100-")[1].ranges == (LineRange(100, UNBOUNDED),)

    def test_from_end_spec(self):
        path, selection = extract_path_spec("app.log:+10-")
        assert path == "app.log"
        assert selection.from_end_ranges == (LineRange(-10, UNBOUNDED),)

    def test_windows_drive_not_split(self):
        path, selection = extract_path_spec("C:\\path.txt")
        assert path == "C:\\path.txt"
        assert selection.is_all

    def test_windows_drive_with_spec(self):
        path, selection = extract_path_spec("C:\\logs\\app.log:7")
        assert path == "C:\\logs\\app.log"
        assert selection.ranges == (LineRange(7, 7),)

    def test_unparseable_spec_keeps_whole_path(self):
        path, selection = extract_path_spec("file:2.txt")
        assert path == "file:2.txt"
        assert selection.is_all

    def test_invalid_range_keeps_whole_path(self):
        """Parse errors never escape the extractor."""
        path, selection = extract_path_spec("notes:20-10")
        assert path == "notes:20-10"
        assert selection == LineSelection.all()

    @pytest.mark.parametrize(
        "path",
        [
            "f.txt:99999999999999999999",
            "f.txt:99999999999999999999 +1",
            f"f.txt:{UNBOUNDED}",
            f"f.txt:1-{UNBOUNDED + 1}",
        ],
    )
    def test_oversized_line_keeps_whole_path(self, path):
        assert extract_path_spec(path) == (path, LineSelection.all())

    def test_empty_path_not_split(self):
        path, selection = extract_path_spec(":5")
        assert path == ":5"
        assert selection.is_all

    def test_no_colon(self):
        assert extract_path_spec("plain.txt") == ("plain.txt", LineSelection.all())

    def test_existing_literal_path_wins(self):
        path, selection = extract_path_spec("weird:12", exists=lambda p: p == "weird:12")
        assert path == "weird:12"
        assert selection.is_all

    def test_missing_prefix_discards_split(self):
        path, selection = extract_path_spec("gone.py:12", exists=lambda p: False)
        assert path == "gone.py:12"
        assert selection.is_all

    def test_existing_prefix_accepts_split(self):
        path, selection = extract_path_spec("here.py:12", exists=lambda p: p == "here.py")
        assert path == "here.py"
        assert selection.ranges == (LineRange(12, 12),)

    def test_fallback_is_logged(self, log_messages):
        extract_path_spec("file:2.txt")
        assert any("plain path" in message for message in log_messages)
