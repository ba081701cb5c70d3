"""Reference scan loop over already-split lines.

Reading, decoding and line splitting belong to the caller; this module
only shows how a scanner drives a ``LineSelection``: query membership per
line, stop at exhaustion, resolve from-end references per input.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from linesel.selection import LineSelection
from linesel.utils.logger import logger


def iter_selected_lines(
    lines: Iterable[str],
    selection: LineSelection,
) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` for every selected line.

    Stops consuming ``lines`` as soon as no later line can match. When
    the selection holds from-end references the input is materialized to
    count it, and a resolved copy of the selection is used.
    """
    if selection.has_from_end_references():
        if not isinstance(lines, Sequence):
            lines = list(lines)
        selection = selection.resolved(len(lines))

    for line_number, line in enumerate(lines, 1):
        if selection.is_exhausted(line_number):
            logger.debug("Selection exhausted at line {}; stopping scan", line_number)
            return
        if selection.should_include(line_number):
            yield line_number, line
