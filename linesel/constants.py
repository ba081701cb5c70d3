"""Shared constants and helpers for linesel.

Centralizes the unbounded-end sentinel, the mini-language tokens, the
structured field names, and timezone-aware datetime helpers.
"""

import sys
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime.

    Usable directly as a ``default_factory`` in dataclass fields.
    """
    return datetime.now(timezone.utc)


# End-of-input sentinel. Tail ranges ("100-") end here, and
# arithmetic on range ends saturates at this value instead of growing past it.
UNBOUNDED: int = sys.maxsize

# Largest line a spec may name; the sentinel itself always means "end of input".
MAX_LINE_NUMBER: int = UNBOUNDED - 1

# Mini-language tokens
RANGE_DASH = "-"
RANGE_ELLIPSIS = "..."
FROM_END_PREFIX = "+"
SYMMETRIC_CONTEXT_MARKERS: tuple[str, ...] = ("+/-", "-/+")
PATH_SEPARATORS = "/\\"

# Structured spec fields, in resolution order of the groups they belong to
STRUCT_FIELDS: frozenset[str] = frozenset(
    {"start", "stop", "line", "lines", "before", "after", "context", "inclusive"}
)
