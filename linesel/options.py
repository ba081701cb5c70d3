"""Compose a selection from named options.

Table functions and CLIs usually accept a selection as several named
inputs: ``lines``, ``before``, ``after``, ``context``, plus a spec that
may be embedded in the path. ``build_selection`` applies the precedence
between them:

1. explicit ``lines`` win over a path-embedded selection;
2. ``context`` overrides ``before`` and ``after``;
3. global context is applied after the selection is built.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from linesel.ranges import validate_context
from linesel.selection import LineSelection
from linesel.types.errors import ErrorContext, MalformedNumeralError, UnsupportedInputError

_OPERATION = "build_selection"


def _amount(name: str, value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedNumeralError(
            f"Option '{name}' must be an integer, got {type(value).__name__}",
            context=ErrorContext(operation=_OPERATION, field=name),
        )
    return value


def build_selection(
    lines: Any = None,
    *,
    before: int | None = None,
    after: int | None = None,
    context: int | None = None,
    embedded: LineSelection | None = None,
) -> LineSelection:
    """Build the selection a scan should use.

    Args:
        lines: Any input ``LineSelection.parse`` accepts.
        before: Lines of context before every selected range.
        after: Lines of context after every selected range.
        context: Overrides both ``before`` and ``after`` when given.
        embedded: Selection extracted from the path (``file.py:10-20``);
            used only when ``lines`` is ``None``.

    Returns:
        A fresh selection; ``embedded`` is never mutated.
    """
    if context is not None:
        before_amount = after_amount = _amount("context", context)
    else:
        before_amount, after_amount = _amount("before", before), _amount("after", after)
    validate_context(before_amount, after_amount, operation=_OPERATION)

    if lines is None and embedded is not None and not embedded.is_all:
        selection = embedded.copy()
    else:
        selection = LineSelection.parse(lines)

    if before_amount or after_amount:
        selection.add_context(before_amount, after_amount)
    return selection


@dataclass(frozen=True)
class LineOptions:
    """Named selection options as a value."""

    lines: Any = None
    before: int | None = None
    after: int | None = None
    context: int | None = None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> LineOptions:
        """Build from named parameters, rejecting names outside the option set."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(str(name) for name in options if name not in known)
        if unknown:
            raise UnsupportedInputError(
                f"Unknown line option(s): {', '.join(unknown)}",
                context=ErrorContext(operation=_OPERATION, additional_info={"allowed": sorted(known)}),
            )
        return cls(**options)

    def build(self, embedded: LineSelection | None = None) -> LineSelection:
        return build_selection(
            self.lines,
            before=self.before,
            after=self.after,
            context=self.context,
            embedded=embedded,
        )
