"""
Logging utility for linesel.

linesel is a library, so its log records are disabled at import time
(``logger.disable("linesel")``) and nothing is written unless the host
application opts in. ``configure_logging()`` is that opt-in: it enables
the package and installs a stderr sink at the configured level.

Environment:
- LINESEL_DEBUG=true      -> DEBUG level
- LINESEL_LOG_LEVEL=LEVEL -> explicit level (overridden by LINESEL_DEBUG)
"""

import contextlib
import sys

from loguru import logger as loguru_logger

_PACKAGE = "linesel"
_sink_id: int | None = None


def configure_logging(level: str | None = None) -> int:
    """
    Enable linesel logging and route it to stderr.

    Calling it again replaces the sink installed by the previous call
    instead of adding a second one.

    Args:
        level: Minimum level to emit. Defaults to the configured level,
            or DEBUG when LINESEL_DEBUG is set.

    Returns:
        The loguru sink id.
    """
    global _sink_id

    if level is None:
        from linesel.config import get_default_config

        level = get_default_config().effective_log_level

    if _sink_id is not None:
        # The host may already have dropped it with a blanket logger.remove()
        with contextlib.suppress(ValueError):
            loguru_logger.remove(_sink_id)

    loguru_logger.enable(_PACKAGE)
    _sink_id = loguru_logger.add(
        sys.stderr,
        level=level,
        filter=_PACKAGE,
        format="{time:HH:mm:ss.SSS} | {level: <8} | {name}:{function} - {message}",
    )
    return _sink_id


# Export loguru logger for direct use
logger = loguru_logger
