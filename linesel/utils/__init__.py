"""
linesel utility modules.

- Logging (loguru, disabled until the host opts in)
"""

from .logger import configure_logging, logger

__all__ = [
    "configure_logging",
    "logger",
]
