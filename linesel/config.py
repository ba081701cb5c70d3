"""Engine configuration.

Settings are read from environment variables into an ``EngineConfig``.
A process-wide default instance is built lazily on first use; tests and
embedding applications can swap it with ``set_default_config``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from linesel.types.errors import ConfigurationError, ErrorContext

LOG_LEVELS: tuple[str, ...] = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class EngineConfig:
    """Settings that shape parsing and logging."""

    allow_from_end: bool = True
    debug: bool = False
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level {self.log_level!r}",
                user_message=f"Log level must be one of: {', '.join(LOG_LEVELS)}.",
                context=ErrorContext(operation="config", field="log_level"),
            )

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level.upper()

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> EngineConfig:
        """Build a config from LINESEL_* environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            allow_from_end=_parse_bool(env, "LINESEL_ALLOW_FROM_END", default=True),
            debug=_parse_bool(env, "LINESEL_DEBUG", default=False),
            log_level=env.get("LINESEL_LOG_LEVEL", "INFO").strip() or "INFO",
        )


def _parse_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"{name}={raw!r} is not a boolean",
        user_message=f"{name} must be true or false.",
        context=ErrorContext(operation="config", field=name),
    )


_default_config: EngineConfig | None = None


def get_default_config() -> EngineConfig:
    """Return the process-wide config, reading the environment on first use."""
    global _default_config
    if _default_config is None:
        _default_config = EngineConfig.from_env()
    return _default_config


def set_default_config(config: EngineConfig | None) -> None:
    """Replace the process-wide config; ``None`` re-reads the environment next time."""
    global _default_config
    _default_config = config
