# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Selectors controlling the facade and its default sink."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .levels import DEFAULT_LEVEL, LogLevel, parse_level

DEFAULT_LOG_WIDTH = 120
MIN_LOG_WIDTH = 2

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


def _env_bool(environ: Mapping[str, str], key: str, default: bool) -> bool:
    """Read a boolean flag; unrecognized values give ``default``."""
    value = environ.get(key)
    if value is None:
        return default
    value_lower = value.lower()
    if value_lower in _TRUE_VALUES:
        return True
    if value_lower in _FALSE_VALUES:
        return False
    return default


def _env_int(environ: Mapping[str, str], key: str, default: int) -> int:
    try:
        return int(environ[key])
    except (KeyError, ValueError):
        return default


@dataclass
class LogSettings:
    """Configuration for a ``DebugLog``.

    Attributes:
        debug: Master switch; when False every entry point is a no-op
        default_sink: Install the built-in stdout sinks at creation
        timestamps: Prefix default-sink lines with the local time
        use_print: Default sink emits through ``print`` instead of ``sys.stdout.write``
        width: Message buffer size; messages are bounded to ``width - 1`` characters
        level: Initial minimum level
    """

    debug: bool = True
    default_sink: bool = True
    timestamps: bool = True
    use_print: bool = False
    width: int = DEFAULT_LOG_WIDTH
    level: LogLevel = DEFAULT_LEVEL

    def validate(self) -> "LogSettings":
        """Check values and normalize ``level``.

        Returns:
            The same settings instance

        Raises:
            ValueError: If width is too small or level is not recognized
        """
        if not isinstance(self.width, int) or self.width < MIN_LOG_WIDTH:
            raise ValueError(f"Invalid log width: {self.width}. Must be an integer >= {MIN_LOG_WIDTH}")
        self.level = parse_level(self.level)
        return self

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "LogSettings":
        """Create settings from environment variables.

        Opt-in only: the process-wide facade starts from ``LogSettings()``
        defaults. Pass the result to ``create_debug_log`` to apply it.

        Reads SSH_LOG_DEBUG, SSH_LOG_NO_DEFAULT_SINK, SSH_LOG_NO_TIMESTAMP,
        SSH_LOG_PRINTF, SSH_LOG_WIDTH and SSH_LOG_LEVEL. Unparseable values
        fall back to the defaults.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            Validated LogSettings instance
        """
        env = environ if environ is not None else os.environ

        width = _env_int(env, "SSH_LOG_WIDTH", DEFAULT_LOG_WIDTH)
        if width < MIN_LOG_WIDTH:
            width = DEFAULT_LOG_WIDTH

        try:
            level = parse_level(env.get("SSH_LOG_LEVEL", DEFAULT_LEVEL))
        except ValueError:
            level = DEFAULT_LEVEL

        return cls(
            debug=_env_bool(env, "SSH_LOG_DEBUG", True),
            default_sink=not _env_bool(env, "SSH_LOG_NO_DEFAULT_SINK", False),
            timestamps=not _env_bool(env, "SSH_LOG_NO_TIMESTAMP", False),
            use_print=_env_bool(env, "SSH_LOG_PRINTF", False),
            width=width,
            level=level,
        ).validate()
