# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Factory functions and the process-wide facade instance."""

from typing import Any

from .debug_log import DebugLog
from .levels import LogDomain, LogLevel
from .records import ExtendedSink, PlainSink
from .settings import LogSettings

_default_debug_log: DebugLog | None = None


def create_debug_log(settings: LogSettings | None = None) -> DebugLog:
    """Factory function to create a facade instance.

    Args:
        settings: Selectors to apply. If None, use ``LogSettings()``
            defaults. Pass ``LogSettings.from_env()`` to honour the
            SSH_LOG_* environment variables.

    Returns:
        DebugLog instance

    Raises:
        ValueError: If the settings are invalid

    Example:
        >>> log = create_debug_log(LogSettings(timestamps=False))
        >>> log.set_level(LogLevel.INFO)
        >>> log.log(LogLevel.INFO, "channel %d opened", 3)
    """
    return DebugLog(settings)


def get_debug_log() -> DebugLog:
    """Return the process-wide facade, creating it with default settings on first use."""
    global _default_debug_log
    if _default_debug_log is None:
        _default_debug_log = create_debug_log()
    return _default_debug_log


def set_default_debug_log(debug_log: DebugLog) -> None:
    """Replace the process-wide facade."""
    global _default_debug_log
    _default_debug_log = debug_log


def enable() -> None:
    """Turn debugging on for the process-wide facade."""
    get_debug_log().enable()


def disable() -> None:
    """Turn debugging off for the process-wide facade."""
    get_debug_log().disable()


def is_enabled() -> bool:
    """Return the advisory enable flag of the process-wide facade."""
    return get_debug_log().is_enabled()


def set_level(level: LogLevel | int | str) -> None:
    """Set the minimum level of the process-wide facade."""
    get_debug_log().set_level(level)


def set_sink(sink: PlainSink | None) -> None:
    """Install a plain sink on the process-wide facade; None is ignored."""
    get_debug_log().set_sink(sink)


def set_sink_ex(sink: ExtendedSink | None) -> None:
    """Install an extended sink on the process-wide facade; None is ignored."""
    get_debug_log().set_sink_ex(sink)


def log(level: LogLevel, fmt: str, *args: Any) -> None:
    """Log a printf-style message through the process-wide facade."""
    get_debug_log().log(level, fmt, *args)


def log_ex(level: LogLevel, domain: LogDomain, fmt: str, *args: Any) -> None:
    """Log a domain-tagged printf-style message through the process-wide facade."""
    get_debug_log().log_ex(level, domain, fmt, *args)
