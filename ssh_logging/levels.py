# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Severity levels, domain tags and their labels."""

from enum import IntEnum


class LogLevel(IntEnum):
    """Severity attached to every record. Filtering uses numeric order."""

    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    USER = 5
    SFTP = 6
    SCP = 7
    AGENT = 8


DEFAULT_LEVEL = LogLevel.DEBUG


class LogDomain(IntEnum):
    """Subsystem that emitted a record. Informational only."""

    GENERAL = 0
    INIT = 1
    SETUP = 2
    KEX = 3
    USERAUTH = 4
    CHANNEL = 5
    SFTP = 6
    SCP = 7
    AGENT = 8
    CERT = 9


UNKNOWN_LABEL = "UNKNOWN"

_LEVEL_LABELS = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARN: "WARNING",
    LogLevel.ERROR: "ERROR",
    LogLevel.USER: "USER",
    LogLevel.SFTP: "SFTP",
    LogLevel.SCP: "SCP",
    LogLevel.AGENT: "AGENT",
}

_DOMAIN_LABELS = {domain: domain.name for domain in LogDomain}


def level_label(level: LogLevel | int) -> str:
    """Return the short uppercase label for a severity level.

    A ``LogDomain`` is never accepted here, even when it shares a spelling
    with a level (SFTP, SCP, AGENT).

    Args:
        level: Severity level or its integer value

    Returns:
        Label such as "INFO" or "WARNING", or "UNKNOWN"
    """
    if isinstance(level, LogDomain) or isinstance(level, bool):
        return UNKNOWN_LABEL
    try:
        return _LEVEL_LABELS[LogLevel(level)]
    except (ValueError, TypeError):
        return UNKNOWN_LABEL


def domain_label(domain: LogDomain | int) -> str:
    """Return the uppercase label for a domain tag, or "UNKNOWN"."""
    if isinstance(domain, LogLevel) or isinstance(domain, bool):
        return UNKNOWN_LABEL
    try:
        return _DOMAIN_LABELS[LogDomain(domain)]
    except (ValueError, TypeError):
        return UNKNOWN_LABEL


def parse_level(value: LogLevel | int | str) -> LogLevel:
    """Coerce a level name or value into a ``LogLevel``.

    Names are matched case-insensitively; "WARNING" is accepted for WARN.

    Raises:
        ValueError: If the value does not name a known level
    """
    if isinstance(value, LogDomain) or isinstance(value, bool):
        raise ValueError(f"Invalid log level: {value!r}. Must be one of {[lvl.name for lvl in LogLevel]}")
    if isinstance(value, str):
        name = value.strip().upper()
        if name == "WARNING":
            name = "WARN"
        if name in LogLevel.__members__:
            return LogLevel[name]
        if not name.isdigit():
            raise ValueError(f"Invalid log level: {value}. Must be one of {[lvl.name for lvl in LogLevel]}")
        value = int(name)
    try:
        return LogLevel(value)
    except ValueError:
        raise ValueError(
            f"Invalid log level: {value}. Must be one of {[lvl.name for lvl in LogLevel]}"
        ) from None
