# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Sink forwarding records to the standard library ``logging`` module."""

import logging

from .levels import LogDomain, LogLevel, domain_label, level_label


class LoggingBridgeSink:
    """Sink that re-emits records through a stdlib logger.

    Lets applications route SSH diagnostics into their existing handlers
    (and lets test harnesses capture them with ``caplog``). The protocol
    levels USER, SFTP, SCP and AGENT map to ``logging.INFO``.
    """

    def __init__(self, logger: logging.Logger | None = None, name: str = "ssh_logging.records"):
        """Initialize bridge sink.

        Args:
            logger: Target logger; defaults to ``logging.getLogger(name)``
            name: Logger name used when no logger is given
        """
        self.logger = logger or logging.getLogger(name)

        # Map protocol levels to Python logging levels
        self._level_map = {
            LogLevel.DEBUG: logging.DEBUG,
            LogLevel.INFO: logging.INFO,
            LogLevel.WARN: logging.WARNING,
            LogLevel.ERROR: logging.ERROR,
        }

    def stdlib_level(self, level: LogLevel) -> int:
        """Return the stdlib logging level for a protocol level."""
        return self._level_map.get(level, logging.INFO)

    def write(self, level: LogLevel, message: str) -> None:
        """Plain sink entry."""
        self.logger.log(
            self.stdlib_level(level),
            message,
            extra={"ssh_level": level_label(level), "ssh_domain": None},
        )

    def write_ex(self, level: LogLevel, domain: LogDomain, message: str) -> None:
        """Extended sink entry."""
        self.logger.log(
            self.stdlib_level(level),
            message,
            extra={"ssh_level": level_label(level), "ssh_domain": domain_label(domain)},
        )
