# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Diagnostic logging facade: level filter, message formatting and sink dispatch."""

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from .levels import LogDomain, LogLevel, parse_level
from .records import ExtendedSink, PlainSink
from .settings import LogSettings
from .stdout_sink import StdoutSink

logger = logging.getLogger(__name__)


class DebugLog:
    """Filters records by level, formats them and hands them to a sink.

    Logging calls never raise. A message longer than ``width - 1`` characters
    is truncated, a record with no sink installed is dropped, and an exception
    raised by a sink is reported through the stdlib ``logging`` module.

    The ``enabled`` flag is advisory: ``log`` and ``log_ex`` do not read it.
    Callers check ``is_enabled()`` to skip building expensive messages; the
    level filter decides what is delivered.

    Configure the instance before worker threads start logging. Each field
    is replaced by a single attribute assignment and the last writer wins.
    """

    def __init__(self, settings: LogSettings | None = None):
        """Initialize the facade.

        Args:
            settings: Selectors to apply; defaults to ``LogSettings()``

        Raises:
            ValueError: If the settings are invalid
        """
        # Private copy; later changes to the caller's settings do not apply
        self.settings = replace(settings or LogSettings()).validate()

        self._enabled = False
        self._min_level: LogLevel = self.settings.level
        self._sink: PlainSink | None = None
        self._sink_ex: ExtendedSink | None = None
        self.default_sink: StdoutSink | None = None

        if self.settings.default_sink:
            self.default_sink = StdoutSink(
                timestamps=self.settings.timestamps,
                use_print=self.settings.use_print,
            )
            self._sink = self.default_sink.write
            self._sink_ex = self.default_sink.write_ex

    @property
    def width(self) -> int:
        """Message buffer size; messages are bounded to ``width - 1`` characters."""
        return self.settings.width

    @property
    def level(self) -> LogLevel:
        """Current minimum level."""
        return self._min_level

    @property
    def sink(self) -> PlainSink | None:
        """Installed plain sink, or None."""
        return self._sink

    @property
    def sink_ex(self) -> ExtendedSink | None:
        """Installed extended sink, or None."""
        return self._sink_ex

    def enable(self) -> None:
        """Turn debugging on if supported."""
        if self.settings.debug:
            self._enabled = True

    def disable(self) -> None:
        """Turn debugging off."""
        if self.settings.debug:
            self._enabled = False

    def is_enabled(self) -> bool:
        """Return the advisory enable flag; always False without debug support."""
        return self.settings.debug and self._enabled

    def set_level(self, level: LogLevel | int | str) -> None:
        """Set the minimum level delivered to the sinks.

        Raises:
            ValueError: If the level is not recognized
        """
        self._min_level = parse_level(level)

    def set_sink(self, sink: PlainSink | None) -> None:
        """Install a plain sink. ``None`` keeps the current sink."""
        if sink is not None:
            self._sink = sink

    def set_sink_ex(self, sink: ExtendedSink | None) -> None:
        """Install an extended sink. ``None`` keeps the current sink."""
        if sink is not None:
            self._sink_ex = sink

    def log(self, level: LogLevel, fmt: str, *args: Any) -> None:
        """Log a printf-style message without a domain.

        Args:
            level: Severity of the record
            fmt: Format string, rendered with ``fmt % args`` when args are given
            *args: Format arguments

        As in stdlib ``logging``, a call without arguments delivers ``fmt``
        verbatim, so ``"100%% done"`` keeps both percent signs where printf
        would collapse them to one.
        """
        if not self._wanted(level):
            return

        message = self.format_message(fmt, args)

        sink = self._sink
        if sink is None:
            return
        try:
            sink(level, message)
        except Exception:
            logger.exception("Log sink %r raised; record dropped", sink)

    def log_ex(self, level: LogLevel, domain: LogDomain, fmt: str, *args: Any) -> None:
        """Log a printf-style message tagged with a domain.

        Args:
            level: Severity of the record
            domain: Subsystem emitting the record
            fmt: Format string, rendered with ``fmt % args`` when args are given
            *args: Format arguments
        """
        if not self._wanted(level):
            return

        message = self.format_message(fmt, args)

        sink = self._sink_ex
        if sink is None:
            return
        try:
            sink(level, domain, message)
        except Exception:
            logger.exception("Extended log sink %r raised; record dropped", sink)

    def format_message(self, fmt: str, args: tuple[Any, ...]) -> str:
        """Render ``fmt`` with ``args`` and bound it to ``width - 1`` characters."""
        # A single non-empty mapping feeds %(name)s placeholders, as in stdlib logging
        if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
            args = args[0]  # type: ignore[assignment]

        if args:
            try:
                message = str(fmt) % args
            except Exception as e:
                logger.debug("Could not format log message %r: %s", fmt, e)
                message = f"{fmt} (format failed: {e})"
        else:
            message = str(fmt)

        return message[: self.settings.width - 1]

    def _wanted(self, level: LogLevel) -> bool:
        if not self.settings.debug:
            return False
        try:
            return int(level) >= self._min_level
        except (TypeError, ValueError):
            return False
