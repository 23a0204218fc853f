# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Default sink writing one human-readable line per record to stdout."""

import sys
from collections.abc import Callable
from datetime import datetime

from .levels import LogDomain, LogLevel, domain_label, level_label

LINE_TERMINATOR = "\r\n"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S "
# Fixed timestamp buffer, including the terminator
TIMESTAMP_BUFFER_SIZE = 24


class StdoutSink:
    """Sink that writes ``[LEVEL] message`` lines to stdout.

    Lines end with CR+LF regardless of platform so output stays aligned on
    terminals in raw mode. Write errors are ignored.

    Plain records render as ``<ts>[<level>] <msg>`` and extended records as
    ``<ts>[<level>](<domain>) <msg>``, where ``<ts>`` is the local time as
    ``YYYY-MM-DD HH:MM:SS `` or empty.
    """

    def __init__(
        self,
        timestamps: bool = True,
        use_print: bool = False,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialize stdout sink.

        Args:
            timestamps: Prefix each line with the local wall-clock time
            use_print: Emit through ``print`` instead of ``sys.stdout.write``
            clock: Source of the current local time (default: ``datetime.now``)
        """
        self.timestamps = timestamps
        self.use_print = use_print
        self._clock = clock or datetime.now

    def timestamp(self) -> str:
        """Render the timestamp prefix, or an empty string if unavailable."""
        if not self.timestamps:
            return ""
        try:
            ts = self._clock().strftime(TIMESTAMP_FORMAT)
        except (OverflowError, OSError, ValueError):
            return ""
        if len(ts) >= TIMESTAMP_BUFFER_SIZE:
            return ""
        return ts

    def format_line(self, level: LogLevel, message: str, domain: LogDomain | None = None) -> str:
        """Build the full output line, terminator included."""
        if domain is None:
            return f"{self.timestamp()}[{level_label(level)}] {message}{LINE_TERMINATOR}"
        return f"{self.timestamp()}[{level_label(level)}]({domain_label(domain)}) {message}{LINE_TERMINATOR}"

    def write(self, level: LogLevel, message: str) -> None:
        """Plain sink entry."""
        self._emit(self.format_line(level, message))

    def write_ex(self, level: LogLevel, domain: LogDomain, message: str) -> None:
        """Extended sink entry."""
        self._emit(self.format_line(level, message, domain))

    def _emit(self, line: str) -> None:
        try:
            if self.use_print:
                print(line, end="", flush=True)
            else:
                sys.stdout.write(line)
                sys.stdout.flush()
        except (OSError, ValueError):
            pass
