# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Record type and sink signatures."""

from collections.abc import Callable
from dataclasses import dataclass

from .levels import LogDomain, LogLevel

PlainSink = Callable[[LogLevel, str], None]
ExtendedSink = Callable[[LogLevel, LogDomain, str], None]


@dataclass(frozen=True)
class LogRecord:
    """A single (level, domain, message) triple.

    Attributes:
        level: Severity of the record
        domain: Emitting subsystem, or None for records from the plain entry point
        message: Rendered message text without line terminator
    """

    level: LogLevel
    domain: LogDomain | None
    message: str
