# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""SSH diagnostic logging facade.

Filters records by severity, formats them into single lines and hands them
to a replaceable sink. The default sink writes
``YYYY-MM-DD HH:MM:SS [LEVEL](DOMAIN) message`` lines ending in CR+LF to
stdout.

Example:
    >>> import ssh_logging
    >>> from ssh_logging import LogDomain, LogLevel
    >>>
    >>> ssh_logging.set_level(LogLevel.INFO)
    >>> ssh_logging.log(LogLevel.INFO, "connected to %s:%d", "example.org", 22)
    >>> ssh_logging.log_ex(LogLevel.ERROR, LogDomain.SFTP, "open failed: %s", "denied")
    >>>
    >>> # Capture records in tests
    >>> from ssh_logging import RecordingSink
    >>> recorder = RecordingSink()
    >>> ssh_logging.set_sink(recorder.record)
    >>> ssh_logging.log(LogLevel.WARN, "slow peer")
    >>> recorder.has_record("slow peer")
    True
"""

__version__ = "0.1.0"

from .bridge_sink import LoggingBridgeSink
from .debug_log import DebugLog
from .factory import (
    create_debug_log,
    disable,
    enable,
    get_debug_log,
    is_enabled,
    log,
    log_ex,
    set_default_debug_log,
    set_level,
    set_sink,
    set_sink_ex,
)
from .levels import DEFAULT_LEVEL, LogDomain, LogLevel, domain_label, level_label, parse_level
from .records import ExtendedSink, LogRecord, PlainSink
from .recording_sink import RecordingSink
from .settings import DEFAULT_LOG_WIDTH, LogSettings
from .stdout_sink import StdoutSink

__all__ = [
    "__version__",
    # Levels and domains
    "DEFAULT_LEVEL",
    "LogDomain",
    "LogLevel",
    "domain_label",
    "level_label",
    "parse_level",
    # Facade
    "DebugLog",
    "LogSettings",
    "DEFAULT_LOG_WIDTH",
    "create_debug_log",
    "get_debug_log",
    "set_default_debug_log",
    "enable",
    "disable",
    "is_enabled",
    "set_level",
    "set_sink",
    "set_sink_ex",
    "log",
    "log_ex",
    # Sinks
    "PlainSink",
    "ExtendedSink",
    "LogRecord",
    "StdoutSink",
    "RecordingSink",
    "LoggingBridgeSink",
]
