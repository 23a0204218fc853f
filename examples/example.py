#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Example usage of the ssh_logging module.

This script demonstrates the level filter, the built-in stdout sink and
custom sinks.
"""

import logging

import ssh_logging
from ssh_logging import (
    DebugLog,
    LoggingBridgeSink,
    LogDomain,
    LogLevel,
    LogSettings,
    RecordingSink,
)


def main():
    """Demonstrate logging functionality."""

    print("=" * 60)
    print("SSH Logging Examples")
    print("=" * 60)
    print()

    # Example 1: Process-wide facade with the built-in sink
    print("Example 1: Default stdout sink at INFO level")
    print("-" * 60)
    ssh_logging.enable()
    ssh_logging.set_level(LogLevel.INFO)

    ssh_logging.log(LogLevel.INFO, "connecting to %s:%d", "example.org", 22)
    ssh_logging.log_ex(LogLevel.WARN, LogDomain.KEX, "peer offered %d algorithms", 3)
    ssh_logging.log(LogLevel.DEBUG, "This debug message won't appear (below INFO level)")

    # Skip expensive message construction when nobody is listening
    if ssh_logging.is_enabled():
        ssh_logging.log_ex(LogLevel.INFO, LogDomain.SFTP, "listing: %s", ", ".join(["a", "b", "c"]))
    print()

    # Example 2: Narrow buffer truncates long messages
    print("Example 2: Width 16, no timestamps")
    print("-" * 60)
    narrow = DebugLog(LogSettings(width=16, timestamps=False))
    narrow.log(LogLevel.ERROR, "0123456789ABCDEFGHIJ")
    print()

    # Example 3: Recording sink for testing
    print("Example 3: RecordingSink")
    print("-" * 60)
    recorder = RecordingSink()
    test_log = DebugLog(LogSettings(default_sink=False))
    test_log.set_sink(recorder.record)
    test_log.set_sink_ex(recorder.record_ex)

    test_log.log(LogLevel.INFO, "Test message 1")
    test_log.log_ex(LogLevel.ERROR, LogDomain.AGENT, "agent socket missing")

    print(f"Total records captured: {len(recorder.records)}")
    print(f"Has 'Test message 1': {recorder.has_record('Test message 1')}")
    for rec in recorder.records:
        domain = f"({rec.domain.name})" if rec.domain is not None else ""
        print(f"  [{ssh_logging.level_label(rec.level)}]{domain} {rec.message}")
    print()

    # Example 4: Route records into the standard logging module
    print("Example 4: LoggingBridgeSink")
    print("-" * 60)
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    bridge = LoggingBridgeSink(name="example.ssh")
    ssh_logging.set_sink(bridge.write)
    ssh_logging.set_sink_ex(bridge.write_ex)
    ssh_logging.log_ex(LogLevel.ERROR, LogDomain.USERAUTH, "publickey rejected for %s", "alice")
    print()

    print("=" * 60)
    print("Examples completed")
    print("=" * 60)


if __name__ == "__main__":
    main()
