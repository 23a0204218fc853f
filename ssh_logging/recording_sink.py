# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""In-memory sink for tests."""

from .levels import LogDomain, LogLevel
from .records import LogRecord


class RecordingSink:
    """Sink that stores records in memory without output.

    Useful for testing to verify logging behavior without cluttering test output.
    Install ``record`` with ``set_sink`` and ``record_ex`` with ``set_sink_ex``;
    both append to the same list.
    """

    def __init__(self) -> None:
        self.records: list[LogRecord] = []

    def record(self, level: LogLevel, message: str) -> None:
        """Plain sink: store a record without a domain."""
        self.records.append(LogRecord(level=level, domain=None, message=message))

    def record_ex(self, level: LogLevel, domain: LogDomain, message: str) -> None:
        """Extended sink: store a record with its domain."""
        self.records.append(LogRecord(level=level, domain=domain, message=message))

    def clear(self) -> None:
        """Clear all stored records (useful for testing)."""
        self.records.clear()

    def get_records(
        self,
        level: LogLevel | None = None,
        domain: LogDomain | None = None,
    ) -> list[LogRecord]:
        """Get stored records, optionally filtered by level and domain.

        Args:
            level: Optional level to filter by
            domain: Optional domain to filter by

        Returns:
            List of matching records in arrival order
        """
        return [
            rec
            for rec in self.records
            if (level is None or rec.level == level) and (domain is None or rec.domain == domain)
        ]

    def has_record(self, message: str, level: LogLevel | None = None) -> bool:
        """Check if a record containing ``message`` (substring match) exists."""
        return any(message in rec.message for rec in self.get_records(level=level))
