# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for the default stdout sink."""

from datetime import datetime
from io import StringIO
from unittest.mock import patch

from ssh_logging import LogDomain, LogLevel, StdoutSink


def fixed_clock():
    return datetime(2024, 6, 1, 12, 34, 56)


class TestTimestamp:
    """Tests for timestamp rendering."""

    def test_format(self):
        """Test the timestamp is local time with a trailing space."""
        sink = StdoutSink(clock=fixed_clock)

        ts = sink.timestamp()

        assert ts == "2024-06-01 12:34:56 "
        assert len(ts) == 20

    def test_disabled(self):
        """Test timestamps can be turned off."""
        sink = StdoutSink(timestamps=False, clock=fixed_clock)

        assert sink.timestamp() == ""

    def test_clock_failure_leaves_timestamp_empty(self):
        """Test a failing local-time conversion yields no timestamp."""
        def broken_clock():
            raise OSError("localtime failed")

        sink = StdoutSink(clock=broken_clock)

        assert sink.timestamp() == ""

    def test_overflowing_timestamp_is_dropped(self):
        """Test a rendered timestamp too large for its buffer is left empty."""
        class WideTime:
            def strftime(self, fmt):
                return "x" * 24

        sink = StdoutSink(clock=WideTime)

        assert sink.timestamp() == ""


class TestStdoutSink:
    """Tests for line output."""

    @patch('sys.stdout', new_callable=StringIO)
    def test_plain_line(self, mock_stdout):
        """Test a plain record renders without a domain segment."""
        sink = StdoutSink(clock=fixed_clock)

        sink.write(LogLevel.INFO, "hello")

        assert mock_stdout.getvalue() == "2024-06-01 12:34:56 [INFO] hello\r\n"

    @patch('sys.stdout', new_callable=StringIO)
    def test_extended_line(self, mock_stdout):
        """Test an extended record includes the domain label."""
        sink = StdoutSink(clock=fixed_clock)

        sink.write_ex(LogLevel.ERROR, LogDomain.AGENT, "oops")

        assert mock_stdout.getvalue() == "2024-06-01 12:34:56 [ERROR](AGENT) oops\r\n"

    @patch('sys.stdout', new_callable=StringIO)
    def test_without_timestamp(self, mock_stdout):
        """Test lines start with the level when timestamps are off."""
        sink = StdoutSink(timestamps=False)

        sink.write(LogLevel.WARN, "slow")

        assert mock_stdout.getvalue() == "[WARNING] slow\r\n"

    @patch('sys.stdout', new_callable=StringIO)
    def test_print_primitive(self, mock_stdout):
        """Test the print primitive writes the same line."""
        sink = StdoutSink(timestamps=False, use_print=True)

        sink.write_ex(LogLevel.DEBUG, LogDomain.SFTP, "x")

        assert mock_stdout.getvalue() == "[DEBUG](SFTP) x\r\n"

    @patch('sys.stdout', new_callable=StringIO)
    def test_unknown_level_label(self, mock_stdout):
        """Test an unrecognized level renders as UNKNOWN."""
        sink = StdoutSink(timestamps=False)

        sink.write(99, "odd")

        assert mock_stdout.getvalue() == "[UNKNOWN] odd\r\n"

    @patch('sys.stdout', new_callable=StringIO)
    def test_one_line_per_record(self, mock_stdout):
        """Test each record ends with exactly one CR+LF."""
        sink = StdoutSink(timestamps=False)

        sink.write(LogLevel.INFO, "first")
        sink.write(LogLevel.INFO, "second")

        assert mock_stdout.getvalue().split("\r\n") == ["[INFO] first", "[INFO] second", ""]

    def test_write_error_is_ignored(self):
        """Test a closed stdout does not raise."""
        closed = StringIO()
        closed.close()
        sink = StdoutSink(timestamps=False)

        with patch('sys.stdout', closed):
            sink.write(LogLevel.ERROR, "lost")
            sink.write_ex(LogLevel.ERROR, LogDomain.GENERAL, "lost")

    def test_os_error_is_ignored(self):
        """Test an OSError from the stream does not raise."""
        class BrokenStream:
            def write(self, data):
                raise OSError("broken pipe")

            def flush(self):
                pass

        sink = StdoutSink(timestamps=False)

        with patch('sys.stdout', BrokenStream()):
            sink.write(LogLevel.INFO, "lost")
