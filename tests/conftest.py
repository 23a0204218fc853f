# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Shared fixtures for ssh_logging tests."""

import pytest

from ssh_logging import DebugLog, LogSettings, RecordingSink


@pytest.fixture(autouse=True)
def reset_debug_log_state():
    """Reset the process-wide facade before and after each test."""
    import ssh_logging.factory as factory
    factory._default_debug_log = None
    yield
    factory._default_debug_log = None


@pytest.fixture
def recorder():
    return RecordingSink()


@pytest.fixture
def debug_log(recorder):
    """Facade with no default sink, recording both sink shapes."""
    log = DebugLog(LogSettings(default_sink=False))
    log.set_sink(recorder.record)
    log.set_sink_ex(recorder.record_ex)
    return log
