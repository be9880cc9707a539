# tests/conftest.py
"""Global PyTest fixtures for the test-suite."""

from __future__ import annotations

import logging
from typing import Generator

import pytest

from logchannel import Channel, RecordingSink, Severity


@pytest.fixture
def sink() -> RecordingSink:
    """Fresh in-memory sink per test."""
    return RecordingSink()


@pytest.fixture
def info_channel(sink: RecordingSink) -> Channel:
    """Info-level channel writing to ``sink``."""
    return Channel(severity=Severity.info, sink=sink)


@pytest.fixture
def bridge_logger_name() -> Generator[str, None, None]:
    """Name of a logger dedicated to one test, reset afterwards."""
    name = "logchannel.tests.bridge"
    yield name
    bridge = logging.getLogger(name)
    bridge.setLevel(logging.NOTSET)
    bridge.handlers.clear()
