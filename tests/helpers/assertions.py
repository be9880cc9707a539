# tests/helpers/assertions.py
"""Assertion helpers with readable failure messages."""

from __future__ import annotations

from logchannel import LogRecord
from tests.helpers.location import Location


def assert_call_site_at(record: LogRecord, expected: Location) -> None:
    """Assert that ``record`` was attributed to ``expected``.

    Raises:
        AssertionError: Listing every mismatching coordinate.
    """
    site = record.call_site
    actual = Location(function=site.function, file_path=site.file_path, line=site.line)
    if actual != expected:
        raise AssertionError(f"Call site mismatch: expected {expected}, got {actual}")
