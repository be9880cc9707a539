"""
Tests for Severity ordering, name parsing and logging-level mapping.
"""

from __future__ import annotations

import logging

import pytest

from logchannel import TRACE_LEVEL, Severity, UnknownSeverity
from tests.helpers import expect_failure, expect_success


class TestSeverityOrder:
    """Severities form a total order."""

    def test_declared_order(self) -> None:
        """trace < debug < info < warning < error."""
        assert Severity.trace < Severity.debug < Severity.info < Severity.warning < Severity.error

    def test_sorted_matches_declaration(self) -> None:
        """Sorting severities yields declaration order."""
        shuffled = [Severity.error, Severity.trace, Severity.warning, Severity.info, Severity.debug]
        assert sorted(shuffled) == list(Severity)


class TestSeverityParse:
    """Tests for Severity.parse."""

    @pytest.mark.parametrize("name", ["info", "INFO", "  Info "])
    def test_parse_is_case_insensitive(self, name: str) -> None:
        """Names match regardless of case and surrounding whitespace."""
        assert expect_success(Severity.parse(name)) is Severity.info

    def test_parse_unknown(self) -> None:
        """Unknown names produce UnknownSeverity carrying the input."""
        error = expect_failure(Severity.parse("verbose"))
        assert error == UnknownSeverity(name="verbose")
        assert error.kind == "UnknownSeverity"


class TestLoggingLevels:
    """Tests for the mapping onto standard logging levels."""

    @pytest.mark.parametrize(
        ("severity", "level"),
        [
            (Severity.trace, TRACE_LEVEL),
            (Severity.debug, logging.DEBUG),
            (Severity.info, logging.INFO),
            (Severity.warning, logging.WARNING),
            (Severity.error, logging.ERROR),
        ],
    )
    def test_to_logging_level(self, severity: Severity, level: int) -> None:
        """Each severity maps onto its logging counterpart."""
        assert severity.to_logging_level() == level

    def test_trace_level_name_registered(self) -> None:
        """The trace level displays as TRACE."""
        assert logging.getLevelName(TRACE_LEVEL) == "TRACE"
