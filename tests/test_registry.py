"""
Tests for ChannelRegistry construction.
"""

from __future__ import annotations

import pytest

from logchannel import (
    ChannelRegistry,
    LogConfig,
    Message,
    RecordingSink,
    Severity,
    build_registry,
)
from tests.helpers import assert_call_site_at, here


def _registry(minimum: Severity, sink: RecordingSink) -> ChannelRegistry:
    return build_registry(LogConfig(minimum_severity=minimum), sink)


class TestBuildRegistry:
    """Tests for severity thresholds."""

    @pytest.mark.parametrize("minimum", list(Severity))
    def test_enabled_at_or_above_minimum(self, minimum: Severity, sink: RecordingSink) -> None:
        """Exactly the severities >= minimum get a channel."""
        registry = _registry(minimum, sink)
        assert registry.enabled_severities == tuple(s for s in Severity if s >= minimum)

    def test_channel_severity_matches_slot(self, sink: RecordingSink) -> None:
        """Each slot's channel is bound to that slot's severity."""
        registry = _registry(Severity.trace, sink)
        for severity in Severity:
            channel = registry.channel_for(severity).channel
            assert channel is not None
            assert channel.severity is severity
            assert channel.sink is sink

    def test_disabled_levels_emit_nothing(self, sink: RecordingSink) -> None:
        """Calls below the minimum are dropped; others are delivered."""
        registry = _registry(Severity.warning, sink)
        registry.trace.trace()
        registry.debug.message("debug", 1)
        registry.info.value({"k": "v"})
        registry.warning.message("disk at", 91, "%")
        registry.error.message("disk full")
        sink.assert_payload_sequence([Message("disk at 91 %"), Message("disk full")])
        assert [record.severity for record in sink.records] == [Severity.warning, Severity.error]

    def test_call_site_through_registry(self, sink: RecordingSink) -> None:
        """Registry access does not change the recorded call site."""
        registry = _registry(Severity.debug, sink)
        expected = here().next_line()
        registry.debug.message("a", "b")
        assert_call_site_at(sink.records[0], expected)

    def test_named_minimum(self, sink: RecordingSink) -> None:
        """Registries can be built from a config parsed from names."""
        registry = build_registry(LogConfig.model_validate({"minimum_severity": "error"}), sink)
        assert registry.enabled_severities == (Severity.error,)
