"""
Pre-built channels, one per severity.

The registry is an ordinary immutable value: build it once at startup and
hand it to whoever needs to log. Severities below the configured minimum are
represented by an empty :class:`~logchannel.optional.OptionalChannel`, so
calls at those levels cost nothing beyond the attribute lookup.

Example:
    >>> config = LogConfig(minimum_severity="debug", logger_name="app")
    >>> registry = build_registry(config, StdlibLoggingSink.from_config(config))
    >>> registry.info.message("listening on", port)
    >>> registry.trace.trace()  # disabled, no-op
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from logchannel.channel import Channel
from logchannel.config import LogConfig
from logchannel.optional import OptionalChannel
from logchannel.severity import Severity
from logchannel.sink import LogSink


__all__ = ["ChannelRegistry", "build_registry"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChannelRegistry:
    """One optional channel per severity."""

    trace: OptionalChannel
    debug: OptionalChannel
    info: OptionalChannel
    warning: OptionalChannel
    error: OptionalChannel

    def channel_for(self, severity: Severity) -> OptionalChannel:
        """Return the optional channel bound to ``severity``."""
        match severity:
            case Severity.trace:
                return self.trace
            case Severity.debug:
                return self.debug
            case Severity.info:
                return self.info
            case Severity.warning:
                return self.warning
            case Severity.error:
                return self.error

    @property
    def enabled_severities(self) -> tuple[Severity, ...]:
        return tuple(severity for severity in Severity if self.channel_for(severity).is_enabled)


def _optional_channel(severity: Severity, config: LogConfig, sink: LogSink) -> OptionalChannel:
    if severity < config.minimum_severity:
        return OptionalChannel(None)
    return OptionalChannel(Channel(severity=severity, sink=sink))


def build_registry(config: LogConfig, sink: LogSink) -> ChannelRegistry:
    """Create channels for every severity at or above ``config.minimum_severity``.

    All channels share ``sink``.
    """
    registry = ChannelRegistry(
        trace=_optional_channel(Severity.trace, config, sink),
        debug=_optional_channel(Severity.debug, config, sink),
        info=_optional_channel(Severity.info, config, sink),
        warning=_optional_channel(Severity.warning, config, sink),
        error=_optional_channel(Severity.error, config, sink),
    )
    logger.debug(
        "Built channel registry: minimum_severity=%s enabled=%s",
        config.minimum_severity.name,
        [severity.name for severity in registry.enabled_severities],
    )
    return registry
