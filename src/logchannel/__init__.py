"""
logchannel - severity-bound channels that turn log calls into immutable records.

Callers emit trace markers, messages, item lists or raw values on a
:class:`Channel`; each call becomes one frozen :class:`LogRecord` carrying the
caller's location and thread, and is handed synchronously to a pluggable
:class:`LogSink`.

Example:
    >>> sink = RecordingSink()
    >>> info = Channel(Severity.info, sink)
    >>> info.message("loaded", 3, "plugins")
    >>> sink.records[0].payload
    Message(text='loaded 3 plugins', kind='Message')
"""

from __future__ import annotations

from logchannel.call_site import CallSite, capture_call_site
from logchannel.channel import Channel
from logchannel.config import LogConfig, build_log_config
from logchannel.errors import ConfigError, InvalidLogConfig, UnknownSeverity
from logchannel.optional import OptionalChannel
from logchannel.payload import Message, Payload, Trace, Value
from logchannel.record import LogRecord
from logchannel.registry import ChannelRegistry, build_registry
from logchannel.rendering import (
    DescribableErrorLike,
    LoggableError,
    describe_error,
    render_item,
    render_items,
)
from logchannel.result import Failure, Result, Success
from logchannel.severity import TRACE_LEVEL, Severity
from logchannel.sink import LogSink, RecordingSink, StdlibLoggingSink


__all__ = [
    # Core
    "Channel",
    "OptionalChannel",
    "LogRecord",
    "Severity",
    "TRACE_LEVEL",
    # Payload
    "Payload",
    "Trace",
    "Message",
    "Value",
    # Call site
    "CallSite",
    "capture_call_site",
    # Rendering
    "DescribableErrorLike",
    "LoggableError",
    "describe_error",
    "render_item",
    "render_items",
    # Sinks
    "LogSink",
    "RecordingSink",
    "StdlibLoggingSink",
    # Configuration
    "LogConfig",
    "build_log_config",
    "ChannelRegistry",
    "build_registry",
    "ConfigError",
    "InvalidLogConfig",
    "UnknownSeverity",
    # Result
    "Result",
    "Success",
    "Failure",
]
