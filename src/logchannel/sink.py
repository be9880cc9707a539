"""
Sinks: the receiving end of a channel.

A sink is anything with ``log(record) -> None``. Channels call it
synchronously, exactly once per emission, from whichever thread made the
call, and never inspect the outcome. Thread safety is the sink's own
business.

Two concrete sinks ship with the package:

* :class:`RecordingSink` keeps records in memory, in arrival order.
* :class:`StdlibLoggingSink` re-emits records through the standard
  :mod:`logging` module, preserving the original caller's file, line and
  function.
"""

from __future__ import annotations

import logging
import threading
from typing import Protocol, assert_never

from logchannel.config import LogConfig
from logchannel.payload import Message, Payload, Trace, Value
from logchannel.record import LogRecord
from logchannel.rendering import render_item
from logchannel.severity import Severity


__all__ = ["LogSink", "RecordingSink", "StdlibLoggingSink", "RECORD_ATTRIBUTE"]

logger = logging.getLogger(__name__)

#: Name under which :class:`StdlibLoggingSink` attaches the original record.
RECORD_ATTRIBUTE = "logchannel_record"


class LogSink(Protocol):
    """Receives finished log records."""

    def log(self, record: LogRecord) -> None: ...


class RecordingSink:
    """Thread-safe in-memory sink.

    Records are appended in the order ``log`` is called. Intended for tests
    and for embedders that want to inspect what was emitted.

    Example:
        >>> sink = RecordingSink()
        >>> Channel(Severity.info, sink).message("ready")
        >>> sink.assert_payload_sequence([Message("ready")])
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: list[LogRecord] = []

    def log(self, record: LogRecord) -> None:
        with self._lock:
            self._records.append(record)

    @property
    def records(self) -> tuple[LogRecord, ...]:
        """Snapshot of everything recorded so far."""
        with self._lock:
            return tuple(self._records)

    def records_at(self, severity: Severity) -> tuple[LogRecord, ...]:
        """Recorded entries with exactly the given severity."""
        return tuple(record for record in self.records if record.severity == severity)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def assert_record_count(self, count: int) -> None:
        """Assert the number of recorded entries.

        Raises:
            AssertionError: If count doesn't match.
        """
        actual = len(self.records)
        match actual == count:
            case True:
                return
            case False:
                raise AssertionError(f"Expected {count} records, got {actual}")

    def assert_payload_sequence(self, expected: list[Payload]) -> None:
        """Assert that recorded payloads match ``expected`` in order.

        Raises:
            AssertionError: If recorded payloads don't match expected.
        """
        actual = [record.payload for record in self.records]
        match actual == expected:
            case True:
                return
            case False:
                raise AssertionError(f"Expected payloads {expected}, got {actual}")


def _payload_text(record: LogRecord) -> str:
    payload = record.payload
    match payload:
        case Trace():
            return record.call_site.function
        case Message(text=text):
            return text
        case Value(value=value):
            return render_item(value)
        case _:
            assert_never(payload)


class StdlibLoggingSink:
    """Bridge into the standard :mod:`logging` module.

    Each record becomes a :class:`logging.LogRecord` whose ``pathname``,
    ``lineno`` and ``funcName`` come from the channel's call site rather than
    from this class. The original record is attached under
    :data:`RECORD_ATTRIBUTE` so handlers and filters can reach the payload.
    Severity filtering is whatever the target logger is configured for.
    """

    def __init__(self, logger_name: str = "logchannel") -> None:
        self._logger = logging.getLogger(logger_name)
        logger.debug("Bridging log records to logger %r", logger_name)

    @classmethod
    def from_config(cls, config: LogConfig) -> StdlibLoggingSink:
        """Bridge to the logger named by ``config.logger_name``."""
        return cls(config.logger_name)

    @property
    def logger_name(self) -> str:
        return self._logger.name

    def log(self, record: LogRecord) -> None:
        level = record.severity.to_logging_level()
        if not self._logger.isEnabledFor(level):
            return
        call_site = record.call_site
        std_record = self._logger.makeRecord(
            self._logger.name,
            level,
            call_site.file_path,
            call_site.line,
            _payload_text(record),
            (),
            None,
            func=call_site.function,
            extra={RECORD_ATTRIBUTE: record},
        )
        self._logger.handle(std_record)
