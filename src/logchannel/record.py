"""The immutable unit handed to a sink."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from logchannel.call_site import CallSite
from logchannel.payload import Payload
from logchannel.severity import Severity


__all__ = ["LogRecord"]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class LogRecord:
    """One log event: what was logged, how severe it is, and where it came from.

    Records are frozen and hold no references to the channel that built
    them, so sinks may keep them or hand them to other threads freely.

    Attributes:
        severity: Severity of the channel that produced the record.
        payload: Trace marker, finished message, or raw value.
        call_site: Coordinates and thread of the original caller.
        timestamp: UTC creation time of the record.
    """

    severity: Severity
    payload: Payload
    call_site: CallSite
    timestamp: datetime = field(default_factory=_utc_now, compare=False)

    @property
    def calling_function(self) -> str:
        return self.call_site.function

    @property
    def calling_file_path(self) -> str:
        return self.call_site.file_path

    @property
    def calling_file_line(self) -> int:
        return self.call_site.line

    @property
    def calling_thread_id(self) -> int:
        return self.call_site.thread_id
