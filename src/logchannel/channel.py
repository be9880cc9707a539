"""
Severity-bound log channels.

A :class:`Channel` converts each call into exactly one
:class:`~logchannel.record.LogRecord` and forwards it to its sink:

* :meth:`Channel.trace` - ``Trace()`` payload, "execution reached here".
* :meth:`Channel.message` - ``Message(text)``; a lone string is recorded
  verbatim, several items are rendered and joined first.
* :meth:`Channel.message_list` - the sequence form of ``message``.
* :meth:`Channel.value` - ``Value(value)``, handed to the sink unrendered.

Every operation accepts an optional ``call_site``. When omitted, the
channel captures its direct caller's location. Internal delegation always
passes the captured :class:`~logchannel.call_site.CallSite` along instead of
capturing again.

Channels are frozen and hold no mutable state; share them across threads
freely. The sink is shared, not owned, and is called synchronously. Its
exceptions reach the caller unchanged.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from logchannel.call_site import CallSite, capture_call_site
from logchannel.payload import Message, Payload, Trace, Value
from logchannel.record import LogRecord
from logchannel.rendering import render_items
from logchannel.severity import Severity
from logchannel.sink import LogSink


__all__ = ["Channel"]


@dataclass(frozen=True)
class Channel:
    """Emission endpoint bound to one severity and one sink.

    Attributes:
        severity: Severity stamped on every record this channel builds.
        sink: Destination for the records. Not owned; may be shared by many
            channels of different severities.
    """

    severity: Severity
    sink: LogSink

    def trace(self, *, call_site: CallSite | None = None) -> None:
        """Record that execution reached the caller's location."""
        site = call_site if call_site is not None else capture_call_site()
        self._emit(Trace(), site)

    def message(
        self,
        *items: object,
        separator: str = " ",
        call_site: CallSite | None = None,
    ) -> None:
        """Log a message built from ``items``.

        A single ``str`` is recorded as-is. Otherwise each item is rendered
        (strings verbatim, exceptions as a diagnostic summary, other objects
        via ``str``/``repr``) and the results are joined with ``separator``.
        No items yields an empty message.

        Args:
            *items: Text or arbitrary objects to render.
            separator: Placed between rendered items. Defaults to one space.
            call_site: Caller coordinates; captured here when omitted.
        """
        site = call_site if call_site is not None else capture_call_site()
        match items:
            case (str() as text,):
                self._emit(Message(text=str(text)), site)
            case _:
                self.message_list(items, separator=separator, call_site=site)

    def message_list(
        self,
        items: Sequence[object],
        separator: str = " ",
        call_site: CallSite | None = None,
    ) -> None:
        """Render ``items`` into one string and log it as a message."""
        site = call_site if call_site is not None else capture_call_site()
        self._emit(Message(text=render_items(items, separator)), site)

    def value(self, value: object | None, *, call_site: CallSite | None = None) -> None:
        """Log an arbitrary value; presentation is left to the sink."""
        site = call_site if call_site is not None else capture_call_site()
        self._emit(Value(value=value), site)

    def _emit(self, payload: Payload, call_site: CallSite) -> None:
        self.sink.log(LogRecord(severity=self.severity, payload=payload, call_site=call_site))
