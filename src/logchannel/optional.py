"""Wrapper for a channel that may be switched off."""

from __future__ import annotations

from dataclasses import dataclass

from logchannel.call_site import capture_call_site
from logchannel.channel import Channel


__all__ = ["OptionalChannel"]


@dataclass(frozen=True)
class OptionalChannel:
    """Holds a channel or nothing, and can be called either way.

    With no channel every call returns immediately: nothing is built, no call
    site is captured, nothing is raised. With a channel, the caller's location
    is captured here and forwarded, so records point at the real call site
    rather than at this wrapper.

    Example:
        >>> debug = OptionalChannel(None)
        >>> debug.message("cache miss for", key)  # no-op
    """

    channel: Channel | None = None

    @property
    def is_enabled(self) -> bool:
        return self.channel is not None

    def trace(self) -> None:
        if self.channel is None:
            return
        self.channel.trace(call_site=capture_call_site())

    def message(self, *items: object, separator: str = " ") -> None:
        if self.channel is None:
            return
        self.channel.message(*items, separator=separator, call_site=capture_call_site())

    def value(self, value: object | None) -> None:
        if self.channel is None:
            return
        self.channel.value(value, call_site=capture_call_site())
