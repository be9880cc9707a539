"""
Payload ADTs: the content carried by a log record.

Type Safety:
    - All payload variants are frozen dataclasses (immutable)
    - Literal discriminators enable exhaustive pattern matching
    - ``Payload`` is the closed union of the three variants

A ``Value`` holds a reference to whatever the caller passed, including
``None``; it is neither copied nor rendered here. Deciding how to present it
is left to the sink.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class Trace:
    """Marker meaning "execution reached this point".

    Attributes:
        kind: Discriminator for pattern matching. Always "Trace".
    """

    kind: Literal["Trace"] = "Trace"


@dataclass(frozen=True)
class Message:
    """A finished, already rendered text message.

    Attributes:
        text: Message text, recorded verbatim.
        kind: Discriminator for pattern matching. Always "Message".
    """

    text: str
    kind: Literal["Message"] = "Message"


@dataclass(frozen=True)
class Value:
    """An arbitrary value whose rendering is deferred to the sink.

    Attributes:
        value: The caller's value, possibly None.
        kind: Discriminator for pattern matching. Always "Value".
    """

    value: object | None
    kind: Literal["Value"] = "Value"


Payload = Trace | Message | Value


__all__ = ["Message", "Payload", "Trace", "Value"]
