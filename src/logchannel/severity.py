"""
`logchannel.severity`
---------------------
The ordered set of log severities a :class:`~logchannel.channel.Channel` can
be bound to.

``Severity`` is an :class:`~enum.IntEnum`, so the declaration order is the
total order: ``Severity.trace < Severity.debug < ... < Severity.error``.
Lookups to and from names and ``logging`` levels are constant-time dict
accesses.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Final

from logchannel.errors import UnknownSeverity
from logchannel.result import Failure, Result, Success


__all__ = ["TRACE_LEVEL", "Severity"]

#: Numeric ``logging`` level used for bridged trace records.
TRACE_LEVEL: Final[int] = 5

logging.addLevelName(TRACE_LEVEL, "TRACE")


class Severity(IntEnum):
    """Log severity, lowest to highest."""

    trace = 0
    debug = 1
    info = 2
    warning = 3
    error = 4

    @classmethod
    def parse(cls, name: str) -> Result[Severity, UnknownSeverity]:
        """Look up a severity by case-insensitive name."""
        found = _BY_NAME.get(name.strip().lower())
        match found:
            case None:
                return Failure(UnknownSeverity(name=name))
            case _:
                return Success(found)

    def to_logging_level(self) -> int:
        """Return the matching numeric level of the standard ``logging`` module."""
        return _LOGGING_LEVELS[self]


_BY_NAME: Final[dict[str, Severity]] = {member.name: member for member in Severity}

_LOGGING_LEVELS: Final[dict[Severity, int]] = {
    Severity.trace: TRACE_LEVEL,
    Severity.debug: logging.DEBUG,
    Severity.info: logging.INFO,
    Severity.warning: logging.WARNING,
    Severity.error: logging.ERROR,
}
