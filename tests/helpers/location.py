# tests/helpers/location.py
"""Source-location helpers for call-site assertions."""

from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """Function, file and line of a point in a test."""

    function: str
    file_path: str
    line: int

    def next_line(self) -> Location:
        """The location one line further down in the same function."""
        return Location(function=self.function, file_path=self.file_path, line=self.line + 1)


def here() -> Location:
    """Return the caller's current location.

    Call it on the line directly above the log call under test and compare
    against ``here().next_line()``.
    """
    frame = sys._getframe(1)
    return Location(
        function=frame.f_code.co_qualname,
        file_path=frame.f_code.co_filename,
        line=frame.f_lineno,
    )
