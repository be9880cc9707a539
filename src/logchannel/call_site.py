"""
Call-site capture.

A :class:`CallSite` is a snapshot of *where* a log call was made: the calling
function's qualified name, its source file, the line, and the identity of the
calling thread. It is taken once, at the public emission boundary, and then
passed explicitly through every delegation layer so that wrappers never
replace the caller's coordinates with their own.

A wrapper that sits in front of a channel captures with the default
``stacklevel``, which already describes *its* caller::

    def audit(channel: Channel, text: str) -> None:
        channel.message(text, call_site=capture_call_site())

Helpers nested one level deeper inside such a wrapper pass ``stacklevel=2``.
"""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass
from typing import Final


__all__ = ["CallSite", "UNKNOWN_CALL_SITE_FIELD", "capture_call_site"]

UNKNOWN_CALL_SITE_FIELD: Final[str] = "<unknown>"


@dataclass(frozen=True)
class CallSite:
    """Where a log call originated.

    Attributes:
        function: Qualified name of the calling function (``"<module>"`` at
            module level).
        file_path: Path of the calling source file.
        line: Line number of the call.
        thread_id: ``threading.get_ident()`` of the calling thread.
    """

    function: str
    file_path: str
    line: int
    thread_id: int


def capture_call_site(stacklevel: int = 1) -> CallSite:
    """Capture the call site ``stacklevel`` frames above the function calling this.

    ``stacklevel=1`` (the default) describes the caller of the function that
    invoked ``capture_call_site``; each wrapper layer adds one.

    Never raises: if the stack is shallower than requested, the function, file
    and line fields fall back to placeholders while the thread id is still
    recorded.
    """
    thread_id = threading.get_ident()
    try:
        frame = sys._getframe(stacklevel + 1)
    except ValueError:
        return CallSite(
            function=UNKNOWN_CALL_SITE_FIELD,
            file_path=UNKNOWN_CALL_SITE_FIELD,
            line=0,
            thread_id=thread_id,
        )
    code = frame.f_code
    return CallSite(
        function=code.co_qualname,
        file_path=code.co_filename,
        line=frame.f_lineno,
        thread_id=thread_id,
    )
