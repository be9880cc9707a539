"""
Rendering of heterogeneous items into display strings.

Used by the multi-item ``Channel.message`` path (and by sinks that want to
show a ``Value`` payload). Each item is classified into exactly one
capability of a closed set, first match wins:

1. :class:`PlainText` - the item is a ``str``; used verbatim.
2. :class:`DescribableError` - the item is an exception, or any error value
   implementing :class:`DescribableErrorLike`; rendered by
   :func:`describe_error` as a multi-line diagnostic summary.
3. :class:`SelfDescribing` - the item's class defines its own ``__str__``.
4. :class:`Opaque` - everything else (``None`` included); ``repr(item)``.

Rendering never raises. If an item's ``__str__`` or ``__repr__`` blows up,
the item degrades to the next capability and ultimately to
``object.__repr__``.

Error summary format::

    <domain> [<code>] <info-count> <info-map>
    <description>
    <failure-reason or "none">
"""

from __future__ import annotations

import builtins
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Literal, Protocol, assert_never, runtime_checkable


__all__ = [
    "DescribableError",
    "DescribableErrorLike",
    "LoggableError",
    "Opaque",
    "PlainText",
    "Renderable",
    "SelfDescribing",
    "classify",
    "describe_error",
    "render",
    "render_item",
    "render_items",
]


# --------------------------------------------------------------------------- #
# Error protocol                                                              #
# --------------------------------------------------------------------------- #


@runtime_checkable
class DescribableErrorLike(Protocol):
    """Errors carrying structured diagnostic fields.

    Anything exposing these attributes counts as an error, exception or not,
    so frozen error ADTs get the diagnostic summary too. ``str(error)`` is the
    description. Exceptions without these fields get them derived by
    :func:`describe_error`.
    """

    domain: str
    code: int
    user_info: Mapping[str, object]
    failure_reason: str | None


class LoggableError(Exception):
    """Exception with an error domain, numeric code and auxiliary info map.

    ``str(error)`` is the human-readable description.

    Example:
        >>> err = LoggableError("timeout", domain="Net", code=7, user_info={"host": "db"})
        >>> describe_error(err)
        'Net [7] 1 {host: db}\\ntimeout\\nnone'
    """

    def __init__(
        self,
        description: str,
        *,
        domain: str,
        code: int = 0,
        user_info: Mapping[str, object] | None = None,
        failure_reason: str | None = None,
    ) -> None:
        super().__init__(description)
        self.domain = domain
        self.code = code
        self.user_info: Mapping[str, object] = dict(user_info or {})
        self.failure_reason = failure_reason


# --------------------------------------------------------------------------- #
# Capabilities                                                                #
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class PlainText:
    """A string, used verbatim."""

    text: str
    kind: Literal["PlainText"] = "PlainText"


@dataclass(frozen=True)
class DescribableError:
    """An exception or error ADT, rendered as a diagnostic summary."""

    error: BaseException | DescribableErrorLike
    kind: Literal["DescribableError"] = "DescribableError"


@dataclass(frozen=True)
class SelfDescribing:
    """An object whose class provides its own ``__str__``."""

    item: object
    kind: Literal["SelfDescribing"] = "SelfDescribing"


@dataclass(frozen=True)
class Opaque:
    """Anything else; rendered with ``repr``."""

    item: object
    kind: Literal["Opaque"] = "Opaque"


Renderable = PlainText | DescribableError | SelfDescribing | Opaque


def _defines_str(item: object) -> bool:
    return type(item).__str__ is not object.__str__


def classify(item: object) -> Renderable:
    """Pick the first capability ``item`` implements."""
    match item:
        case str():
            return PlainText(text=item)
        case BaseException():
            return DescribableError(error=item)
        case _ if isinstance(item, DescribableErrorLike):
            return DescribableError(error=item)
        case _ if _defines_str(item):
            return SelfDescribing(item=item)
        case _:
            return Opaque(item=item)


# --------------------------------------------------------------------------- #
# Rendering                                                                   #
# --------------------------------------------------------------------------- #


def render(renderable: Renderable) -> str:
    """Render one classified item. Never raises."""
    match renderable:
        case PlainText(text=text):
            return text
        case DescribableError(error=error):
            try:
                return describe_error(error)
            except Exception:
                return render(Opaque(item=error))
        case SelfDescribing(item=item):
            try:
                return str(item)
            except Exception:
                return render(Opaque(item=item))
        case Opaque(item=item):
            try:
                return repr(item)
            except Exception:
                return object.__repr__(item)
        case _:
            assert_never(renderable)


def render_item(item: object) -> str:
    """Render a single arbitrary item."""
    return render(classify(item))


def render_items(items: Iterable[object], separator: str = " ") -> str:
    """Render each item and join them with ``separator``, preserving order.

    An empty ``items`` yields ``""``.
    """
    return separator.join(render_item(item) for item in items)


def _error_domain(error: BaseException) -> str:
    cls = type(error)
    match cls.__module__:
        case builtins.__name__:
            return cls.__qualname__
        case module:
            return f"{module}.{cls.__qualname__}"


def _error_code(error: BaseException) -> int:
    match error:
        case OSError(errno=int(errno)):
            return errno
        case _:
            return 0


def _error_description(error: object) -> str:
    text = str(error)
    return text if text else type(error).__name__


def _format_info(user_info: Mapping[str, object]) -> str:
    entries = sorted((render_item(key), render_item(value)) for key, value in user_info.items())
    return "{" + ", ".join(f"{key}: {value}" for key, value in entries) + "}"


def describe_error(error: BaseException | DescribableErrorLike) -> str:
    """Summarise an error in the fixed three-line diagnostic format.

    Errors implementing :class:`DescribableErrorLike` supply their own
    domain, code, info map and failure reason. For any other exception the
    domain is the qualified class name, the code is ``errno`` for an
    ``OSError`` that has one (else 0), the info map is empty, and the failure
    reason is the chained ``__cause__``, if any.
    """
    if isinstance(error, DescribableErrorLike):
        domain = error.domain
        code = error.code
        user_info = error.user_info
        failure_reason = error.failure_reason
    else:
        domain = _error_domain(error)
        code = _error_code(error)
        user_info = {}
        cause = error.__cause__
        failure_reason = None if cause is None else _error_description(cause)

    return (
        f"{domain} [{code}] {len(user_info)} {_format_info(user_info)}\n"
        f"{_error_description(error)}\n"
        f"{'none' if failure_reason is None else failure_reason}"
    )
