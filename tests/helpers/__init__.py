# tests/helpers/__init__.py
"""Shared test utilities for the logchannel test suite.

Usage:
    >>> from tests.helpers import expect_success, here
    >>>
    >>> config = expect_success(build_log_config(minimum_severity="warning"))
    >>>
    >>> expected = here().next_line()
    >>> channel.trace()
    >>> assert_call_site_at(sink.records[0], expected)
"""

from __future__ import annotations

from tests.helpers.assertions import assert_call_site_at
from tests.helpers.location import Location, here
from tests.helpers.result_utils import expect_failure, expect_success

__all__ = [
    "Location",
    "assert_call_site_at",
    "expect_failure",
    "expect_success",
    "here",
]
