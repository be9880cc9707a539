# tests/helpers/result_utils.py
"""Result unwrapping for configuration tests."""

from __future__ import annotations

from typing import TypeVar

from logchannel.result import Failure, Result, Success

T = TypeVar("T")
E = TypeVar("E")


def expect_success(result: Result[T, E]) -> T:
    """Unwrap Success or fail the test with the error.

    Example:
        >>> config = expect_success(build_log_config(minimum_severity="debug"))
    """
    match result:
        case Success(value):
            return value
        case Failure(error):
            raise AssertionError(f"Unexpected failure: {error}")


def expect_failure(result: Result[T, E]) -> E:
    """Unwrap Failure or fail the test.

    Example:
        >>> error = expect_failure(Severity.parse("verbose"))
        >>> assert error.name == "verbose"
    """
    match result:
        case Failure(error):
            return error
        case Success(value):
            raise AssertionError(f"Expected failure but got success: {value}")
