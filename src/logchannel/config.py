"""
Channel configuration.

:class:`LogConfig` decides which severities get a live channel and which
logger the standard-library bridge writes to. It is validated by Pydantic;
use :func:`build_log_config` to get the outcome as a ``Result``.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from logchannel.errors import InvalidLogConfig
from logchannel.result import Failure, Result, Success
from logchannel.severity import Severity
from logchannel.validation import validate_model


__all__: list[str] = ["LogConfig", "build_log_config"]


class LogConfig(BaseModel):
    """Which channels are enabled, and where bridged records go.

    Attributes
    ----------
    minimum_severity
        Lowest severity that gets a channel. Accepts a :class:`Severity`,
        its integer value, or its case-insensitive name.
    logger_name
        Target logger for :class:`~logchannel.sink.StdlibLoggingSink`.
    """

    minimum_severity: Severity = Severity.info
    logger_name: Annotated[str, Field(min_length=1)] = "logchannel"

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("minimum_severity", mode="before")
    @classmethod
    def _parse_severity_name(cls, value: object) -> object:
        """Allow severities to be given by name, e.g. from an env var."""
        if not isinstance(value, str):
            return value
        match Severity.parse(value):
            case Success(severity):
                return severity
            case Failure():
                # Leave it to enum validation to report the bad value.
                return value


def build_log_config(**data: object) -> Result[LogConfig, InvalidLogConfig]:
    """Validate ``data`` into a :class:`LogConfig`."""
    match validate_model(LogConfig, **data):
        case Failure(error):
            return Failure(InvalidLogConfig(error=error))
        case Success(config):
            return Success(config)
