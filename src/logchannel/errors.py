"""Error ADTs for channel configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import ValidationError


@dataclass(frozen=True)
class UnknownSeverity:
    """A severity name did not match any known level."""

    name: str
    kind: Literal["UnknownSeverity"] = "UnknownSeverity"


@dataclass(frozen=True)
class InvalidLogConfig:
    """LogConfig failed Pydantic validation."""

    error: ValidationError
    kind: Literal["InvalidLogConfig"] = "InvalidLogConfig"


ConfigError = UnknownSeverity | InvalidLogConfig


__all__ = ["ConfigError", "InvalidLogConfig", "UnknownSeverity"]
