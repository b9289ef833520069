"""Structured log annotations.

A log entry without a location renders as `::error::message`. With any of
file/line/col present it renders as `::error file=a.py,line=5,col=10::message`;
absent fields are dropped rather than rendered empty.

The message is written verbatim on this path. The bare-message helpers on
`Core` (`error`, `warning`, `debug`) go through the command encoder instead and
escape the message.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .escaping import cmd_arg


class LogLevel(str, Enum):
    DEBUG = "debug"
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class Log:
    """A log message with an optional source location."""

    message: str
    file: str | None = None
    line: int | None = None
    col: int | None = None

    def __post_init__(self) -> None:
        for field_name in ("line", "col"):
            value = getattr(self, field_name)
            if value is None:
                continue
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{field_name} must be an int, got {value!r}")
            if value < 0:
                raise ValueError(f"{field_name} must be non-negative, got {value}")

    @property
    def has_location(self) -> bool:
        return self.file is not None or self.line is not None or self.col is not None

    def properties(self) -> list[str]:
        args: list[str] = []
        if self.file is not None:
            args.append(cmd_arg("file", self.file))
        if self.line is not None:
            args.append(cmd_arg("line", self.line))
        if self.col is not None:
            args.append(cmd_arg("col", self.col))
        return args


def format_log(level: LogLevel, entry: Log) -> str:
    """Render a log entry as a command line for the given level."""

    if not entry.has_location:
        return f"::{level.value}::{entry.message}\n"
    return f"::{level.value} {','.join(entry.properties())}::{entry.message}\n"
