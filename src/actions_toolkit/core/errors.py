"""Errors raised by the toolkit core."""

from __future__ import annotations


class ToolkitError(Exception):
    """Base class for toolkit errors."""


class VarError(ToolkitError):
    """An environment variable could not be read."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key


class NotPresent(VarError):
    """The environment variable is not set."""

    def __str__(self) -> str:
        return f"environment variable not found: {self.key}"


class InvalidUnicode(VarError):
    """The environment variable is set but is not valid text."""

    def __str__(self) -> str:
        return f"environment variable was not valid unicode: {self.key}"


class OutputWriteFailure(ToolkitError):
    """The output sink rejected a command line."""

    def __init__(self, command: str) -> None:
        super().__init__(command)
        self.command = command

    def __str__(self) -> str:
        return f"failed to write {self.command!r} command to output"
