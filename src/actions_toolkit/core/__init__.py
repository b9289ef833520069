"""Workflow command protocol.

The functions in this module operate on a shared `Core` bound to the process
stdout and environment. They assume stdout is always writable: if a write
fails, the failure is logged and converted into `SystemExit(1)`. Use `Core`
directly to handle `OutputWriteFailure` yourself.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import ParamSpec, TypeVar

from actions_toolkit.core.annotation import Log, LogLevel, format_log
from actions_toolkit.core.command import Command, encode, encode_named
from actions_toolkit.core.core import Core, OutputSink
from actions_toolkit.core.environment import Environment, MemoryEnvironment, ProcessEnvironment
from actions_toolkit.core.errors import (
    InvalidUnicode,
    NotPresent,
    OutputWriteFailure,
    ToolkitError,
    VarError,
)
from actions_toolkit.core.escaping import escape_data, escape_property

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")

_default: Core | None = None


def default_core() -> Core:
    global _default
    if _default is None:
        _default = Core()
    return _default


def _abort_on_write_failure(func: Callable[P, R]) -> Callable[P, R]:
    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except OutputWriteFailure:
            logger.critical("Cannot write workflow command to stdout", exc_info=True)
            raise SystemExit(1) from None

    return wrapper


def input(name: str) -> str:  # noqa: A001
    return default_core().input(name)


def get_state(name: str) -> str:
    return default_core().get_state(name)


def is_debug() -> bool:
    return default_core().is_debug()


@_abort_on_write_failure
def set_output(key: str, value: str) -> None:
    default_core().set_output(key, value)


@_abort_on_write_failure
def export_variable(key: str, value: str) -> None:
    default_core().export_variable(key, value)


@_abort_on_write_failure
def set_secret(value: str) -> None:
    default_core().set_secret(value)


@_abort_on_write_failure
def add_path(value: str) -> None:
    default_core().add_path(value)


@_abort_on_write_failure
def save_state(key: str, value: str) -> None:
    default_core().save_state(key, value)


@_abort_on_write_failure
def debug(message: str) -> None:
    default_core().debug(message)


@_abort_on_write_failure
def error(message: str) -> None:
    default_core().error(message)


@_abort_on_write_failure
def warning(message: str) -> None:
    default_core().warning(message)


@_abort_on_write_failure
def info(message: str) -> None:
    default_core().info(message)


@_abort_on_write_failure
def log(level: LogLevel, entry: Log) -> None:
    default_core().log(level, entry)


@_abort_on_write_failure
def log_debug(entry: Log) -> None:
    default_core().log_debug(entry)


@_abort_on_write_failure
def log_error(entry: Log) -> None:
    default_core().log_error(entry)


@_abort_on_write_failure
def log_warning(entry: Log) -> None:
    default_core().log_warning(entry)


@_abort_on_write_failure
def stop_logging(body: Callable[[], R]) -> R:
    return default_core().stop_logging(body)


__all__ = [
    "Command",
    "Core",
    "Environment",
    "InvalidUnicode",
    "Log",
    "LogLevel",
    "MemoryEnvironment",
    "NotPresent",
    "OutputSink",
    "OutputWriteFailure",
    "ProcessEnvironment",
    "ToolkitError",
    "VarError",
    "add_path",
    "debug",
    "default_core",
    "encode",
    "encode_named",
    "error",
    "escape_data",
    "escape_property",
    "export_variable",
    "format_log",
    "get_state",
    "info",
    "input",
    "is_debug",
    "log",
    "log_debug",
    "log_error",
    "log_warning",
    "save_state",
    "set_output",
    "set_secret",
    "stop_logging",
    "warning",
]
