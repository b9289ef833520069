"""The workflow command facade.

`Core` owns an output sink (stdout by default) and an environment (the process
environment by default). Every operation either reads the environment or
renders one command line and writes it to the sink.
"""

from __future__ import annotations

import logging
import sys
import uuid
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Protocol, TypeVar

from . import environment
from .annotation import Log, LogLevel, format_log
from .command import ADD_MASK, ADD_PATH, SAVE_STATE, SET_ENV, SET_OUTPUT, STOP_COMMANDS
from .command import encode, encode_named
from .environment import Environment, ProcessEnvironment
from .errors import OutputWriteFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")


class OutputSink(Protocol):
    """Anything that accepts text, e.g. `sys.stdout` or `io.StringIO`."""

    def write(self, s: str, /) -> int: ...

    def flush(self) -> None: ...


class Core:
    """Issue workflow commands and read inputs/state.

    Args:
        out: Sink for command lines. Defaults to `sys.stdout`, looked up on
            every write so redirection after construction is honoured.
        env: Environment used for inputs, state, exported variables and PATH.
            Defaults to the process environment.
    """

    def __init__(
        self,
        out: OutputSink | None = None,
        env: Environment | None = None,
    ) -> None:
        self._out = out
        self.env: Environment = env if env is not None else ProcessEnvironment()

    @property
    def out(self) -> OutputSink:
        return self._out if self._out is not None else sys.stdout

    def _write(self, command: str, line: str) -> None:
        try:
            self.out.write(line)
            self.out.flush()
        except (OSError, ValueError) as e:
            raise OutputWriteFailure(command) from e
        logger.debug("Issued workflow command", extra={"command": command})

    def _issue(self, command: str, value: str) -> None:
        self._write(command, encode(command, payload=value))

    def _issue_named(self, command: str, key: str, value: str) -> None:
        self._write(command, encode_named(command, key, value))

    # Inputs and state

    def input(self, name: str) -> str:
        """Read the input `name`.

        Raises:
            NotPresent: The input was not provided.
            InvalidUnicode: The input value is not valid text.
        """
        return environment.read_input(self.env, name)

    def get_state(self, name: str) -> str:
        """Read state saved by an earlier step with `save_state`."""
        return environment.read_state(self.env, name)

    def save_state(self, key: str, value: str) -> None:
        self._issue_named(SAVE_STATE, key, value)

    def is_debug(self) -> bool:
        return environment.is_debug(self.env)

    # Outputs and environment mutation

    def set_output(self, key: str, value: str) -> None:
        self._issue_named(SET_OUTPUT, key, value)

    def export_variable(self, key: str, value: str) -> None:
        """Set `key` for this process and for later steps of the job."""
        self.env.set(key, value)
        self._issue_named(SET_ENV, key, value)

    def set_secret(self, value: str) -> None:
        """Register `value` to be masked in the orchestrator's logs."""
        self._issue(ADD_MASK, value)

    def add_path(self, value: str) -> None:
        """Add `value` to PATH for later steps and append it to this process's PATH."""
        self._issue(ADD_PATH, value)
        environment.append_path(self.env, value)

    # Logging

    def log_message(self, level: LogLevel, message: str) -> None:
        self._issue(level.value, message)

    def debug(self, message: str) -> None:
        self.log_message(LogLevel.DEBUG, message)

    def error(self, message: str) -> None:
        self.log_message(LogLevel.ERROR, message)

    def warning(self, message: str) -> None:
        self.log_message(LogLevel.WARNING, message)

    def info(self, message: str) -> None:
        """Write a plain line; it is not parsed as a command."""
        self._write("info", f"{message}\n")

    def log(self, level: LogLevel, entry: Log) -> None:
        self._write(level.value, format_log(level, entry))

    def log_debug(self, entry: Log) -> None:
        self.log(LogLevel.DEBUG, entry)

    def log_error(self, entry: Log) -> None:
        self.log(LogLevel.ERROR, entry)

    def log_warning(self, entry: Log) -> None:
        self.log(LogLevel.WARNING, entry)

    # Stop/resume

    @contextmanager
    def stop_commands(self) -> Iterator[str]:
        """Suspend command processing for the duration of the block.

        Emits `::stop-commands::<token>` on entry and `::<token>::` on exit.
        The resume marker is written even if the block raises.
        """
        token = str(uuid.uuid4())
        self._issue(STOP_COMMANDS, token)
        try:
            yield token
        finally:
            self._issue(token, "")

    def stop_logging(self, body: Callable[[], T]) -> T:
        """Run `body` with command processing suspended and return its result."""
        with self.stop_commands():
            return body()
