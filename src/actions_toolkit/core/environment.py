"""Environment access for inputs, state and PATH.

The orchestrator passes inputs as `INPUT_<NAME>` and saved state as
`STATE_<NAME>`, where `<NAME>` is the human-facing name with spaces replaced by
underscores and upper-cased.

Reads and writes go through the small `Environment` protocol so the core can
run against the real process environment or an isolated in-memory one.
"""

from __future__ import annotations

import os
from typing import Protocol

from .errors import InvalidUnicode, NotPresent

INPUT_PREFIX = "INPUT"
STATE_PREFIX = "STATE"

PATH_VAR = "PATH"
DEBUG_VAR = "RUNNER_DEBUG"

# ":" on POSIX, ";" on Windows.
DELIMITER = os.pathsep


class Environment(Protocol):
    """Read/write access to a set of environment variables."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class ProcessEnvironment:
    """The environment of the current process."""

    def get(self, key: str) -> str | None:
        return os.environ.get(key)

    def set(self, key: str, value: str) -> None:
        os.environ[key] = value


class MemoryEnvironment:
    """A dict-backed environment, independent of the process environment."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._vars: dict[str, str] = dict(initial) if initial else {}

    def get(self, key: str) -> str | None:
        return self._vars.get(key)

    def set(self, key: str, value: str) -> None:
        self._vars[key] = value

    def as_dict(self) -> dict[str, str]:
        return dict(self._vars)


def var_key(prefix: str, name: str) -> str:
    """Derive the environment key for a named input or state value."""

    suffix = name.replace(" ", "_").upper()
    return f"{prefix}_{suffix}"


def read_var(env: Environment, key: str) -> str:
    """Read a variable, failing if it is unset or not valid text.

    An empty value is a present value.
    """

    value = env.get(key)
    if value is None:
        raise NotPresent(key)

    # Undecodable OS bytes surface as lone surrogates (PEP 383).
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidUnicode(key) from e
    return value


def read_input(env: Environment, name: str) -> str:
    return read_var(env, var_key(INPUT_PREFIX, name))


def read_state(env: Environment, name: str) -> str:
    return read_var(env, var_key(STATE_PREFIX, name))


def append_path(env: Environment, value: str, delimiter: str = DELIMITER) -> str:
    """Append `value` to PATH and return the new PATH."""

    current = env.get(PATH_VAR)
    path = value if current is None else f"{current}{delimiter}{value}"
    env.set(PATH_VAR, path)
    return path


def is_debug(env: Environment) -> bool:
    return env.get(DEBUG_VAR) == "1"
