"""Workflow command encoding.

Every command is rendered as a single line:

    ::<name>[ <key1>=<val1>,<key2>=<val2>]::<payload>

The payload is escaped with `escape_data`, property values with
`escape_property`. The consumer treats properties as unordered, but we keep
insertion order so output is reproducible.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from .escaping import cmd_arg, escape_data

ADD_MASK = "add-mask"
ADD_PATH = "add-path"
SET_OUTPUT = "set-output"
SET_ENV = "set-env"
SAVE_STATE = "save-state"
STOP_COMMANDS = "stop-commands"

Properties = Mapping[str, object] | Iterable[tuple[str, object]]


@dataclass(frozen=True, slots=True)
class Command:
    """A single command line, built and rendered immediately."""

    name: str
    payload: str = ""
    properties: tuple[tuple[str, object], ...] = ()

    def render(self) -> str:
        head = self.name
        if self.properties:
            head += " " + ",".join(cmd_arg(key, value) for key, value in self.properties)
        return f"::{head}::{escape_data(self.payload)}\n"


def _as_pairs(properties: Properties | None) -> tuple[tuple[str, object], ...]:
    if properties is None:
        return ()
    if isinstance(properties, Mapping):
        return tuple(properties.items())
    return tuple(properties)


def encode(name: str, properties: Properties | None = None, payload: str = "") -> str:
    """Encode a command with an optional ordered set of properties."""

    return Command(name=name, payload=payload, properties=_as_pairs(properties)).render()


def encode_named(name: str, key: str, value: str) -> str:
    """Encode the `name=<key>` form used by set-output, set-env and save-state."""

    return encode(name, [("name", key)], value)
