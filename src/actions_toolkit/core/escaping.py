"""Escaping rules for workflow command lines.

A command line has the shape `::name key=value,key=value::payload`. The payload
must not contain raw line breaks, and property values additionally must not
contain the `:` and `,` delimiters.
"""

from __future__ import annotations


def escape_data(data: str) -> str:
    """Escape a command payload."""

    # `%` first, so the escapes introduced below are not escaped again.
    return data.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(prop: str) -> str:
    """Escape a property value."""

    return escape_data(prop).replace(":", "%3A").replace(",", "%2C")


def cmd_arg(key: str, value: object) -> str:
    """Render a single `key=value` property."""

    return f"{key}={escape_property(str(value))}"
