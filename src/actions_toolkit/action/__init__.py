"""Actions runnable from the CLI."""

from __future__ import annotations


class ActionError(Exception):
    """An action failed; the message says which input and what was expected."""


__all__ = ["ActionError"]
