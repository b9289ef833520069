#!/usr/bin/env python3
"""Programmatic workflow command example.

This demonstrates using the toolkit from a workflow step:

* read an input (`INPUT_WHO_TO_GREET`)
* set an output and mask a secret
* annotate a source location
* print raw text that must not be parsed as commands

Run it locally with an input set, e.g.:

    INPUT_WHO_TO_GREET=world python examples/basic_usage.py
"""

from __future__ import annotations

import argparse
import inspect
from typing import Sequence

from actions_toolkit.core import Core, Log, NotPresent


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Emit a few workflow commands.")
    parser.add_argument("--token", default="", help="A secret to mask (optional)")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    core = Core()

    try:
        who = core.input("who to greet")
    except NotPresent as exc:
        core.error(str(exc))
        return 1

    if args.token:
        core.set_secret(args.token)

    core.set_output("greeting", f"hello {who}")
    frame = inspect.currentframe()
    assert frame is not None
    core.log_warning(Log("greeting is hard-coded", file=__file__, line=frame.f_lineno, col=5))

    core.stop_logging(lambda: print("::set-output name=ignored::not a command"))

    if core.is_debug():
        core.debug(f"greeted {who}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
