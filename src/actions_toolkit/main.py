"""CLI entrypoint: `actions-toolkit <command>`.

Exit codes:
- 0: success
- 1: the action failed (also reported as an `::error::` command)
- 2: usage or configuration error
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from actions_toolkit import __version__
from actions_toolkit.action import ActionError
from actions_toolkit.action.wait import wait
from actions_toolkit.config import ToolkitSettings
from actions_toolkit.core import Core, OutputWriteFailure
from actions_toolkit.logging import configure_logging

logger = logging.getLogger(__name__)

ACTIONS = {
    "wait": wait,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="actions-toolkit",
        description="Run a workflow action that talks to the runner via workflow commands",
    )
    parser.add_argument("--version", action="version", version=f"actions-toolkit {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser(
        "wait",
        help="Sleep for the number of milliseconds given in the 'milliseconds' input",
    )

    return parser


def main(argv: list[str] | None = None, core: Core | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = ToolkitSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error:", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    core = core or Core()
    level = "DEBUG" if core.is_debug() else settings.log_level
    configure_logging(level, settings.log_format)

    action = ACTIONS[args.command]

    try:
        try:
            action(core)
            return 0
        except ActionError as e:
            logger.debug("Action failed", exc_info=True, extra={"command": args.command})
            message = str(e)
            if e.__cause__ is not None:
                message = f"{message}: {e.__cause__}"
            print(message, file=sys.stderr)
            core.error(message)
            return 1

    except OutputWriteFailure:
        logger.critical("Cannot write workflow commands", exc_info=True)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
