"""The `wait` action: sleep for the number of milliseconds given as input."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from actions_toolkit.core import Core, VarError

from . import ActionError

logger = logging.getLogger(__name__)


def parse_milliseconds(raw: str) -> int:
    try:
        ms = int(raw.strip())
    except ValueError as e:
        raise ActionError(f"invalid milliseconds: {raw!r}") from e
    if ms < 0:
        raise ActionError(f"invalid milliseconds: {raw!r} (must be non-negative)")
    return ms


def wait(core: Core, *, sleep: Callable[[float], None] = time.sleep) -> None:
    try:
        raw = core.input("milliseconds")
    except VarError as e:
        raise ActionError("milliseconds input required") from e

    ms = parse_milliseconds(raw)
    logger.info("Waiting", extra={"milliseconds": ms})
    sleep(ms / 1000)
