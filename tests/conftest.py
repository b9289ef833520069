"""Test configuration and fixtures."""

from __future__ import annotations

import io

import pytest

from actions_toolkit.core import Core, MemoryEnvironment


@pytest.fixture
def sink() -> io.StringIO:
    """Provide an in-memory output sink."""
    return io.StringIO()


@pytest.fixture
def env() -> MemoryEnvironment:
    """Provide an environment isolated from the process environment."""
    return MemoryEnvironment({"PATH": "/usr/bin"})


@pytest.fixture
def core(sink: io.StringIO, env: MemoryEnvironment) -> Core:
    """Provide a core writing to `sink` over `env`."""
    return Core(out=sink, env=env)
