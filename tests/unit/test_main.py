"""Unit tests for the CLI dispatcher."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from actions_toolkit import main as cli
from actions_toolkit.core import Core, MemoryEnvironment


@pytest.fixture(autouse=True)
def isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> list[tuple[str, str]]:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ACTIONS_TOOLKIT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("ACTIONS_TOOLKIT_LOG_FORMAT", raising=False)

    calls: list[tuple[str, str]] = []
    monkeypatch.setattr(cli, "configure_logging", lambda level, fmt: calls.append((level, fmt)))
    return calls


def test_wait_succeeds() -> None:
    sink = io.StringIO()
    core = Core(out=sink, env=MemoryEnvironment({"INPUT_MILLISECONDS": "0"}))

    assert cli.main(["wait"], core=core) == 0
    assert sink.getvalue() == ""


def test_wait_failure_is_reported_as_error_command(capsys: pytest.CaptureFixture[str]) -> None:
    sink = io.StringIO()
    core = Core(out=sink, env=MemoryEnvironment())

    assert cli.main(["wait"], core=core) == 1

    assert sink.getvalue() == (
        "::error::milliseconds input required: "
        "environment variable not found: INPUT_MILLISECONDS\n"
    )
    assert "milliseconds input required" in capsys.readouterr().err


def test_invalid_milliseconds() -> None:
    sink = io.StringIO()
    core = Core(out=sink, env=MemoryEnvironment({"INPUT_MILLISECONDS": "soon"}))

    assert cli.main(["wait"], core=core) == 1
    assert sink.getvalue().startswith("::error::invalid milliseconds: 'soon'")


def test_write_failure_exits_nonzero() -> None:
    sink = io.StringIO()
    sink.close()
    core = Core(out=sink, env=MemoryEnvironment())

    assert cli.main(["wait"], core=core) == 1


def test_missing_command_is_usage_error() -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 2


def test_unknown_command_is_usage_error() -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["sleep"])
    assert exc_info.value.code == 2


def test_runner_debug_enables_debug_logging(isolated: list[tuple[str, str]]) -> None:
    core = Core(
        out=io.StringIO(),
        env=MemoryEnvironment({"INPUT_MILLISECONDS": "0", "RUNNER_DEBUG": "1"}),
    )

    cli.main(["wait"], core=core)

    assert isolated == [("DEBUG", "json")]


def test_log_settings_from_environment(
    isolated: list[tuple[str, str]], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("ACTIONS_TOOLKIT_LOG_LEVEL", "info")
    monkeypatch.setenv("ACTIONS_TOOLKIT_LOG_FORMAT", "text")
    core = Core(out=io.StringIO(), env=MemoryEnvironment({"INPUT_MILLISECONDS": "0"}))

    cli.main(["wait"], core=core)

    assert isolated == [("INFO", "text")]


def test_invalid_settings_is_configuration_error(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("ACTIONS_TOOLKIT_LOG_LEVEL", "LOUD")

    assert cli.main(["wait"], core=Core(out=io.StringIO(), env=MemoryEnvironment())) == 2
    assert "Configuration error" in capsys.readouterr().err


def test_undecodable_input_is_reported_as_error_command() -> None:
    sink = io.StringIO()
    core = Core(out=sink, env=MemoryEnvironment({"INPUT_MILLISECONDS": "5\udcff"}))

    assert cli.main(["wait"], core=core) == 1
    assert sink.getvalue() == (
        "::error::milliseconds input required: "
        "environment variable was not valid unicode: INPUT_MILLISECONDS\n"
    )


def test_every_subcommand_has_an_action() -> None:
    parser = cli.build_parser()
    subparsers = next(a for a in parser._actions if a.dest == "command")

    assert set(subparsers.choices) == set(cli.ACTIONS)
