"""Module entry stories ensuring `python -m datecheck` mirrors the CLI."""

from __future__ import annotations

import runpy
import subprocess
import sys

import lib_cli_exit_tools
import pytest

from datecheck import __init__conf__, entry
from datecheck.adapters import cli as cli_mod
from datecheck.adapters.cli.exit_codes import ExitCode


@pytest.fixture
def quiet_tracebacks(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)


@pytest.mark.os_agnostic
def test_module_entry_executes_cli_and_shows_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """python -m invocation with no args shows help and exits 0."""
    monkeypatch.setattr(sys, "argv", ["datecheck"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("datecheck.__main__", run_name="__main__")

    captured = capsys.readouterr()
    assert exc.value.code == 0
    assert "Usage:" in captured.out
    assert __init__conf__.shell_command in captured.out


@pytest.mark.os_agnostic
def test_module_entry_exits_with_out_of_range_code(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    quiet_tracebacks: None,
) -> None:
    monkeypatch.setattr(sys, "argv", ["datecheck", "check", "13", "1", "2024"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("datecheck.__main__", run_name="__main__")

    assert exc.value.code == ExitCode.OUT_OF_RANGE
    assert "Invalid date" in capsys.readouterr().err


@pytest.mark.os_agnostic
def test_module_entry_cli_exports_all_registered_commands() -> None:
    exported = {name for name in dir(cli_mod) if name.startswith("cli_")}
    assert exported == {"cli_check", "cli_config", "cli_info"}
    assert set(cli_mod.cli.commands) == {"check", "config", "info"}


@pytest.mark.os_agnostic
def test_module_entry_subprocess_check_json() -> None:
    """`python -m datecheck check ... --format json` runs end to end in a fresh interpreter."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "datecheck", "check", "3", "14", "2024", "--format", "json"],
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert '"#031424"' in result.stdout


@pytest.mark.os_agnostic
def test_module_entry_subprocess_version() -> None:
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "datecheck", "--version"],
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert __init__conf__.version in result.stdout


@pytest.mark.os_agnostic
def test_entry_main_invokes_cli_with_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """entry.main() wires production services for the console script."""
    monkeypatch.setattr(sys, "argv", ["datecheck", "--help"])

    exit_code = entry.main()

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "check" in captured.out


@pytest.mark.os_agnostic
def test_entry_main_returns_invalid_argument_for_non_numeric_input(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    quiet_tracebacks: None,
) -> None:
    monkeypatch.setattr(sys, "argv", ["datecheck", "check", "3", "fourteen", "2024"])

    exit_code = entry.main()

    assert exit_code == ExitCode.INVALID_ARGUMENT
    assert "Please enter numbers" in capsys.readouterr().err
