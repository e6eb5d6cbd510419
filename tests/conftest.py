"""Shared pytest fixtures for analyzer, CLI and module-entry tests.

- All shared fixtures live here
- Tests receive fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from datecheck.adapters.memory.report import ReportSpy
    from datecheck.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for report output; log records may land on stderr.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from datecheck.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore them after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before the test."""
    from datecheck.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


def _services_with(config: Config | None = None, **overrides: Any) -> AppServices:
    """Production services with ``get_config`` and any named port replaced."""
    from datecheck.composition import build_production

    services = build_production()
    if config is not None:

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        overrides.setdefault("get_config", _fake_get_config)
    return replace(services, **overrides)


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a function turning a config dict into a services factory.

    Example:
        def test_config_display(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"datecheck": {"output_format": "json"}})
            result = cli_runner.invoke(cli, ["config"], obj=factory)
    """

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        services = _services_with(Config(config_data, {}))
        return lambda: services

    return _create


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records every requested profile."""

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        services = _services_with(get_config=_capturing_get_config)
        return lambda: services

    return _inject


@dataclass
class ReportCliContext:
    """Services factory plus the spy that captures rendered reports."""

    factory: Callable[[], Any]
    spy: ReportSpy


@pytest.fixture
def report_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], ReportCliContext]:
    """Create a CLI context whose reports are captured instead of printed.

    Takes the ``[datecheck]`` section contents and returns the factory and
    the spy for assertions on what ``check`` rendered.

    Example:
        def test_check(cli_runner, report_cli_context) -> None:
            ctx = report_cli_context({})
            result = cli_runner.invoke(cli, ["check", "3", "14", "2024"], obj=ctx.factory)
            assert ctx.spy.last.result.hex_codes == ("#031424", "#140324")
    """
    from datecheck.adapters.memory.report import ReportSpy as ReportSpyImpl

    def _create(report_data: dict[str, Any]) -> ReportCliContext:
        spy = ReportSpyImpl()
        services = _services_with(Config({"datecheck": report_data}, {}), render_analysis=spy.render_analysis)
        return ReportCliContext(factory=lambda: services, spy=spy)

    return _create


@pytest.fixture
def failing_analyzer_factory(
    clear_config_cache: None,
) -> Callable[[BaseException], Callable[[], AppServices]]:
    """Return a factory whose analyzer raises the given exception.

    Exercises the CLI boundary's handling of unexpected errors.
    """

    def _create(error: BaseException) -> Callable[[], AppServices]:
        def _explode(date: Any) -> Any:
            raise error

        services = _services_with(Config({}, {}), analyze_date=_explode)
        return lambda: services

    return _create
