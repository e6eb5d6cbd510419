"""Click context helpers for CLI state management."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from datecheck.composition import AppServices


class TracebackState(NamedTuple):
    """Traceback flags of ``lib_cli_exit_tools.config`` at one point in time."""

    traceback: bool
    force_color: bool


@dataclass(slots=True)
class CLIContext:
    """Typed state shared by the root group with every subcommand."""

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Replace ``ctx.obj`` with a :class:`CLIContext`.

    The root group receives the services factory in ``ctx.obj``; after this
    call subcommands see the resolved services and configuration instead.

    Args:
        ctx: Click context of the current invocation.
        traceback: Whether verbose tracebacks were requested.
        config: Configuration with ``--set`` overrides already applied.
        services: Wired application services.
        profile: Optional configuration profile name.
        set_overrides: Raw ``--set`` strings, reapplied when a subcommand
            reloads configuration for another profile.
    """
    ctx.obj = CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` stored by the root group.

    Raises:
        RuntimeError: If the root group did not run first.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock()
        >>> ctx.obj = CLIContext(traceback=False, config=MagicMock(), services=MagicMock())
        >>> get_cli_context(ctx).traceback
        False
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Mirror the ``--traceback`` flag into ``lib_cli_exit_tools.config``.

    Colour is forced together with the traceback so Rich keeps highlighting
    when output is piped.

    Example:
        >>> apply_traceback_preferences(True)
        >>> bool(lib_cli_exit_tools.config.traceback)
        True
    """
    restore_traceback_state(TracebackState(traceback=bool(enabled), force_color=bool(enabled)))


def snapshot_traceback_state() -> TracebackState:
    """Capture the current traceback flags for :func:`restore_traceback_state`."""
    settings = lib_cli_exit_tools.config
    return TracebackState(
        traceback=bool(getattr(settings, "traceback", False)),
        force_color=bool(getattr(settings, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Write *state* back into ``lib_cli_exit_tools.config``.

    Plain ``(traceback, force_color)`` tuples are accepted too.
    """
    traceback, force_color = state
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
