"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path

# Logging services
from ..adapters.logging.setup import init_logging

# Report services
from ..adapters.report.config import load_report_config_from_dict
from ..adapters.report.render import render_analysis

# Domain services
from ..domain.analyzer import analyze_input

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory.report import ReportSpy
    from ..application.ports import (
        AnalyzeDate,
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadReportConfigFromDict,
        RenderAnalysis,
    )

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_analyze_date: AnalyzeDate = analyze_input
    _assert_load_report_config: LoadReportConfigFromDict = load_report_config_from_dict
    _assert_render_analysis: RenderAnalysis = render_analysis


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    init_logging: InitLogging
    analyze_date: AnalyzeDate
    load_report_config_from_dict: LoadReportConfigFromDict
    render_analysis: RenderAnalysis


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        init_logging=init_logging,
        analyze_date=analyze_input,
        load_report_config_from_dict=load_report_config_from_dict,
        render_analysis=render_analysis,
    )


def build_testing(*, spy: ReportSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    The analyzer itself is pure and stays the production one.

    Args:
        spy: Optional ReportSpy capturing rendered reports. When None, a
            fresh spy is created.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        ReportSpy,
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
        load_report_config_from_dict_in_memory,
    )

    report_spy = spy if spy is not None else ReportSpy()

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        analyze_date=analyze_input,
        load_report_config_from_dict=load_report_config_from_dict_in_memory,
        render_analysis=report_spy.render_analysis,
    )


__all__ = [
    # Configuration
    "get_config",
    "get_default_config_path",
    "display_config",
    # Logging
    "init_logging",
    # Report
    "load_report_config_from_dict",
    "render_analysis",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
