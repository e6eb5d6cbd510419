"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports that operate entirely
in memory -- no filesystem, no terminal output, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.report` - Report capture (ReportSpy) and settings loader
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
)
from .logging import init_logging_in_memory
from .report import RenderedReport, ReportSpy, load_report_config_from_dict_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from datecheck.application.ports import (
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadReportConfigFromDict,
        RenderAnalysis,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_load_report_config: LoadReportConfigFromDict = load_report_config_from_dict_in_memory
    _assert_render_analysis: RenderAnalysis = ReportSpy().render_analysis

__all__ = [
    "RenderedReport",
    "ReportSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
    "load_report_config_from_dict_in_memory",
]
