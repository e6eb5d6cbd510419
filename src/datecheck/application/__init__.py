"""Application layer - port definitions.

Contains the port protocols that define the interfaces for adapter
implementations wired together in :mod:`datecheck.composition`.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import (
    AnalyzeDate,
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    LoadReportConfigFromDict,
    RenderAnalysis,
)

__all__ = [
    "AnalyzeDate",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadReportConfigFromDict",
    "RenderAnalysis",
]
