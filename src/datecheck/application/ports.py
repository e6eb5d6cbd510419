"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature matches
the corresponding adapter function, so plain module-level functions satisfy
them through structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``ReportConfig``) are imported under ``TYPE_CHECKING`` only.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat
from ..domain.models import AnalysisResult, DateInput

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.report.config import ReportConfig


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the path to the bundled default configuration file."""

    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class AnalyzeDate(Protocol):
    """Run every pattern check against a validated date."""

    def __call__(self, date: DateInput) -> AnalysisResult: ...


class LoadReportConfigFromDict(Protocol):
    """Load ReportConfig from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> ReportConfig: ...


class RenderAnalysis(Protocol):
    """Render an analysis result for the user."""

    def __call__(
        self,
        date: DateInput,
        result: AnalysisResult,
        *,
        settings: ReportConfig,
        output_format: OutputFormat | None = ...,
        show_swatch: bool | None = ...,
    ) -> None: ...


__all__ = [
    "AnalyzeDate",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadReportConfigFromDict",
    "RenderAnalysis",
]
