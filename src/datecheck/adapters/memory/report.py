"""In-memory report adapters for testing.

Contents:
    * :class:`ReportSpy` - Captures render calls for test assertions.
    * :func:`load_report_config_from_dict_in_memory` - Config loader without validation errors.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ...domain.enums import OutputFormat
from ...domain.models import AnalysisResult, DateInput
from ..report.config import REPORT_SECTION, ReportConfig


@dataclass(frozen=True, slots=True)
class RenderedReport:
    """One captured ``render_analysis`` call."""

    date: DateInput
    result: AnalysisResult
    settings: ReportConfig
    output_format: OutputFormat | None
    show_swatch: bool | None


@dataclass
class ReportSpy:
    """Records every report instead of printing it.

    Each test should create its own spy. :meth:`render_analysis` matches
    the RenderAnalysis protocol expected by AppServices.

    Example:
        >>> from datecheck.domain.analyzer import analyze
        >>> spy = ReportSpy()
        >>> spy.render_analysis(DateInput(3, 14, 2024), analyze(3, 14, 2024), settings=ReportConfig())
        >>> spy.last.result.hex_codes
        ('#031424', '#140324')
    """

    reports: list[RenderedReport] = field(default_factory=list)

    def render_analysis(
        self,
        date: DateInput,
        result: AnalysisResult,
        *,
        settings: ReportConfig,
        output_format: OutputFormat | None = None,
        show_swatch: bool | None = None,
    ) -> None:
        self.reports.append(
            RenderedReport(
                date=date,
                result=result,
                settings=settings,
                output_format=output_format,
                show_swatch=show_swatch,
            )
        )

    @property
    def last(self) -> RenderedReport:
        """Most recent captured report.

        Raises:
            LookupError: If nothing has been rendered yet.
        """
        if not self.reports:
            raise LookupError("No report has been rendered")
        return self.reports[-1]


def load_report_config_from_dict_in_memory(config_dict: Mapping[str, Any]) -> ReportConfig:
    """Build ReportConfig from the ``datecheck`` section, ignoring a malformed section."""
    section = config_dict.get(REPORT_SECTION, {})
    return ReportConfig.model_validate(dict(section) if isinstance(section, Mapping) else {})


__all__ = [
    "RenderedReport",
    "ReportSpy",
    "load_report_config_from_dict_in_memory",
]
