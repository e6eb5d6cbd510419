"""Render analysis results as a Rich table or as JSON.

The human format is a two-column table:
one row per predicate with a check/cross marker, the two hex codes, the two
HSL codes, and a swatch painted in the ``#MMDDYY`` colour.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

import lib_log_rich.runtime
import orjson
from rich.console import Console
from rich.table import Table
from rich.text import Text

from datecheck.domain.enums import OutputFormat
from datecheck.domain.models import AnalysisResult, DateInput

from .config import ReportConfig

#: Display label for each boolean field, in display order.
PREDICATE_LABELS: tuple[tuple[str, str], ...] = (
    ("is_prime", "Prime"),
    ("is_palindrome", "Palindrome"),
    ("is_pythagorean", "Pythagorean"),
    ("is_perfect_power", "Perfect Power"),
    ("is_armstrong", "Armstrong"),
    ("is_equation", "Equation"),
)

HEX_LABELS = ("Hex #MMDDYY", "Hex #DDMMYY")
HSL_LABELS = ("HSL (MM,DD%,YY%)", "HSL (DD,MM%,YY%)")

SWATCH_WIDTH = 12


def build_payload(date: DateInput, result: AnalysisResult) -> dict[str, Any]:
    """Return the JSON-ready mapping for one analysis.

    Example:
        >>> from datecheck.domain.analyzer import analyze
        >>> payload = build_payload(DateInput(3, 14, 2024), analyze(3, 14, 2024))
        >>> payload["date"]["digit_string"]
        '3142024'
        >>> payload["result"]["hex_codes"]
        ('#031424', '#140324')
    """
    return {
        "date": {
            "month": date.month,
            "day": date.day,
            "year": date.year,
            "digit_string": date.digit_string,
        },
        "result": asdict(result),
    }


def render_json(date: DateInput, result: AnalysisResult) -> str:
    """Serialise one analysis as indented JSON text."""
    return orjson.dumps(build_payload(date, result), option=orjson.OPT_INDENT_2).decode("utf-8")


def build_table(date: DateInput, result: AnalysisResult, *, settings: ReportConfig) -> Table:
    """Build the human-readable results table."""
    table = Table(title=f"Results for {date.month}/{date.day}/{date.year}", show_header=False)
    table.add_column("Check", style="bold")
    table.add_column("Value")

    for field_name, label in PREDICATE_LABELS:
        hit = bool(getattr(result, field_name))
        table.add_row(label, settings.true_marker if hit else settings.false_marker)
    for label, code in zip(HEX_LABELS, result.hex_codes, strict=True):
        table.add_row(label, code)
    for label, code in zip(HSL_LABELS, result.hsl_codes, strict=True):
        table.add_row(label, code)
    return table


def render_analysis(
    date: DateInput,
    result: AnalysisResult,
    *,
    settings: ReportConfig,
    output_format: OutputFormat | None = None,
    show_swatch: bool | None = None,
    console: Console | None = None,
) -> None:
    """Write one analysis to the console.

    Flushes any pending log output first so log lines do not interleave with
    the report.

    Args:
        date: The validated input the result was computed from.
        result: Analysis to render.
        settings: Report settings from the ``[datecheck]`` section.
        output_format: Overrides ``settings.output_format`` when given.
        show_swatch: Overrides ``settings.show_swatch`` when given. Ignored for JSON.
        console: Optional Rich Console, mainly for tests.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    out = console if console is not None else Console()
    fmt = output_format if output_format is not None else settings.output_format

    if fmt is OutputFormat.JSON:
        out.out(render_json(date, result), highlight=False)
        return

    out.print(build_table(date, result, settings=settings))
    swatch = settings.show_swatch if show_swatch is None else show_swatch
    if swatch:
        colour = result.hex_codes[0]
        out.print(Text(" " * SWATCH_WIDTH, style=f"on {colour}"), Text(f" {colour}"))


__all__ = [
    "HEX_LABELS",
    "HSL_LABELS",
    "PREDICATE_LABELS",
    "build_payload",
    "build_table",
    "render_analysis",
    "render_json",
]
