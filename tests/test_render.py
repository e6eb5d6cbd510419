"""Report rendering: table labels, markers, swatch, and JSON payload."""

from __future__ import annotations

from io import StringIO

import orjson
import pytest
from rich.console import Console

from datecheck.adapters.report.config import ReportConfig
from datecheck.adapters.report.render import (
    HEX_LABELS,
    HSL_LABELS,
    PREDICATE_LABELS,
    build_payload,
    render_analysis,
    render_json,
)
from datecheck.domain.analyzer import analyze
from datecheck.domain.enums import OutputFormat
from datecheck.domain.models import DateInput

PI_DAY = DateInput(month=3, day=14, year=2024)


def _recording_console() -> Console:
    return Console(file=StringIO(), width=100, force_terminal=False, color_system=None)


def _rendered_text(console: Console) -> str:
    file = console.file
    assert isinstance(file, StringIO)
    return file.getvalue()


@pytest.mark.os_agnostic
def test_human_report_lists_every_label() -> None:
    console = _recording_console()

    render_analysis(PI_DAY, analyze(3, 14, 2024), settings=ReportConfig(), console=console)

    text = _rendered_text(console)
    assert "Results for 3/14/2024" in text
    for _, label in PREDICATE_LABELS:
        assert label in text
    for label in (*HEX_LABELS, *HSL_LABELS):
        assert label in text
    assert "#031424" in text
    assert "#140324" in text
    assert "hsl(3, 14%, 24%)" in text


@pytest.mark.os_agnostic
def test_human_report_uses_configured_markers() -> None:
    console = _recording_console()
    settings = ReportConfig(true_marker="YES", false_marker="NO")

    render_analysis(DateInput(12, 2, 1221), analyze(12, 2, 1221), settings=settings, console=console)

    text = _rendered_text(console)
    assert "YES" in text
    assert "NO" in text


@pytest.mark.os_agnostic
def test_swatch_follows_settings_and_override() -> None:
    with_swatch = _recording_console()
    without_swatch = _recording_console()
    result = analyze(3, 14, 2024)

    render_analysis(PI_DAY, result, settings=ReportConfig(show_swatch=True), console=with_swatch)
    render_analysis(PI_DAY, result, settings=ReportConfig(show_swatch=True), show_swatch=False, console=without_swatch)

    assert _rendered_text(with_swatch).count("#031424") == 2
    assert _rendered_text(without_swatch).count("#031424") == 1


@pytest.mark.os_agnostic
def test_json_report_parses_and_holds_all_fields() -> None:
    console = _recording_console()

    render_analysis(PI_DAY, analyze(3, 14, 2024), settings=ReportConfig(), output_format=OutputFormat.JSON, console=console)

    payload = orjson.loads(_rendered_text(console))
    assert payload["date"] == {"month": 3, "day": 14, "year": 2024, "digit_string": "3142024"}
    assert payload["result"]["hex_codes"] == ["#031424", "#140324"]
    assert payload["result"]["is_prime"] is False
    assert len(payload["result"]) == 8


@pytest.mark.os_agnostic
def test_json_setting_is_used_when_no_override_given() -> None:
    console = _recording_console()

    render_analysis(PI_DAY, analyze(3, 14, 2024), settings=ReportConfig(output_format=OutputFormat.JSON), console=console)

    assert orjson.loads(_rendered_text(console))["date"]["digit_string"] == "3142024"


@pytest.mark.os_agnostic
def test_render_json_matches_payload() -> None:
    result = analyze(3, 14, 2024)
    assert orjson.loads(render_json(PI_DAY, result)) == orjson.loads(orjson.dumps(build_payload(PI_DAY, result)))
