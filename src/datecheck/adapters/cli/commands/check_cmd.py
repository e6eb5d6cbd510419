"""Date analysis CLI command.

Contents:
    * :func:`cli_check` - Validate a month/day/year triple, analyze it, render the result.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from datecheck.adapters.report.config import ReportConfig
from datecheck.domain.enums import OutputFormat
from datecheck.domain.errors import ConfigurationError, NonNumericInputError, OutOfRangeError
from datecheck.domain.models import DateInput
from datecheck.domain.validation import parse_date_input

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_PROMPTS = (("month", "Month (MM)"), ("day", "Day (DD)"), ("year", "Year (YYYY)"))


@click.command("check", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("month", required=False)
@click.argument("day", required=False)
@click.argument("year", required=False)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=None,
    help="Output format. Defaults to [datecheck] output_format.",
)
@click.option(
    "--swatch/--no-swatch",
    "show_swatch",
    default=None,
    help="Paint the #MMDDYY colour under the table. Defaults to [datecheck] show_swatch.",
)
@click.pass_context
def cli_check(
    ctx: click.Context,
    month: str | None,
    day: str | None,
    year: str | None,
    output_format: str | None,
    show_swatch: bool | None,
) -> None:
    r"""Check a date for prime, palindrome, Pythagorean and other patterns.

    MONTH (1-12), DAY (1-31) and YEAR (1-2500) are whole numbers. Any that
    are missing are prompted for.

    \b
    Examples:
      datecheck check 3 14 2024
      datecheck check 12 21 2112 --format json
    """
    cli_ctx = get_cli_context(ctx)
    raw = _collect_fields({"month": month, "day": day, "year": year})
    fmt = OutputFormat(output_format.lower()) if output_format else None

    extra = {"command": "check", "month": raw["month"], "day": raw["day"], "year": raw["year"]}
    with lib_log_rich.runtime.bind(job_id="cli-check", extra=extra):
        settings = _load_settings(cli_ctx)
        date = _parse_date(raw)
        logger.info("Analyzing date", extra={"digit_string": date.digit_string})
        result = cli_ctx.services.analyze_date(date)
        logger.debug(
            "Analysis complete",
            extra={"hex_codes": list(result.hex_codes), "is_prime": result.is_prime},
        )
        cli_ctx.services.render_analysis(
            date,
            result,
            settings=settings,
            output_format=fmt,
            show_swatch=show_swatch,
        )


def _collect_fields(fields: dict[str, str | None]) -> dict[str, str]:
    """Fill missing fields from interactive prompts, in month/day/year order."""
    collected: dict[str, str] = {}
    for name, label in _PROMPTS:
        value = fields[name]
        collected[name] = value if value is not None else click.prompt(label, type=str)
    return collected


def _load_settings(cli_ctx: CLIContext) -> ReportConfig:
    """Read report settings, exiting with EX_CONFIG when they are invalid."""
    try:
        return cli_ctx.services.load_report_config_from_dict(cli_ctx.config.as_dict())
    except ConfigurationError as exc:
        logger.error("Invalid report configuration", extra={"error": str(exc)})
        click.echo(f"\nError: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def _parse_date(raw: dict[str, str]) -> DateInput:
    """Validate the raw fields, exiting with a field-specific code on failure."""
    try:
        return parse_date_input(raw["month"], raw["day"], raw["year"])
    except NonNumericInputError as exc:
        logger.warning("Rejected non-numeric date input", extra={"field": exc.field, "raw": exc.raw})
        click.echo(f"Error: {exc}. Please enter numbers for month, day, and year.", err=True)
        raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
    except OutOfRangeError as exc:
        logger.warning("Rejected out-of-range date input", extra={"field": exc.field, "value": exc.value})
        click.echo(f"Error: Invalid date: {exc}.", err=True)
        raise SystemExit(ExitCode.OUT_OF_RANGE) from exc


__all__ = ["cli_check"]
