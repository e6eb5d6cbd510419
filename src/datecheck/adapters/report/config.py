"""Report configuration model and loader.

Provides the ReportConfig Pydantic model for validated, immutable report
settings read from the ``[datecheck]`` configuration section.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from datecheck.domain.enums import OutputFormat
from datecheck.domain.errors import ConfigurationError

#: Name of the configuration section holding report settings.
REPORT_SECTION = "datecheck"


class ReportConfig(BaseModel):
    """Validated, immutable report settings.

    Example:
        >>> config = ReportConfig(output_format="json", show_swatch=False)
        >>> config.output_format
        <OutputFormat.JSON: 'json'>
        >>> config.true_marker
        '✅'
    """

    model_config = ConfigDict(frozen=True)

    output_format: OutputFormat = OutputFormat.HUMAN
    show_swatch: bool = True
    true_marker: str = "✅"
    false_marker: str = "❌"

    @field_validator("output_format", mode="before")
    @classmethod
    def _normalise_format(cls, v: Any) -> Any:
        """Accept ``JSON``/``Human`` spellings from env vars and TOML.

        Examples:
            >>> ReportConfig._normalise_format(" JSON ")
            'json'
        """
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("true_marker", "false_marker")
    @classmethod
    def _reject_blank_marker(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("marker must not be blank")
        return v


def load_report_config_from_dict(config_dict: Mapping[str, Any]) -> ReportConfig:
    """Load ReportConfig from a configuration dictionary.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.
            Settings are read from its ``datecheck`` section.

    Returns:
        Report settings with defaults for missing values.

    Raises:
        ConfigurationError: If the section is not a table or holds invalid values.

    Example:
        >>> load_report_config_from_dict({"datecheck": {"output_format": "json"}}).output_format.value
        'json'
        >>> load_report_config_from_dict({}).show_swatch
        True
    """
    section: Any = config_dict.get(REPORT_SECTION, {})
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"[{REPORT_SECTION}] must be a table, got {type(section).__name__}")

    try:
        return ReportConfig.model_validate(dict(cast(Mapping[str, Any], section)))
    except ValidationError as exc:
        problems = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())
        raise ConfigurationError(f"Invalid [{REPORT_SECTION}] configuration: {problems}") from exc


__all__ = [
    "REPORT_SECTION",
    "ReportConfig",
    "load_report_config_from_dict",
]
