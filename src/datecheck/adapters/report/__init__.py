"""Report adapter - settings model and result rendering.

Contents:
    * :mod:`.config` - ReportConfig model and loader for the ``[datecheck]`` section
    * :mod:`.render` - Rich table and JSON rendering of analysis results
"""

from __future__ import annotations

from .config import ReportConfig, load_report_config_from_dict
from .render import render_analysis

__all__ = [
    "ReportConfig",
    "load_report_config_from_dict",
    "render_analysis",
]
