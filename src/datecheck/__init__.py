"""Public package surface exposing the date analyzer, configuration, and metadata.

- Domain exports: the analyzer, its value objects, validation and errors
- Composition exports: wired configuration loader
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.analyzer import analyze, analyze_input
from .domain.errors import ConfigurationError, DateInputError, NonNumericInputError, OutOfRangeError
from .domain.models import AnalysisResult, DateInput
from .domain.validation import parse_date_input

__all__ = [
    "AnalysisResult",
    "ConfigurationError",
    "DateInput",
    "DateInputError",
    "NonNumericInputError",
    "OutOfRangeError",
    "analyze",
    "analyze_input",
    "get_config",
    "parse_date_input",
    "print_info",
]
