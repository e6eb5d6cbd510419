"""Domain layer - pure date analysis with no I/O or framework dependencies.

Contents:
    * :mod:`.analyzer` - Pattern predicates and the :func:`analyze` entry point
    * :mod:`.models` - ``DateInput`` and ``AnalysisResult`` value objects
    * :mod:`.validation` - Text-to-``DateInput`` boundary checks
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .analyzer import analyze, analyze_input
from .enums import OutputFormat
from .errors import ConfigurationError, DateInputError, NonNumericInputError, OutOfRangeError
from .models import AnalysisResult, DateInput
from .validation import parse_date_input

__all__ = [
    # Analyzer
    "analyze",
    "analyze_input",
    # Models
    "AnalysisResult",
    "DateInput",
    # Validation
    "parse_date_input",
    # Enums
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "DateInputError",
    "NonNumericInputError",
    "OutOfRangeError",
]
