"""Immutable value objects passed between the boundary and the analyzer."""

from __future__ import annotations

from dataclasses import dataclass

HexPair = tuple[str, str]
"""Two ``#RRGGBB`` strings: ``#MMDDYY`` first, ``#DDMMYY`` second."""

HslPair = tuple[str, str]
"""Two ``hsl(H, S%, L%)`` strings: month-led first, day-led second."""


@dataclass(frozen=True, slots=True)
class DateInput:
    """A validated (month, day, year) triple.

    Range checks happen in :func:`datecheck.domain.validation.parse_date_input`;
    this record only carries the values.

    Example:
        >>> DateInput(month=3, day=14, year=2024).digit_string
        '3142024'
    """

    month: int
    day: int
    year: int

    @property
    def digit_string(self) -> str:
        """Month, day and year concatenated as decimal text without padding."""
        return f"{self.month}{self.day}{self.year}"


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Outcome of every pattern check for one date.

    Attributes:
        is_prime: Digit string is a prime number.
        is_palindrome: Digit string reads the same backwards.
        is_pythagorean: ``day² + month² == year²``.
        is_perfect_power: Digit string equals ``base**exp`` for exp in 2..9.
        is_armstrong: Digit string is a narcissistic number.
        is_equation: Day and month combine arithmetically into the year.
        hex_codes: ``(#MMDDYY, #DDMMYY)``.
        hsl_codes: ``(hsl(M, D%, YY%), hsl(D, M%, YY%))``.
    """

    is_prime: bool
    is_palindrome: bool
    is_pythagorean: bool
    is_perfect_power: bool
    is_armstrong: bool
    is_equation: bool
    hex_codes: HexPair
    hsl_codes: HslPair


__all__ = [
    "AnalysisResult",
    "DateInput",
    "HexPair",
    "HslPair",
]
