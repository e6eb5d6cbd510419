"""POSIX-conventional exit codes for CLI error paths.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes following errno and sysexits.h conventions.

    * 0-1: generic success / failure
    * 22: EINVAL, a date field is not a whole number
    * 65: EX_DATAERR, a date field is out of range
    * 78: EX_CONFIG, the ``[datecheck]`` section is invalid

    Example:
        >>> int(ExitCode.OUT_OF_RANGE)
        65
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    OUT_OF_RANGE = 65
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
