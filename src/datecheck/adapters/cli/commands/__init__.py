"""CLI command implementations.

Contents:
    * Date analysis command from :mod:`.check_cmd`
    * Config command from :mod:`.config`
    * Info command from :mod:`.info`
"""

from __future__ import annotations

from .check_cmd import cli_check
from .config import cli_config
from .info import cli_info

__all__ = [
    "cli_check",
    "cli_config",
    "cli_info",
]
