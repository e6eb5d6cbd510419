"""Static package metadata surfaced to CLI commands and documentation.

Values are kept as plain module constants so the CLI can render ``--version``
and ``info`` output without importing ``importlib.metadata`` at startup.

Contents:
    * Distribution identifiers (``name``, ``title``, ``version``, ``homepage``).
    * Layered configuration identifiers used by :mod:`lib_layered_config`.
    * :func:`print_info` - Render the metadata block for the ``info`` command.
"""

from __future__ import annotations

name = "datecheck"
title = "Check a calendar date for numeric and colour patterns"
version = "1.0.0"
homepage = "https://github.com/datecheck/datecheck"
author = "datecheck contributors"
author_email = "maintainers@datecheck.dev"
shell_command = "datecheck"

#: Vendor/app/slug triple that decides where lib_layered_config looks for
#: app, host and user configuration files on each platform.
LAYEREDCONF_VENDOR: str = "datecheck"
LAYEREDCONF_APP: str = "datecheck"
LAYEREDCONF_SLUG: str = "datecheck"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for datecheck:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
