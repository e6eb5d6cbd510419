"""Parse ``--set SECTION.KEY=VALUE`` options and merge them into a Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Union of types that :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed ``--set`` option."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` into a ConfigOverride.

    The first ``=`` ends the dotted path; the first dot ends the section.

    Raises:
        ValueError: If ``=`` is missing, the path has no dot, or any path
            component is empty.

    Examples:
        >>> override = parse_override("datecheck.output_format=json")
        >>> override.section, override.key_path, override.value
        ('datecheck', ('output_format',), 'json')

        >>> parse_override("datecheck.show_swatch=false").value
        False
    """
    path, has_value, value_text = raw.partition("=")
    if not has_value:
        raise _invalid(raw, "must contain '='")

    section, has_key, key_text = path.partition(".")
    if not has_key:
        raise _invalid(raw, "key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise _invalid(raw, "section name is empty")

    key_path = tuple(key_text.split("."))
    if "" in key_path:
        raise _invalid(raw, "key path contains empty component")

    return ConfigOverride(section=section, key_path=key_path, value=coerce_value(value_text))


def _invalid(raw: str, reason: str) -> ValueError:
    return ValueError(f"Invalid override {raw!r}: {reason}")


def coerce_value(raw: str) -> CoercedValue:
    """Decode *raw* as JSON, or return it unchanged when it is not JSON.

    Examples:
        >>> coerce_value("true"), coerce_value("42"), coerce_value("human")
        (True, 42, 'human')
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    *parents, leaf = override.key_path
    node: dict[str, object] = target.setdefault(override.section, {})
    for depth, part in enumerate(parents):
        child = node.get(part)
        if child is None:
            child = node[part] = {}
        elif not isinstance(child, dict):
            walked = ".".join((override.section, *parents[: depth + 1]))
            raise TypeError(f"Expected dict at key {part!r}, got {type(child).__name__} ({walked})")
        node = cast("dict[str, object]", child)
    node[leaf] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return *config* with every ``--set`` override deep-merged in.

    Later overrides win over earlier ones for the same key. Returns the
    original object untouched when there are no overrides.

    Raises:
        ValueError: If any override string is malformed.

    Examples:
        >>> cfg = Config({"datecheck": {"show_swatch": True}}, {})
        >>> apply_overrides(cfg, ("datecheck.show_swatch=false",))["datecheck"]["show_swatch"]
        False
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    parsed = [parse_override(raw) for raw in raw_overrides]
    merged: dict[str, dict[str, object]] = {}
    for override in parsed:
        _nest_override(merged, override)
    return config.with_overrides(merged)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
