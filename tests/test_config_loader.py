"""Configuration loading: bundled defaults, caching, and profile validation."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from datecheck.adapters.config.loader import get_config, get_default_config_path, validate_profile


@pytest.mark.os_agnostic
def test_default_config_path_points_to_bundled_toml() -> None:
    path = get_default_config_path()

    assert path.name == "defaultconfig.toml"
    assert path.is_file()
    assert get_default_config_path() == path


@pytest.mark.os_agnostic
def test_get_config_includes_bundled_report_defaults(clear_config_cache: None) -> None:
    config = get_config()

    assert config.get("datecheck.show_swatch") in (True, False)
    assert "output_format" in config.as_dict()["datecheck"]


@pytest.mark.os_agnostic
def test_get_config_is_cached_until_cleared(clear_config_cache: None) -> None:
    first = get_config()

    assert get_config() is first
    get_config.cache_clear()
    assert get_config().as_dict() == first.as_dict()


@pytest.mark.os_agnostic
def test_concurrent_get_config_returns_equivalent_results(clear_config_cache: None) -> None:
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = [future.result() for future in [pool.submit(get_config) for _ in range(8)]]

    assert all(result.as_dict() == results[0].as_dict() for result in results)


@pytest.mark.os_agnostic
@pytest.mark.parametrize("profile", ["production", "staging-v2", "test_1"])
def test_validate_profile_accepts_plain_names(profile: str) -> None:
    validate_profile(profile)


@pytest.mark.os_agnostic
@pytest.mark.parametrize("profile", ["../etc", "../etc/passwd", "a/b", ""])
def test_validate_profile_rejects_path_like_names(profile: str) -> None:
    with pytest.raises(ValueError):
        validate_profile(profile)


@pytest.mark.os_agnostic
def test_get_config_rejects_invalid_profile(clear_config_cache: None) -> None:
    with pytest.raises(ValueError):
        get_config(profile="../escape")
