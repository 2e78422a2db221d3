# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Unit tests for loading the resolver configuration from settings."""

from typing import Any

import pytest

from adaptive_images.config import settings
from adaptive_images.exceptions import ConfigurationError
from adaptive_images.resolver import ResolverConfig, Variant, load_resolver_config


def test_load_resolver_config_from_settings() -> None:
    """Test that the testing settings load into a valid configuration."""
    config: ResolverConfig = load_resolver_config(settings.resolver)

    assert config.breakpoints == (1382, 992, 768, 480)
    assert config.cookie_name == "resolution"
    assert config.mobile_first is False
    assert config.variant is Variant.EXTENDED
    assert config.database == "web"
    assert config.max_width is None


@pytest.mark.parametrize(
    "resolutions",
    ["1382, 992,768,480,992", [1382, 992, 768, 480, 992], ["1382", "992", "768", "480"]],
    ids=["string", "list", "list_of_strings"],
)
def test_load_resolver_config_resolutions(resolutions: Any) -> None:
    """Test that breakpoints are read from a comma-separated string or a list."""
    config = load_resolver_config({"resolutions": resolutions, "cookie_name": "resolution"})

    assert config.breakpoints == (1382, 992, 768, 480)


@pytest.mark.parametrize(
    ["mobile_first", "expected"],
    [(True, True), (False, False), ("true", True), ("TRUE", True), ("yes", False), (None, False)],
)
def test_load_resolver_config_mobile_first(mobile_first: Any, expected: bool) -> None:
    """Test that mobile first is only on for a case-insensitive "true"."""
    config = load_resolver_config(
        {"resolutions": "480", "cookie_name": "resolution", "mobile_first": mobile_first}
    )

    assert config.mobile_first is expected


@pytest.mark.parametrize(
    ["max_width", "expected"],
    [("", None), (None, None), (0, None), ("0", None), (1600, 1600), ("1600", 1600)],
)
def test_load_resolver_config_max_width(max_width: Any, expected: int | None) -> None:
    """Test that the max width is optional and may be given as a string."""
    config = load_resolver_config(
        {"resolutions": "480", "cookie_name": "resolution", "max_width": max_width}
    )

    assert config.max_width == expected


def test_load_resolver_config_legacy_variant() -> None:
    """Test that the legacy variant is selectable and empty databases mean any database."""
    config = load_resolver_config(
        {"resolutions": "480", "cookie_name": "resolution", "variant": "legacy", "database": ""}
    )

    assert config.variant is Variant.LEGACY
    assert not config.density_aware
    assert config.database is None


@pytest.mark.parametrize(
    "resolver_settings",
    [
        {"cookie_name": "resolution"},
        {"resolutions": "", "cookie_name": "resolution"},
        {"resolutions": [], "cookie_name": "resolution"},
        {"resolutions": "480,,768", "cookie_name": "resolution"},
        {"resolutions": "480,wide", "cookie_name": "resolution"},
        {"resolutions": "480,-768", "cookie_name": "resolution"},
        {"resolutions": 480, "cookie_name": "resolution"},
        {"resolutions": "480"},
        {"resolutions": "480", "cookie_name": ""},
        {"resolutions": "480", "cookie_name": "resolution", "variant": "modern"},
        {"resolutions": "480", "cookie_name": "resolution", "max_width": "wide"},
        {"resolutions": "480", "cookie_name": "resolution", "max_width": -1},
        {"resolutions": "480", "cookie_name": "resolution", "max_width": True},
        {"resolutions": [480, 4294967296], "cookie_name": "resolution"},
        {"resolutions": "480", "cookie_name": "resolution", "max_width": 4294967296},
    ],
    ids=[
        "missing_resolutions",
        "empty_resolutions",
        "empty_resolution_list",
        "empty_breakpoint",
        "non_numeric_breakpoint",
        "negative_breakpoint",
        "scalar_resolutions",
        "missing_cookie_name",
        "empty_cookie_name",
        "unknown_variant",
        "non_numeric_max_width",
        "negative_max_width",
        "boolean_max_width",
        "overflowing_breakpoint",
        "overflowing_max_width",
    ],
)
def test_load_resolver_config_invalid(resolver_settings: dict[str, Any]) -> None:
    """Test that invalid settings fail with a ConfigurationError."""
    with pytest.raises(ConfigurationError):
        load_resolver_config(resolver_settings)


def test_load_resolver_config_default_database() -> None:
    """Test that the default settings rewrite images from any database."""
    default_settings = settings.from_env("development")

    config = load_resolver_config(default_settings.resolver)

    assert default_settings.resolver.database == ""
    assert config.database is None
