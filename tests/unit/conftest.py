# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Module for test configurations for the unit test directory."""

from typing import Any, Callable

import pytest

from adaptive_images.resolver import BreakpointResolver, ResolverConfig

ResolverFactory = Callable[..., BreakpointResolver]


@pytest.fixture(name="resolver_config")
def fixture_resolver_config() -> ResolverConfig:
    """Return a resolver configuration with unsorted breakpoints."""
    return ResolverConfig(breakpoints=(1382, 992, 768, 480), cookie_name="resolution")


@pytest.fixture(name="make_resolver")
def fixture_make_resolver() -> ResolverFactory:
    """Return a function that will create a BreakpointResolver for the given settings."""

    def make_resolver(*breakpoints: int, **kwargs: Any) -> BreakpointResolver:
        """Create a BreakpointResolver for `breakpoints`, in the given order."""
        kwargs.setdefault("cookie_name", "resolution")
        return BreakpointResolver(ResolverConfig(breakpoints=breakpoints, **kwargs))

    return make_resolver
