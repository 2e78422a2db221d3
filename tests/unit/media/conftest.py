# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Module for test fixtures for the media unit test directory."""

from typing import Any

import pytest
from aiodogstatsd import Client
from pytest_mock import MockerFixture

from adaptive_images.media.backends.query_string import QueryStringUrlBuilder


@pytest.fixture(name="metrics_client")
def fixture_metrics_client(mocker: MockerFixture) -> Any:
    """Return a mock aiodogstatsd Client instance."""
    return mocker.Mock(spec=Client)


@pytest.fixture(name="url_builder")
def fixture_url_builder() -> QueryStringUrlBuilder:
    """Return a query string URL builder."""
    return QueryStringUrlBuilder(url_prefix="/-/media", extension="ashx")
