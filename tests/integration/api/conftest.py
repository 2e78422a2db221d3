# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Module for test configurations for the API integration test directory."""

from typing import Any, Iterator

import pytest
from aiodogstatsd import Client
from pytest_mock import MockerFixture
from starlette.testclient import TestClient

from adaptive_images import media
from adaptive_images.config import settings
from adaptive_images.main import app
from adaptive_images.media.backends.query_string import QueryStringUrlBuilder
from adaptive_images.media.provider import Provider
from adaptive_images.resolver import BreakpointResolver, load_resolver_config


@pytest.fixture(name="metrics_client", autouse=True)
def fixture_metrics_client(mocker: MockerFixture) -> Any:
    """Replace the StatsD client used by the metrics middleware with a mock."""
    metrics_client = mocker.Mock(spec=Client)
    mocker.patch(
        "adaptive_images.middleware.metrics.get_metrics_client", return_value=metrics_client
    )
    return metrics_client


@pytest.fixture(name="provider")
def fixture_provider(metrics_client: Any) -> Provider:
    """Return a media provider built from the testing settings."""
    return Provider(
        resolver=BreakpointResolver(load_resolver_config(settings.resolver)),
        url_builder=QueryStringUrlBuilder(
            url_prefix=settings.media.url_prefix, extension=settings.media.extension
        ),
        metrics_client=metrics_client,
    )


@pytest.fixture(autouse=True)
def inject_provider(monkeypatch: pytest.MonkeyPatch, provider: Provider) -> None:
    """Install `provider` as the process-wide media provider."""
    monkeypatch.setattr(media, "provider", provider)


@pytest.fixture(name="client")
def fixture_test_client() -> TestClient:
    """Return a FastAPI TestClient instance.

    Note that this will NOT trigger the lifespan handler of the app, see:
    https://fastapi.tiangolo.com/advanced/testing-events/
    """
    return TestClient(app)


@pytest.fixture(name="client_with_events")
def fixture_test_client_with_events() -> Iterator[TestClient]:
    """Return a FastAPI TestClient instance that runs the lifespan handler."""
    with TestClient(app) as client:
        yield client
