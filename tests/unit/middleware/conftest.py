# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Module for test fixtures for the middleware unit test directory."""

from typing import Any

import pytest
from pytest_mock import MockerFixture
from starlette.types import Receive, Scope, Send

MACINTOSH_FIREFOX_UA = (
    b"Mozilla/5.0 (Macintosh; Intel Mac OS X 11.2; rv:85.0) Gecko/20100101 Firefox/103.0"
)


@pytest.fixture(name="scope")
def fixture_scope() -> Scope:
    """Create an HTTP Scope for a media URL request from a desktop Firefox."""
    scope: Scope = {
        "type": "http",
        "method": "GET",
        "scheme": "http",
        "server": ("testserver", 80),
        "path": "/api/v1/media/url",
        "query_string": b"path=images/hero.jpg&mime_type=image/jpeg",
        "headers": [(b"user-agent", MACINTOSH_FIREFOX_UA)],
    }
    return scope


@pytest.fixture(name="receive_mock")
def fixture_receive_mock(mocker: MockerFixture) -> Any:
    """Create a Receive mock object for test"""
    return mocker.AsyncMock(spec=Receive)


@pytest.fixture(name="send_mock")
def fixture_send_mock(mocker: MockerFixture) -> Any:
    """Create a Send mock object for test"""
    return mocker.AsyncMock(spec=Send)
