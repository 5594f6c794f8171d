# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Fixtures shared by all test modules."""

import os
from io import BytesIO
from logging import LogRecord
from typing import Callable, Mapping

import httpx
import pytest
from PIL import Image as PILImage

os.environ.setdefault("SITEICONS_ENV", "testing")

from siteicons.utils.http_client import create_http_client  # noqa: E402
from tests.types import (  # noqa: E402
    ImageBytesFixture,
    MockHttpClientFixture,
    RequestLogFixture,
    Route,
)

FilterCaplogFixture = Callable[[list[LogRecord], str], list[LogRecord]]


@pytest.fixture(scope="session", name="filter_caplog")
def fixture_filter_caplog() -> FilterCaplogFixture:
    """
    Return a function that will filter pytest captured log records for a given logger
    name
    """

    def filter_caplog(records: list[LogRecord], logger_name: str) -> list[LogRecord]:
        """
        Filter pytest captured log records for a given logger name
        """
        return [record for record in records if record.name == logger_name]

    return filter_caplog


@pytest.fixture(scope="session", name="image_bytes")
def fixture_image_bytes() -> ImageBytesFixture:
    """Return a function that renders a blank image of the given size and Pillow format."""

    def image_bytes(width: int, height: int, image_format: str = "PNG") -> bytes:
        """Render a blank `width` x `height` image encoded as `image_format`."""
        mode = "RGB" if image_format in ("JPEG", "GIF") else "RGBA"
        image = PILImage.new(mode, (width, height))
        buffer = BytesIO()
        if image_format == "ICO":
            image.save(buffer, format="ICO", sizes=[(width, height)])
        else:
            image.save(buffer, format=image_format)
        return buffer.getvalue()

    return image_bytes


@pytest.fixture(name="request_log")
def fixture_request_log() -> RequestLogFixture:
    """Return the list of requests sent through the mock HTTP client."""
    return []


@pytest.fixture(name="mock_http_client")
def fixture_mock_http_client(request_log: RequestLogFixture) -> MockHttpClientFixture:
    """Return a function that creates an `httpx.AsyncClient` backed by a mock transport.

    Requests are answered from a mapping of URL to route. A route is either a response,
    copied for every request, or an exception that is raised. Unknown URLs get a 404.
    Every request is appended to `request_log`.
    """

    def mock_http_client(routes: Mapping[str, Route]) -> httpx.AsyncClient:
        def handler(request: httpx.Request) -> httpx.Response:
            request_log.append(request)
            route = routes.get(str(request.url))
            if route is None:
                return httpx.Response(404, headers={"Content-Type": "text/html"})
            if isinstance(route, Exception):
                raise route
            return httpx.Response(
                route.status_code, headers=route.headers, content=route.content
            )

        return create_http_client(transport=httpx.MockTransport(handler))

    return mock_http_client
