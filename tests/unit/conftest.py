# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Module for test configurations for the unit test directory."""

import pytest
from bs4 import BeautifulSoup

from siteicons.constants import PARSER
from siteicons.models import DocumentContext
from tests.types import DocumentFixture


@pytest.fixture(scope="session", name="document")
def fixture_document() -> DocumentFixture:
    """Return a function that parses markup into a DocumentContext for a base URL."""

    def document(html: str, url: str = "http://example.com/") -> DocumentContext:
        """Parse `html` the same way the scraper does."""
        return DocumentContext(url=url, page=BeautifulSoup(html, PARSER))

    return document
