"""Icon discovery for a web page"""

import asyncio
import logging
from contextlib import nullcontext
from typing import AsyncContextManager, Optional
from urllib.parse import urlsplit

import httpx
from bs4 import BeautifulSoup, ParserRejectedMarkup

from siteicons.collection import IconCollection
from siteicons.config import settings
from siteicons.constants import DOCUMENT_MIME_TYPES, FETCHABLE_SCHEMES, PARSER
from siteicons.exceptions import IconError
from siteicons.mime import parse_mime_type
from siteicons.models import DocumentContext, Icon, IconCandidate
from siteicons.resolver import IconResolver
from siteicons.strategies import Strategy
from siteicons.utils.http_client import create_http_client_from_settings

logger = logging.getLogger(__name__)


class IconScraper:
    """Discover the icons of a single document. Use as async context manager.

    Build instances with `IconScraper.from_http`, which fetches and parses the
    document first.
    """

    def __init__(
        self,
        context: DocumentContext,
        client: httpx.AsyncClient,
        owns_client: bool = False,
        max_concurrency: Optional[int] = None,
    ) -> None:
        self.context = context
        self.client = client
        self.owns_client = owns_client
        self.resolver = IconResolver(client)
        self.max_concurrency = (
            settings.discovery.max_concurrency if max_concurrency is None else max_concurrency
        )

    @classmethod
    async def from_http(
        cls, url: str, client: Optional[httpx.AsyncClient] = None
    ) -> "IconScraper":
        """Fetch and parse the document at `url` and return a scraper for it.

        Failing to fetch or parse the document is not an error: the scraper is then
        left without a page and only proposes the default favicon path.

        Raises:
            ValueError: `url` is not an absolute http(s) URL.
        """
        parts = urlsplit(url)
        if parts.scheme.lower() not in FETCHABLE_SCHEMES or not parts.netloc:
            raise ValueError(f"Expected an absolute http(s) URL, got {url!r}")

        owns_client = client is None
        if client is None:
            client = create_http_client_from_settings()

        context = await fetch_document(client, url)
        return cls(context, client, owns_client=owns_client)

    async def __aenter__(self) -> "IconScraper":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> bool:
        await self.aclose()
        return False

    async def aclose(self) -> None:
        """Close the HTTP client if the scraper created it."""
        if self.owns_client:
            await self.client.aclose()

    def candidates(self) -> list[IconCandidate]:
        """Return the candidates proposed by every strategy, in strategy order."""
        candidates: list[IconCandidate] = []
        for strategy in Strategy:
            candidates.extend(strategy.generate(self.context))
        return candidates

    async def discover(self) -> IconCollection:
        """Search the document for icons and measure every one of them.

        Candidates are resolved concurrently. Those that fail to resolve are logged
        and left out of the collection.

        This performs one request per candidate without declared dimensions, so
        callers should cache the result.
        """
        candidates = self.candidates()
        limiter: AsyncContextManager = (
            asyncio.Semaphore(self.max_concurrency) if self.max_concurrency > 0 else nullcontext()
        )

        async def ensure(candidate: IconCandidate) -> Icon:
            async with limiter:
                return await self.resolver.ensure_dimensions(candidate)

        results = await asyncio.gather(
            *(ensure(candidate) for candidate in candidates), return_exceptions=True
        )

        icons: list[Icon] = []
        for candidate, result in zip(candidates, results):
            if isinstance(result, Icon):
                icons.append(result)
            elif isinstance(result, IconError):
                logger.debug(f"Dropping icon candidate: {result}")
            else:
                logger.warning(f"Unexpected error resolving icon {candidate.url}: {result!r}")

        logger.info(
            f"Discovered {len(icons)} of {len(candidates)} icon candidates for {self.context.url}"
        )
        return IconCollection(icons)


async def fetch_document(client: httpx.AsyncClient, url: str) -> DocumentContext:
    """Fetch and parse a markup document.

    The final URL after redirects becomes the base URL. Any failure leaves the
    context without a page instead of raising.
    """
    try:
        response = await client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.debug(f"Failed to fetch document {url}: {e}")
        return DocumentContext(url=url)

    base_url = str(response.url)

    if not _is_markup(response):
        logger.debug(
            f"Document {base_url} is not markup: {response.headers.get('Content-Type')}"
        )
        return DocumentContext(url=base_url)

    try:
        page = BeautifulSoup(response.text, PARSER)
    except (ParserRejectedMarkup, UnicodeDecodeError) as e:
        logger.debug(f"Failed to parse document {base_url}: {e}")
        return DocumentContext(url=base_url)

    return DocumentContext(url=base_url, page=page)


def _is_markup(response: httpx.Response) -> bool:
    """Return whether the response could hold markup. A missing Content-Type is allowed."""
    header = response.headers.get("Content-Type")
    if header is None:
        return True

    mime_type = parse_mime_type(header)
    if mime_type is None:
        return True
    return mime_type.startswith("text/") or mime_type in DOCUMENT_MIME_TYPES


async def fetch_icons(url: str, client: Optional[httpx.AsyncClient] = None) -> IconCollection:
    """Discover the icons of the document at `url`."""
    async with await IconScraper.from_http(url, client) as scraper:
        return await scraper.discover()
