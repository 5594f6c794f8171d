"""Strategies proposing icon candidates for a document"""

import logging
from enum import Enum
from typing import Optional
from urllib.parse import urljoin, urlsplit

from bs4 import BeautifulSoup

from siteicons.config import settings
from siteicons.constants import (
    FETCHABLE_SCHEMES,
    LINK_SELECTOR,
    META_SELECTOR,
    SIZES_SEPARATOR,
)
from siteicons.models import Dimensions, DocumentContext, IconCandidate, IconSource

logger = logging.getLogger(__name__)


class Strategy(Enum):
    """Rules that propose icon candidates. None of them perform any I/O."""

    LINK_REL = "link_rel"
    META_TAG = "meta_tag"
    DEFAULT_PATH = "default_path"

    def generate(self, context: DocumentContext) -> list[IconCandidate]:
        """Return the candidates this strategy finds for the document."""
        match self:
            case Strategy.LINK_REL:
                return _link_rel_candidates(context)
            case Strategy.META_TAG:
                return _meta_tag_candidates(context)
            case Strategy.DEFAULT_PATH:
                return _default_path_candidates(context)


def resolve_icon_url(reference: Optional[str], base_url: str) -> Optional[str]:
    """Resolve an icon reference against the document URL.

    Returns None for blank references, references that fail to resolve and
    references that resolve to a scheme that can't be fetched (e.g. `data:`).
    """
    if reference is None or not reference.strip():
        return None

    try:
        url = urljoin(base_url, reference.strip())
        scheme = urlsplit(url).scheme
    except ValueError:
        return None

    if scheme.lower() not in FETCHABLE_SCHEMES:
        return None
    return url


def parse_sizes(sizes: Optional[str]) -> Optional[Dimensions]:
    """Parse a `sizes` attribute such as "32x32".

    Only the first two `x`-separated tokens are read, and both have to be unsigned
    integers. Anything else, including "any", yields no dimensions at all.
    """
    if not sizes:
        return None

    tokens = sizes.split(SIZES_SEPARATOR)
    if len(tokens) < 2:
        return None

    width, height = tokens[0], tokens[1]
    if not (_is_unsigned(width) and _is_unsigned(height)):
        return None
    return Dimensions(width=int(width), height=int(height))


def _is_unsigned(token: str) -> bool:
    return token.isascii() and token.isdigit()


def _attribute(element, name: str) -> Optional[str]:
    value = element.get(name)
    # Multi-valued attributes come back as lists from BeautifulSoup.
    if isinstance(value, list):
        return " ".join(value)
    return value


def _default_path_candidates(context: DocumentContext) -> list[IconCandidate]:
    url = urljoin(context.url, settings.discovery.default_favicon_path)
    return [IconCandidate(url=url, source=IconSource.DEFAULT)]


def _link_rel_candidates(context: DocumentContext) -> list[IconCandidate]:
    page: Optional[BeautifulSoup] = context.page
    if page is None:
        return []

    candidates = []
    for link in page.select(LINK_SELECTOR):
        url = resolve_icon_url(_attribute(link, "href"), context.url)
        if url is None:
            logger.debug(f"Skipping icon link without usable href: {link}")
            continue

        candidates.append(
            IconCandidate(
                url=url,
                declared=parse_sizes(_attribute(link, "sizes")),
                source=IconSource.LINK,
            )
        )
    return candidates


def _meta_tag_candidates(context: DocumentContext) -> list[IconCandidate]:
    page: Optional[BeautifulSoup] = context.page
    if page is None:
        return []

    candidates = []
    for meta in page.select(META_SELECTOR):
        url = resolve_icon_url(_attribute(meta, "content"), context.url)
        if url is None:
            logger.debug(f"Skipping icon meta tag without usable content: {meta}")
            continue

        candidates.append(IconCandidate(url=url, source=IconSource.META))
    return candidates
