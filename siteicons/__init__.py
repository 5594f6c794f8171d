"""Discover and rank the icons of a web page."""

from siteicons.collection import IconCollection
from siteicons.models import Dimensions, DocumentContext, Icon, IconCandidate, IconSource
from siteicons.resolver import IconResolver
from siteicons.scraper import IconScraper, fetch_icons
from siteicons.strategies import Strategy

__all__ = [
    "Dimensions",
    "DocumentContext",
    "Icon",
    "IconCandidate",
    "IconCollection",
    "IconResolver",
    "IconScraper",
    "IconSource",
    "Strategy",
    "fetch_icons",
]
