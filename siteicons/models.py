"""Data models for icon discovery"""

from enum import StrEnum
from typing import Optional

from bs4 import BeautifulSoup
from pydantic import BaseModel, ConfigDict, Field


class IconSource(StrEnum):
    """Where an icon reference was found."""

    LINK = "link"
    META = "meta"
    DEFAULT = "default"


class Dimensions(BaseModel):
    """Pixel dimensions of an icon. Width and height are always set together."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(ge=0)
    height: int = Field(ge=0)

    @property
    def area(self) -> int:
        """Return the number of pixels covered by the icon."""
        return self.width * self.height


class IconCandidate(BaseModel):
    """An icon reference proposed by a strategy that has not been fetched yet.

    `declared` holds the dimensions announced by the markup (`sizes="32x32"`), if any.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    declared: Optional[Dimensions] = None
    source: IconSource


class Icon(BaseModel):
    """An icon with known dimensions.

    An icon is either *verified*, in which case `content` and `mime_type` hold the
    fetched bytes and their canonical mime type and `dimensions` was decoded from
    them, or *declared*, in which case `dimensions` was taken from the markup as is
    and nothing was fetched.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    dimensions: Dimensions
    content: Optional[bytes] = None
    mime_type: Optional[str] = None
    source: IconSource

    @classmethod
    def from_declared(cls, candidate: IconCandidate) -> "Icon":
        """Build an icon from a candidate, trusting its declared dimensions."""
        if candidate.declared is None:
            raise ValueError(f"Candidate {candidate.url} has no declared dimensions")
        return cls(url=candidate.url, dimensions=candidate.declared, source=candidate.source)

    @property
    def width(self) -> int:
        """Return the icon width in pixels."""
        return self.dimensions.width

    @property
    def height(self) -> int:
        """Return the icon height in pixels."""
        return self.dimensions.height

    @property
    def verified(self) -> bool:
        """Return whether the icon was fetched and decoded."""
        return self.content is not None


class DocumentContext(BaseModel):
    """The document that icons are discovered for.

    `url` is the base every relative icon reference is resolved against. `page` is
    None when the document could not be fetched or parsed.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    url: str
    page: Optional[BeautifulSoup] = None
