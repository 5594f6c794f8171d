"""Resolver turning icon candidates into icons with known dimensions"""

import logging
from io import BytesIO

import httpx
from PIL import Image as PILImage

from siteicons.config import settings
from siteicons.exceptions import (
    BadStatusError,
    ContentTooLargeError,
    DecodeError,
    MissingContentTypeError,
    TransportError,
    UnrecognizedContentTypeError,
)
from siteicons.mime import canonical_image_type, parse_mime_type
from siteicons.models import Dimensions, Icon, IconCandidate

logger = logging.getLogger(__name__)


class IconResolver:
    """Fetch icon candidates and measure them.

    The resolver holds no per-icon state, so a single instance can resolve any
    number of candidates concurrently.
    """

    def __init__(self, client: httpx.AsyncClient, max_content_length: int | None = None) -> None:
        self.client = client
        self.max_content_length = (
            settings.http.max_content_length if max_content_length is None else max_content_length
        )

    async def ensure_dimensions(self, icon: IconCandidate | Icon) -> Icon:
        """Return an icon with dimensions, fetching it only if they are unknown.

        Dimensions declared by the markup are trusted: such a candidate is turned into
        an icon without touching the network.
        """
        if isinstance(icon, Icon):
            return icon
        if icon.declared is not None:
            return Icon.from_declared(icon)
        return await self.resolve(icon)

    async def resolve(self, icon: IconCandidate | Icon) -> Icon:
        """Fetch and decode an icon.

        An icon that already holds its content is returned as is.

        Raises:
            TransportError: The request failed at the network level.
            BadStatusError: The response status is not 2xx.
            MissingContentTypeError: The Content-Type is missing or can't be parsed.
            UnrecognizedContentTypeError: The Content-Type isn't a supported image type.
            ContentTooLargeError: The body exceeds the configured limit.
            DecodeError: The body can't be read as the declared image format.
        """
        if isinstance(icon, Icon) and icon.content is not None:
            return icon

        url = icon.url
        try:
            response = await self.client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(url, str(e) or type(e).__name__) from e

        if not response.is_success:
            raise BadStatusError(url, response)

        header = response.headers.get("Content-Type")
        mime_type = parse_mime_type(header) if header is not None else None
        if mime_type is None:
            raise MissingContentTypeError(url, response)

        image_type = canonical_image_type(mime_type)
        if image_type is None:
            raise UnrecognizedContentTypeError(url, response, mime_type)
        canonical_type, image_format = image_type

        content = response.content
        if self.max_content_length and len(content) > self.max_content_length:
            raise ContentTooLargeError(url, len(content), self.max_content_length)

        dimensions = self._decode_dimensions(url, content, image_format)
        logger.debug(f"Resolved icon {url}: {dimensions.width}x{dimensions.height}")

        return Icon(
            url=url,
            dimensions=dimensions,
            content=content,
            mime_type=canonical_type,
            source=icon.source,
        )

    @staticmethod
    def _decode_dimensions(url: str, content: bytes, image_format: str) -> Dimensions:
        """Decode the image and return its size.

        The pixel data is decoded too, so a body cut short after a valid header is
        rejected instead of being measured by its header alone. Pillow's
        decompression bomb guard rejects headers declaring an oversized image before
        anything is decoded.
        """
        try:
            with PILImage.open(BytesIO(content), formats=[image_format]) as image:
                image.load()
                width, height = image.size
        except (
            OSError,
            SyntaxError,
            ValueError,
            EOFError,
            PILImage.DecompressionBombError,
        ) as e:
            raise DecodeError(url, image_format, str(e)) from e
        return Dimensions(width=width, height=height)
