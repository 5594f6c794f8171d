"""Errors raised while turning an icon candidate into a verified icon.

Every error here is scoped to a single candidate. Discovery logs and drops
the candidate; nothing is retried.
"""

from typing import Optional

import httpx


class IconError(Exception):
    """Base class for all per-candidate failures."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"{message} ({url})")
        self.url = url


class TransportError(IconError):
    """Raised when the request for an icon fails at the network level."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(url, f"Failed to fetch icon: {reason}")


class ResponseError(IconError):
    """Base class for failures that come with an HTTP response."""

    def __init__(self, url: str, message: str, response: httpx.Response) -> None:
        super().__init__(url, message)
        self.response = response


class BadStatusError(ResponseError):
    """Raised when the icon response status is not 2xx."""

    def __init__(self, url: str, response: httpx.Response) -> None:
        super().__init__(url, f"Unexpected status code {response.status_code}", response)


class MissingContentTypeError(ResponseError):
    """Raised when the response has no Content-Type header, or one that can't be parsed."""

    def __init__(self, url: str, response: httpx.Response) -> None:
        super().__init__(url, "Missing or unparseable Content-Type", response)


class UnrecognizedContentTypeError(ResponseError):
    """Raised when the Content-Type is not a supported image type."""

    def __init__(self, url: str, response: httpx.Response, content_type: str) -> None:
        super().__init__(url, f"Unsupported Content-Type {content_type!r}", response)
        self.content_type = content_type


class ContentTooLargeError(IconError):
    """Raised when the icon body exceeds the configured size limit."""

    def __init__(self, url: str, size: int, limit: int) -> None:
        super().__init__(url, f"Icon body of {size} bytes exceeds limit of {limit} bytes")
        self.size = size
        self.limit = limit


class DecodeError(IconError):
    """Raised when the image bytes are corrupt or don't match the declared format."""

    def __init__(self, url: str, image_format: str, reason: Optional[str] = None) -> None:
        message = f"Failed to decode {image_format} image"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(url, message)
        self.image_format = image_format
