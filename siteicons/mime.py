"""Content-Type negotiation for icon responses"""

import re
from typing import Optional

from siteicons.constants import ICON_MIME_TYPE, IMAGE_FORMATS

# RFC 7230 token characters.
_TOKEN = r"[!#$%&'*+.^_`|~0-9A-Za-z-]+"
_MIME_TYPE_PATTERN = re.compile(rf"^\s*({_TOKEN})/({_TOKEN})\s*$")


def parse_mime_type(header: str) -> Optional[str]:
    """Return the lower-cased `type/subtype` of a Content-Type header, or None if it
    can't be parsed. Parameters such as `charset` are ignored.
    """
    match = _MIME_TYPE_PATTERN.match(header.split(";", 1)[0])
    if match is None:
        return None
    return f"{match.group(1)}/{match.group(2)}".lower()


def canonical_image_type(mime_type: str) -> Optional[tuple[str, str]]:
    """Map a parsed mime type to its canonical form and the Pillow format that decodes it.

    Both icon spellings (`image/x-icon`, `image/vnd.microsoft.icon`) collapse into
    `image/x-icon`. Returns None for anything that isn't a supported image type.
    """
    image_format = IMAGE_FORMATS.get(mime_type)
    if image_format is None:
        return None
    if image_format == "ICO":
        return ICON_MIME_TYPE, image_format
    return mime_type, image_format
