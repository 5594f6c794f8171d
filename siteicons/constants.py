"""Constants for icon discovery"""

# Candidate selectors. `*=` matches the joined `rel` tokens, so `icon`,
# `shortcut icon` and `apple-touch-icon` are all picked up.
LINK_SELECTOR: str = 'link[rel*="icon" i]'

META_SELECTOR: str = (
    'meta[name="msapplication-TileImage" i], meta[name="apple-touch-icon" i]'
)

PARSER: str = "html.parser"

# Schemes an icon URL may have after resolution. Anything else (`data:`,
# `javascript:`, `mailto:`) can't be fetched.
FETCHABLE_SCHEMES: frozenset[str] = frozenset({"http", "https"})

# Separator of the `sizes` attribute, e.g. "32x32".
SIZES_SEPARATOR: str = "x"

ICON_MIME_TYPE: str = "image/x-icon"

# Supported image mime types and the Pillow format used to decode them.
IMAGE_FORMATS: dict[str, str] = {
    "image/png": "PNG",
    "image/jpeg": "JPEG",
    "image/gif": "GIF",
    "image/x-icon": "ICO",
    "image/vnd.microsoft.icon": "ICO",
}

# Mime types accepted as a markup document besides `text/*`.
DOCUMENT_MIME_TYPES: frozenset[str] = frozenset(
    {"application/xhtml+xml", "application/xml"}
)

REQUEST_HEADERS: dict[str, str] = {
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8"
    ),
    "Accept-Language": "en-GB,en-US;q=0.9,en;q=0.8",
    "DNT": "1",
}
