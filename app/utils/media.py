"""
Media type helpers
"""
import re
from typing import Optional

_TOKEN = r"[!#$%&'*+\-.^_`|~0-9a-z]+"
_MEDIA_TYPE_RE = re.compile(rf"^{_TOKEN}/{_TOKEN}$")
_PARAM_RE = re.compile(rf'\s*;\s*({_TOKEN})=({_TOKEN}|"(?:[^"\\]|\\.)*")', re.IGNORECASE)
_TRAILER_RE = re.compile(r"\s*;?\s*")


def parse_media_type(content_type: Optional[str]) -> str:
    """
    Extract the bare media type from a Content-Type header value

    Parameters must be well-formed key=value pairs (value a token or a
    quoted string); they are then dropped and the result is lower-cased.

    Args:
        content_type: Raw header value, e.g. "image/png; charset=binary"

    Returns:
        str: Media type, e.g. "image/png"

    Raises:
        ValueError: If the value is empty, not of the form type/subtype or
            carries a malformed parameter
    """
    if not content_type:
        raise ValueError("missing Content-Type")

    head, sep, params = content_type.partition(";")
    media_type = head.strip().lower()
    if not _MEDIA_TYPE_RE.match(media_type):
        raise ValueError(f"malformed media type: {content_type!r}")

    rest = sep + params
    pos = 0
    match = _PARAM_RE.match(rest, pos)
    while match:
        pos = match.end()
        match = _PARAM_RE.match(rest, pos)

    # A single trailing ";" is tolerated
    if not _TRAILER_RE.fullmatch(rest, pos):
        raise ValueError(f"malformed media parameter: {content_type!r}")

    return media_type
