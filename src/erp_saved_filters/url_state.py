"""URL query-parameter mirroring of the active saved filter."""

from typing import Optional
from urllib.parse import parse_qsl, quote, unquote_plus, urlsplit, urlunsplit

from .constants import SAVED_FILTER_PARAM


def get_saved_filter_id(url: str) -> Optional[str]:
    """Return the saved filter id selected in a URL, or None.

    Args:
        url: Absolute or relative URL

    Returns:
        The ``saved_filter_id`` value; an empty value reads as None
    """
    query = urlsplit(url).query
    for key, value in parse_qsl(query, keep_blank_values=True):
        if key == SAVED_FILTER_PARAM:
            return value or None
    return None


def with_saved_filter_id(url: str, filter_id: Optional[str]) -> str:
    """Write, replace or clear the saved filter selection of a URL.

    Args:
        url: Absolute or relative URL
        filter_id: Filter id to select; None or "" removes the parameter

    Returns:
        The URL with other query parameters kept in their original order
    """
    parts = urlsplit(url)
    selection = f"{SAVED_FILTER_PARAM}={quote(str(filter_id), safe='')}" if filter_id else None
    segments = []

    # Other parameters are kept byte for byte; only our segments are rewritten
    for segment in parts.query.split("&") if parts.query else []:
        if unquote_plus(segment.split("=", 1)[0]) != SAVED_FILTER_PARAM:
            segments.append(segment)
        elif selection and selection not in segments:
            segments.append(selection)

    if selection and selection not in segments:
        segments.append(selection)

    return urlunsplit((parts.scheme, parts.netloc, parts.path, "&".join(segments), parts.fragment))
