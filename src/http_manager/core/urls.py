"""URL joining for base URLs and relative request paths."""

import httpx

from .errors import UrlParseError, UrlJoinError


def parse_url(url: str) -> httpx.URL:
    """Parse an absolute URL.

    Args:
        url: URL string with scheme and host

    Returns:
        Parsed URL

    Raises:
        UrlParseError: If the URL is invalid or not absolute
    """
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as e:
        raise UrlParseError(f"failed to parse client URL {e}") from e

    if not parsed.is_absolute_url:
        raise UrlParseError(f"failed to parse client URL {url!r}: relative URL without a base")
    return parsed


def join_uri(url: str, path: str) -> httpx.URL:
    """Join a relative path onto a base URL.

    A path starting with "/" replaces the base path. A bare relative path
    resolves against the base directory, or against "/" when the base has
    no path, so "http://h:9850", "http://h:9850/" joined with "ext/X" or
    "/ext/X" all give "http://h:9850/ext/X".

    Args:
        url: Base URL
        path: Relative reference, may be empty

    Returns:
        The joined absolute URL, or the parsed base when path is empty

    Raises:
        UrlParseError: If the base URL cannot be parsed
        UrlJoinError: If the path is not a valid relative reference
    """
    uri = parse_url(url)
    if not path:
        return uri

    try:
        joined = uri.join(path)
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise UrlJoinError(f"failed to join parsed URL {e}") from e

    if not joined.is_absolute_url:
        raise UrlJoinError(f"failed to join parsed URL {path!r}: result {joined} is not absolute")
    return joined
