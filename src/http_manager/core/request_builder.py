"""Builders for GET and JSON POST requests."""

import httpx

from .errors import RequestBuildError, UrlParseError, UrlJoinError
from .urls import join_uri

JSON_CONTENT_TYPE = "application/json"


def create_get(url: str, path: str) -> httpx.Request:
    """Create a simple GET request with no header and no body.

    Raises:
        RequestBuildError: If the URL cannot be joined or the request built
    """
    try:
        uri = join_uri(url, path)
    except (UrlParseError, UrlJoinError) as e:
        raise RequestBuildError(f"failed to create request {e}") from e

    try:
        return httpx.Request("GET", uri)
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise RequestBuildError(f"failed to create request {e}") from e


def create_json_post(url: str, path: str, data: str) -> httpx.Request:
    """Create a POST request with a JSON content-type header and body.

    The body is sent as given; it is not re-serialized.

    Raises:
        RequestBuildError: If the URL cannot be joined or the request built
    """
    try:
        uri = join_uri(url, path)
    except (UrlParseError, UrlJoinError) as e:
        raise RequestBuildError(f"failed to create request {e}") from e

    try:
        return httpx.Request(
            "POST",
            uri,
            headers={"content-type": JSON_CONTENT_TYPE},
            content=data.encode("utf-8"),
        )
    except (httpx.InvalidURL, TypeError, ValueError, AttributeError) as e:
        raise RequestBuildError(f"failed to create request {e}") from e
