"""http-manager - minimal async HTTP client helpers."""

__version__ = "0.1.0"

from .core.errors import (
    HttpManagerError,
    UrlParseError,
    UrlJoinError,
    RequestBuildError,
    TransportError,
    TimeoutError,
    UnexpectedStatusError,
    BodyReadError,
    DownloadError,
)

from .core.urls import join_uri

from .core.request_builder import (
    JSON_CONTENT_TYPE,
    create_get,
    create_json_post,
)

from .core.transport import (
    Transport,
    TransportKind,
    select_transport,
)

from .core.clients.http import (
    HttpClient,
    read_bytes,
    download_file,
)

from .core.clients.simple_http import (
    SimpleHttpClient,
    get,
    post,
)

from .utils.logging import setup_logging

__all__ = [
    # Errors
    "HttpManagerError",
    "UrlParseError",
    "UrlJoinError",
    "RequestBuildError",
    "TransportError",
    "TimeoutError",
    "UnexpectedStatusError",
    "BodyReadError",
    "DownloadError",
    # URLs and requests
    "join_uri",
    "JSON_CONTENT_TYPE",
    "create_get",
    "create_json_post",
    # Transport
    "Transport",
    "TransportKind",
    "select_transport",
    # Clients
    "HttpClient",
    "read_bytes",
    "download_file",
    "SimpleHttpClient",
    "get",
    "post",
    # Logging
    "setup_logging",
]
