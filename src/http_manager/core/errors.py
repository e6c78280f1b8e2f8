"""Errors raised by the HTTP manager."""


class HttpManagerError(Exception):
    """Base exception for HTTP manager errors."""
    pass


class UrlParseError(HttpManagerError):
    """Exception raised when a base URL cannot be parsed."""
    pass


class UrlJoinError(HttpManagerError):
    """Exception raised when a path cannot be joined onto a base URL."""
    pass


class RequestBuildError(HttpManagerError):
    """Exception raised when a request cannot be constructed."""
    pass


class TransportError(HttpManagerError):
    """Exception raised when the connection or send fails."""
    pass


class TimeoutError(HttpManagerError):
    """Exception raised when a request does not complete within its timeout."""
    pass


class UnexpectedStatusError(HttpManagerError):
    """Exception raised when a response has a non-success status code."""

    def __init__(self, status_code: int, is_server_error: bool):
        self.status_code = status_code
        self.is_server_error = is_server_error
        super().__init__(
            f"unexpected HTTP response code {status_code} (server error {str(is_server_error).lower()})"
        )


class BodyReadError(HttpManagerError):
    """Exception raised when a response body cannot be read."""
    pass


class DownloadError(HttpManagerError):
    """Exception raised when a file download fails."""
    pass
