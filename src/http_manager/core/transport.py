"""Transport selection and httpx client construction."""

import logging
from enum import Enum
from typing import Optional

import httpx
from pydantic import BaseModel, ConfigDict

from .config import HttpClientSettings
from .errors import TransportError

logger = logging.getLogger(__name__)


class TransportKind(str, Enum):
    """Supported transport kinds."""
    PLAIN = "plain"
    TLS = "tls"


class Transport(BaseModel):
    """Transport chosen once per call.

    ``insecure`` only applies to TLS and disables certificate chain and
    hostname validation.
    """

    model_config = ConfigDict(frozen=True)

    kind: TransportKind
    insecure: bool = False

    def check_scheme(self, url: httpx.URL) -> None:
        """Reject URLs this transport cannot carry.

        Raises:
            TransportError: If a plain transport is asked to send to https
        """
        if self.kind == TransportKind.PLAIN and url.scheme == "https":
            raise TransportError(f"failed to fetch response invalid URL, scheme is not http: {url}")


def select_transport(is_https: bool, insecure: bool = False) -> Transport:
    """Select the plain or TLS transport for a call."""
    if not is_https:
        return Transport(kind=TransportKind.PLAIN)
    return Transport(kind=TransportKind.TLS, insecure=insecure)


async def _log_request(request: httpx.Request) -> None:
    logger.debug(f"-> {request.method} {request.url}")


async def _log_response(response: httpx.Response) -> None:
    request = response.request
    logger.debug(f"<- {request.method} {request.url} {response.status_code} {response.http_version}")


def build_client(
    transport: Transport,
    timeout: Optional[float],
    settings: HttpClientSettings,
    follow_redirects: bool = False,
    mock_transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Create an async client for a single call.

    Args:
        transport: Selected transport
        timeout: Per-operation timeout in seconds, None for no limit
        settings: HTTP client settings supplying the connect timeout and user agent
        follow_redirects: Whether the client follows redirects
        mock_transport: Optional httpx transport replacing the network

    Returns:
        An unopened httpx.AsyncClient; the caller owns and closes it
    """
    timeout_config = httpx.Timeout(timeout, connect=settings.connect_timeout)

    client_kwargs = {
        "timeout": timeout_config,
        "headers": {"User-Agent": settings.user_agent},
        "follow_redirects": follow_redirects,
    }

    if transport.kind == TransportKind.TLS and transport.insecure:
        client_kwargs["verify"] = False

    if settings.connection_verbose:
        client_kwargs["event_hooks"] = {
            "request": [_log_request],
            "response": [_log_response],
        }

    if mock_transport is not None:
        client_kwargs["transport"] = mock_transport

    return httpx.AsyncClient(**client_kwargs)
