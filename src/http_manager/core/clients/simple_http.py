"""Convenience get/post that accept invalid certificates for HTTPS targets.

This stands in for "curl --insecure": whenever the URL scheme is https,
certificate chain and hostname validation are skipped. There is no way to
request validated TLS through this entry point; use HttpClient for that.
"""

import logging
from typing import Optional

import httpx

from ..config import HttpClientSettings
from ..request_builder import create_get, create_json_post
from ..transport import Transport, TransportKind, select_transport
from .http import HttpClient

INSECURE_TRANSPORT = Transport(kind=TransportKind.TLS, insecure=True)


class SimpleHttpClient:
    """Simple HTTP client for one-shot requests without status checks."""

    def __init__(
        self,
        settings: Optional[HttpClientSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the simple HTTP client.

        Args:
            settings: HTTP client configuration settings. If None, will load from environment.
            transport: Optional httpx transport used instead of the network
        """
        self.settings = settings or HttpClientSettings()
        self.logger = logging.getLogger(__name__)
        self._http = HttpClient(self.settings, transport=transport)

    async def get(self, url: str, url_path: str) -> bytes:
        """Make a GET request and return the raw response body.

        Args:
            url: Base URL
            url_path: Path joined onto the base URL

        Returns:
            Response body, whatever the status code
        """
        req = create_get(url, url_path)
        self.logger.debug(f"non-TLS HTTP get for {req.url}")
        return await self._send(url, req)

    async def post(self, url: str, url_path: str, data: str) -> bytes:
        """Make a POST request with a JSON body and return the raw response body.

        Args:
            url: Base URL
            url_path: Path joined onto the base URL
            data: JSON document sent as the request body

        Returns:
            Response body, whatever the status code
        """
        req = create_json_post(url, url_path, data)
        self.logger.debug(f"non-TLS HTTP post {len(data)}-byte data to {req.url}")
        return await self._send(url, req)

    async def _send(self, url: str, req: httpx.Request) -> bytes:
        if url.startswith("https"):
            self.logger.info("sending via danger_accept_invalid_certs")
            return await self._http.execute(
                req,
                self.settings.insecure_timeout,
                INSECURE_TRANSPORT,
                check_status_code=False,
                follow_redirects=True,
            )

        return await self._http.execute(
            req,
            self.settings.insecure_timeout,
            select_transport(is_https=False),
            check_status_code=False,
        )


async def get(url: str, url_path: str) -> bytes:
    """GET with a default SimpleHttpClient, skipping certificate validation for https."""
    return await SimpleHttpClient().get(url, url_path)


async def post(url: str, url_path: str, data: str) -> bytes:
    """POST JSON with a default SimpleHttpClient, skipping certificate validation for https."""
    return await SimpleHttpClient().post(url, url_path, data)
