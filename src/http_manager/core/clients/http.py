"""HTTP client with timeout-bounded request execution and file download."""

import asyncio
import logging
from enum import Enum
from pathlib import Path
from typing import Optional, Union

import httpx

from ..config import HttpClientSettings
from ..errors import (
    TransportError,
    TimeoutError,
    UnexpectedStatusError,
    BodyReadError,
    DownloadError,
)
from ..transport import Transport, select_transport, build_client


class ExchangeState(str, Enum):
    """Lifecycle of a single request/response exchange."""
    IDLE = "idle"
    CONNECTING = "connecting"
    AWAITING_RESPONSE = "awaiting_response"
    READING_BODY = "reading_body"
    DONE = "done"
    FAILED = "failed"


class HttpClient:
    """HTTP client that sends one request per call within a single timeout budget.

    A fresh httpx.AsyncClient is created and closed for every call, so
    instances hold no connection state and can be shared between tasks.
    """

    def __init__(
        self,
        settings: Optional[HttpClientSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the HTTP client with settings.

        Args:
            settings: HTTP client configuration settings. If None, will load from environment.
            transport: Optional httpx transport used instead of the network
        """
        self.settings = settings or HttpClientSettings()
        self.logger = logging.getLogger(__name__)
        self._transport = transport

    def _client(
        self,
        transport: Transport,
        timeout: Optional[float],
        follow_redirects: bool = False,
    ) -> httpx.AsyncClient:
        return build_client(
            transport,
            timeout,
            self.settings,
            follow_redirects=follow_redirects,
            mock_transport=self._transport,
        )

    async def read_bytes(
        self,
        request: httpx.Request,
        timeout: float,
        is_https: bool,
        check_status_code: bool = True,
    ) -> bytes:
        """Send a request and read the full response body.

        Args:
            request: Request to send; it is sent exactly once
            timeout: Overall timeout in seconds covering connect, send and body read
            is_https: Whether to use the TLS transport
            check_status_code: Fail on non-2xx responses instead of only logging them

        Returns:
            The response body

        Raises:
            TimeoutError: If no response arrives within the timeout
            TransportError: If the connection or send fails
            UnexpectedStatusError: If checking is enabled and the status is not 2xx
            BodyReadError: If the body cannot be read within the remaining timeout
        """
        return await self.execute(request, timeout, select_transport(is_https), check_status_code)

    async def execute(
        self,
        request: httpx.Request,
        timeout: float,
        transport: Transport,
        check_status_code: bool = True,
        follow_redirects: bool = False,
    ) -> bytes:
        """Send a request over an explicit transport and read the full response body.

        Same contract as read_bytes.
        """
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        state = ExchangeState.IDLE

        def transition(new_state: ExchangeState) -> ExchangeState:
            self.logger.debug(f"{request.method} {request.url}: {state.value} -> {new_state.value}")
            return new_state

        transport.check_scheme(request.url)

        state = transition(ExchangeState.CONNECTING)
        async with self._client(transport, timeout, follow_redirects) as client:
            # send() does not apply client defaults, so carry them over explicitly
            outgoing = client.build_request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.content,
            )
            state = transition(ExchangeState.AWAITING_RESPONSE)
            try:
                response = await asyncio.wait_for(client.send(outgoing, stream=True), timeout)
            except asyncio.TimeoutError as e:
                state = transition(ExchangeState.FAILED)
                raise TimeoutError(f"failed to fetch response: timed out after {timeout}s") from e
            except httpx.TimeoutException as e:
                state = transition(ExchangeState.FAILED)
                raise TimeoutError(f"failed to fetch response {e}") from e
            except httpx.HTTPError as e:
                state = transition(ExchangeState.FAILED)
                raise TransportError(f"failed to fetch response {e}") from e

            try:
                if not response.is_success:
                    is_server_error = response.is_server_error
                    self.logger.warning(
                        f"unexpected HTTP response code {response.status_code} "
                        f"(server error {str(is_server_error).lower()})"
                    )
                    if check_status_code:
                        state = transition(ExchangeState.FAILED)
                        raise UnexpectedStatusError(response.status_code, is_server_error)

                state = transition(ExchangeState.READING_BODY)
                remaining = deadline - loop.time()
                if remaining <= 0:
                    state = transition(ExchangeState.FAILED)
                    raise BodyReadError(f"failed to read response: timed out after {timeout}s")

                try:
                    body = await asyncio.wait_for(response.aread(), remaining)
                except asyncio.TimeoutError as e:
                    state = transition(ExchangeState.FAILED)
                    raise BodyReadError(f"failed to read response: timed out after {timeout}s") from e
                except httpx.HTTPError as e:
                    state = transition(ExchangeState.FAILED)
                    raise BodyReadError(f"failed to read response {e}") from e
            finally:
                await response.aclose()

        state = transition(ExchangeState.DONE)
        return body

    async def download_file(self, ep: str, file_path: Union[str, Path]) -> None:
        """Download a URL into a local file.

        The body is streamed into a newly created file. No overall timeout
        or status check is applied, and redirects are followed. A partially
        written file is left in place on failure.

        Args:
            ep: URL to download
            file_path: Local destination path

        Raises:
            DownloadError: If the request or the file write fails
        """
        self.logger.info(f"downloading the file via {ep}")
        transport = select_transport(is_https=ep.startswith("https"))

        written = 0
        try:
            async with self._client(transport, None, follow_redirects=True) as client:
                async with client.stream("GET", ep) as response:
                    with open(file_path, "wb") as f:
                        async for chunk in response.aiter_bytes():
                            f.write(chunk)
                            written += len(chunk)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise DownloadError(f"failed to download {ep} {e}") from e
        except OSError as e:
            raise DownloadError(f"failed to write {file_path} {e}") from e

        self.logger.debug(f"downloaded {written} bytes to {file_path}")


async def read_bytes(
    request: httpx.Request,
    timeout: float,
    is_https: bool,
    check_status_code: bool = True,
) -> bytes:
    """Send a request with a default HttpClient and read the full response body."""
    return await HttpClient().read_bytes(request, timeout, is_https, check_status_code)


async def download_file(ep: str, file_path: Union[str, Path]) -> None:
    """Download a URL into a local file with a default HttpClient."""
    await HttpClient().download_file(ep, file_path)
