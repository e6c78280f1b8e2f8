"""Shared test fixtures and configuration for http_manager tests."""

import asyncio
import socket

import httpx
import pytest
import pytest_asyncio

from http_manager.core.config import HttpClientSettings

PROXY_ENV_VARS = [
    "HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY",
    "http_proxy", "https_proxy", "all_proxy",
]


@pytest.fixture
def http_client_settings():
    """Create HTTP client settings for testing."""
    return HttpClientSettings(
        connect_timeout=5.0,
        insecure_timeout=15.0,
        user_agent="http-manager-tests/1.0",
        connection_verbose=True,
    )


@pytest.fixture(autouse=True)
def no_proxy_env(monkeypatch):
    """Keep httpx from routing loopback requests through an environment proxy."""
    for name in PROXY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def echo_transport():
    """Mock transport that echoes the request body back with 200."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=request.content)

    return httpx.MockTransport(handler)


@pytest.fixture
def status_transport():
    """Factory for mock transports that always answer with one status and body."""
    def factory(status_code: int, content: bytes = b""):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(status_code, content=content)

        transport = httpx.MockTransport(handler)
        transport.calls = calls
        return transport

    return factory


@pytest_asyncio.fixture
async def silent_server(no_proxy_env):
    """Start a loopback server that accepts connections but never answers.

    Yields:
        Base URL of the server.
    """
    async def handle(reader: asyncio.StreamReader, writer: asyncio.StreamWriter):
        while await reader.read(65536):
            pass
        writer.close()

    server = await asyncio.start_server(handle, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    try:
        yield f"http://127.0.0.1:{port}"
    finally:
        server.close()


@pytest.fixture
def closed_port_url(no_proxy_env):
    """URL of a loopback port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    return f"http://127.0.0.1:{port}"
