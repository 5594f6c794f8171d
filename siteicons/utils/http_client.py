"""A helper to create asynchronous HTTP client (via `httpx.AsyncClient`)
with common configurations.
"""

from httpx import AsyncBaseTransport, AsyncClient, Limits, Timeout

from siteicons.config import settings
from siteicons.constants import REQUEST_HEADERS


def create_http_client(
    max_connections: int = 1024,
    connect_timeout: float = 1.0,
    request_timeout: float = 5.0,
    pool_timeout: float = 1.0,
    follow_redirects: bool = True,
    user_agent: str | None = None,
    transport: AsyncBaseTransport | None = None,
) -> AsyncClient:
    """Crete a new `httpx.AsyncClient` with common configurations.

    Args:
      - `max_connections` {int}: Max connections of the connection pool.
      - `connect_timeout` {float}: The timeout for establishing a connection to the host.
      - `request_timeout` {float}: The timeout for handling a request to the host.
      - `pool_timeout` {float}: The timeout for acquiring a connection from the pool.
      - `follow_redirects` {bool}: Whether redirect responses are followed.
      - `user_agent` {str | None}: The User-Agent header sent with every request.
      - `transport` {AsyncBaseTransport | None}: A custom transport, e.g. a mock one for testing.
    Returns:
      - {AsyncClient}: An async HTTP client.
    """
    headers = dict(REQUEST_HEADERS)
    if user_agent:
        headers["User-Agent"] = user_agent

    return AsyncClient(
        headers=headers,
        limits=Limits(max_connections=max_connections),
        timeout=Timeout(request_timeout, connect=connect_timeout, pool=pool_timeout),
        follow_redirects=follow_redirects,
        transport=transport,
    )


def create_http_client_from_settings(transport: AsyncBaseTransport | None = None) -> AsyncClient:
    """Create an `httpx.AsyncClient` configured by the `http` settings."""
    return create_http_client(
        max_connections=settings.http.max_connections,
        connect_timeout=settings.http.connect_timeout_sec,
        request_timeout=settings.http.request_timeout_sec,
        pool_timeout=settings.http.pool_timeout_sec,
        follow_redirects=settings.http.follow_redirects,
        user_agent=settings.http.user_agent,
        transport=transport,
    )
