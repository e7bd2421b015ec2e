"""A helper to create asynchronous HTTP client (via `httpx.AsyncClient`)
with common configurations.
"""

from httpx import AsyncClient, Limits, Timeout


def create_http_client(
    max_connections: int = 100,
    connect_timeout: float = 15.0,
    request_timeout: float = 15.0,
    pool_timeout: float = 1.0,
    proxy: str | None = None,
) -> AsyncClient:
    """Create a new `httpx.AsyncClient` with common configurations.

    Args:
      - `max_connections` {int}: Max connections of the connection pool.
      - `connect_timeout` {float}: The timeout for establishing a connection to the host.
      - `request_timeout` {float}: The timeout for handling a request to the host.
      - `pool_timeout` {float}: The timeout for acquiring a connection from the pool.
      - `proxy` {str | None}: A proxy URL for this client, e.g. "http://my-proxy.com:8080",
        or `None` for no proxy.
    Returns:
      - {AsyncClient}: An async HTTP client.
    """
    return AsyncClient(
        limits=Limits(max_connections=max_connections),
        timeout=Timeout(request_timeout, connect=connect_timeout, pool=pool_timeout),
        proxy=proxy,
    )
