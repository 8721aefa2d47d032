"""Factory for the per-call async HTTP client."""
from typing import Any

import httpx

# Marks "no timeout override": httpx applies its own default.
DEFAULT_TIMEOUT: Any = object()


def create_http_client(
    timeout: float | None = DEFAULT_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an async HTTP client without retries.

    ``timeout=None`` disables timeouts entirely, so callers wanting the library
    default must leave the argument out.
    """
    kwargs: dict[str, Any] = {}
    if timeout is not DEFAULT_TIMEOUT:
        kwargs["timeout"] = httpx.Timeout(timeout)
    if transport is None:
        transport = httpx.AsyncHTTPTransport(retries=0)
    return httpx.AsyncClient(transport=transport, **kwargs)
