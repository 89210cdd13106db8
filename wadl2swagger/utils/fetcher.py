"""Remote WADL retrieval over HTTP(S)."""

from __future__ import annotations

import logging

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class WadlFetchError(Exception):
    """Raised when a remote WADL document cannot be retrieved."""

    def __init__(self, url: str, message: str, status_code: int | None = None) -> None:
        super().__init__(f"{url}: {message}")
        self.url = url
        self.status_code = status_code


def _client_limits(url: str) -> httpx.Limits:
    """Keep connections alive for secure URLs only."""
    if url.startswith("https://"):
        return httpx.Limits(max_keepalive_connections=10, keepalive_expiry=30.0)
    return httpx.Limits(max_keepalive_connections=0)


async def fetch_wadl(
    url: str,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Download the text of a remote WADL document.

    Args:
        url: Absolute http or https URL.
        timeout: Request timeout in seconds.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport``.

    Returns:
        Response body decoded as text.

    Raises:
        WadlFetchError: On an invalid URL, a transport failure or a non-success status.
    """
    try:
        async with httpx.AsyncClient(
            timeout=timeout,
            limits=_client_limits(url),
            follow_redirects=True,
            transport=transport,
        ) as client:
            response = await client.get(url)
            response.raise_for_status()
    except httpx.TimeoutException as e:
        raise WadlFetchError(url, "Request timed out") from e
    except httpx.HTTPStatusError as e:
        raise WadlFetchError(
            url,
            f"HTTP {e.response.status_code}",
            status_code=e.response.status_code,
        ) from e
    except httpx.RequestError as e:
        raise WadlFetchError(url, str(e)) from e
    except httpx.InvalidURL as e:
        raise WadlFetchError(url, f"Invalid URL: {e}") from e

    logger.info("Fetched %d bytes from %s", len(response.content), url)
    return response.text
