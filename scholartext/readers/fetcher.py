"""
Document fetcher using httpx.

Retrieves raw bytes for one representation of a paper. Exactly one
attempt is made per call; falling back to another representation is
the orchestrator's job (see scholartext.extract).

The time budget is enforced with asyncio.wait_for rather than the
client's socket timeouts, so a slow trickle of bytes cannot keep a
request alive past its budget.
"""

from __future__ import annotations

import asyncio
import logging
from urllib.parse import urlsplit

import httpx

from scholartext.exceptions import ExtractionTimeoutError, NetworkError

logger = logging.getLogger(__name__)

SUPPORTED_SCHEMES = ("http", "https")


class Fetcher:
    """Fetches URLs under a hard timeout.

    Usage:
        fetcher = Fetcher()
        data = await fetcher.fetch("https://arxiv.org/html/2401.00001", 5000)
    """

    def __init__(
        self,
        *,
        user_agent: str = "scholartext/0.1.0",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the fetcher.

        Args:
            user_agent: User-Agent header sent with every request.
            transport: Optional httpx transport (tests inject a MockTransport).
        """
        self.user_agent = user_agent
        self.transport = transport

    async def fetch(self, url: str, timeout_ms: int) -> bytes:
        """Fetch a URL and return the full response body.

        Args:
            url: http(s) URL to retrieve.
            timeout_ms: Budget for the complete response, in milliseconds.

        Returns:
            Response body bytes.

        Raises:
            NetworkError: Unsupported scheme, malformed URL, connection failure
                or HTTP error status.
            ExtractionTimeoutError: No complete response within timeout_ms.
        """
        try:
            parts = urlsplit(url)
        except ValueError as e:
            raise NetworkError(f"Invalid URL {url}: {e}") from e
        scheme = parts.scheme.lower()
        if scheme not in SUPPORTED_SCHEMES:
            raise NetworkError(f"Unsupported URL scheme {scheme!r}: {url}")
        if not parts.hostname:
            raise NetworkError(f"URL has no host: {url}")

        try:
            return await asyncio.wait_for(self._get(url), timeout=timeout_ms / 1000)
        except asyncio.TimeoutError as e:
            raise ExtractionTimeoutError(
                f"Request to {url} timed out after {timeout_ms} ms"
            ) from e
        except httpx.HTTPStatusError as e:
            raise NetworkError(
                f"HTTP {e.response.status_code} from {url}"
            ) from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Request to {url} failed: {e}") from e
        except httpx.InvalidURL as e:
            raise NetworkError(f"Invalid URL {url}: {e}") from e

    async def _get(self, url: str) -> bytes:
        """Single GET; the caller owns the timeout."""
        async with httpx.AsyncClient(
            transport=self.transport,
            headers={"User-Agent": self.user_agent},
            follow_redirects=True,
            timeout=None,
        ) as client:
            response = await client.get(url)
            response.raise_for_status()
            logger.debug("Fetched %d bytes from %s", len(response.content), url)
            return response.content


async def fetch(url: str, timeout_ms: int) -> bytes:
    """Convenience function: fetch a URL with a default Fetcher.

    Args:
        url: http(s) URL to retrieve.
        timeout_ms: Budget for the complete response, in milliseconds.

    Returns:
        Response body bytes.
    """
    return await Fetcher().fetch(url, timeout_ms)
