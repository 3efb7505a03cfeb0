"""HTTP page fetcher backed by httpx."""
import logging

import httpx

from pricelookup.exceptions import TransportError
from pricelookup.integrations.base import PageFetcher

logger = logging.getLogger(__name__)


class HttpPageFetcher(PageFetcher):
    """Blocking GET with httpx; any failure is a TransportError."""

    def __init__(
        self,
        timeout: float = 10.0,
        user_agent: str = "pricelookup/0.1",
        client: httpx.Client | None = None,
    ):
        self._client = client or httpx.Client(
            timeout=timeout,
            headers={"User-Agent": user_agent, "Accept": "text/html"},
            follow_redirects=True,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def fetch(self, url: str) -> str:
        """Fetch a page and return its text."""
        try:
            resp = self._client.get(url)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP {e.response.status_code} fetching {url}")
            raise TransportError(
                f"HTTP {e.response.status_code} fetching {url}"
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch {url}: {e}")
            raise TransportError(f"Failed to fetch {url}: {e}") from e
        return resp.text
