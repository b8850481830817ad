"""HTTP client for the listing page."""
import logging
from dataclasses import dataclass
import httpx

from src.config import config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchResponse:
    """Body of a successful response."""

    data: str
    status_code: int = 200
    url: str = ""


class FetchClient:
    """Async HTTP capability: `get(url)` returns the document text as `.data`.

    Failures are not retried; non-2xx statuses raise `httpx.HTTPStatusError`
    and transport errors propagate to the caller.
    """

    def __init__(self, timeout: float | None = None, client: httpx.AsyncClient | None = None):
        self.client = client or httpx.AsyncClient(
            http2=True,
            timeout=timeout or config.TIMEOUT,
            follow_redirects=True,
            headers={"User-Agent": config.USER_AGENT},
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    async def get(self, url: str) -> FetchResponse:
        """Fetch a URL and return its body."""
        try:
            response = await self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP {e.response.status_code} for {url}")
            raise
        except (httpx.TimeoutException, httpx.NetworkError) as e:
            logger.warning(f"Network error for {url}: {e}")
            raise

        return FetchResponse(data=response.text, status_code=response.status_code, url=str(response.url))
