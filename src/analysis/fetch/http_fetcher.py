"""Plain HTTP page fetcher built on httpx."""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

import httpx

from src.analysis.errors import FetchError

from .models import FetchedPage

logger = logging.getLogger(__name__)


class PageFetcher(Protocol):
    """Protocol for page fetchers."""

    async def fetch(self, url: str) -> FetchedPage: ...


class HttpFetcher:
    """Fetches raw HTML with a single GET request."""

    def __init__(
        self,
        *,
        user_agent: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._user_agent = user_agent
        self._timeout = timeout
        self._transport = transport

    async def fetch(self, url: str) -> FetchedPage:
        """GET *url* and return its HTML, or raise ``FetchError``."""
        logger.debug("http fetch started", extra={"url": url, "timeout": self._timeout})
        try:
            return await asyncio.wait_for(self._get(url), timeout=self._timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            logger.warning("http fetch timed out", extra={"url": url, "timeout": self._timeout})
            raise FetchError(
                f"Timed out after {self._timeout:g}s fetching {url}",
                url=url,
                reason="timeout",
            ) from exc
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("http fetch rejected", extra={"url": url, "status_code": status})
            raise FetchError(
                f"Failed to fetch webpage: {status} {exc.response.reason_phrase}",
                url=url,
                status_code=status,
                reason="http_status",
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("http fetch failed", extra={"url": url}, exc_info=True)
            raise FetchError(
                f"Failed to fetch webpage: {exc}",
                url=url,
                reason="network",
            ) from exc

    async def _get(self, url: str) -> FetchedPage:
        async with httpx.AsyncClient(
            follow_redirects=True,
            headers={"User-Agent": self._user_agent},
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            resp = await client.get(url)
            resp.raise_for_status()
            page = FetchedPage(
                url=url,
                html=resp.text,
                status_code=resp.status_code,
                final_url=str(resp.url),
            )
        logger.debug(
            "http fetch complete",
            extra={"url": url, "status_code": page.status_code, "html_length": len(page.html)},
        )
        return page
