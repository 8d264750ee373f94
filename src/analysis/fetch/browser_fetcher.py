"""Headless Chromium fetcher that also captures a screenshot."""

from __future__ import annotations

import asyncio
import base64
import logging

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from src.analysis.errors import FetchError

from .models import FetchedPage

logger = logging.getLogger(__name__)


class BrowserFetcher:
    """Renders the page in Playwright and returns the DOM plus a PNG screenshot."""

    def __init__(
        self,
        *,
        user_agent: str,
        timeout: float = 30.0,
        viewport: tuple[int, int] = (1920, 1080),
        full_page: bool = True,
    ) -> None:
        self._user_agent = user_agent
        self._timeout = timeout
        self._viewport = viewport
        self._full_page = full_page

    async def fetch(self, url: str) -> FetchedPage:
        logger.debug("browser fetch started", extra={"url": url, "timeout": self._timeout})
        try:
            return await asyncio.wait_for(self._render(url), timeout=self._timeout)
        except (asyncio.TimeoutError, PlaywrightTimeoutError) as exc:
            logger.warning("browser fetch timed out", extra={"url": url, "timeout": self._timeout})
            raise FetchError(
                f"Timed out after {self._timeout:g}s fetching {url}",
                url=url,
                reason="timeout",
            ) from exc
        except PlaywrightError as exc:
            logger.warning("browser fetch failed", extra={"url": url}, exc_info=True)
            raise FetchError(
                f"Failed to fetch webpage: {exc.message}",
                url=url,
                reason="browser",
            ) from exc

    async def _render(self, url: str) -> FetchedPage:
        width, height = self._viewport
        async with async_playwright() as p:
            browser = await p.chromium.launch(headless=True)
            try:
                context = await browser.new_context(
                    viewport={"width": width, "height": height},
                    user_agent=self._user_agent,
                )
                page = await context.new_page()
                response = await page.goto(
                    url,
                    wait_until="domcontentloaded",
                    timeout=self._timeout * 1000,
                )
                status = response.status if response is not None else 200
                if status >= 400:
                    raise FetchError(
                        f"Failed to fetch webpage: {status} {response.status_text}",
                        url=url,
                        status_code=status,
                        reason="http_status",
                    )

                html = await page.content()
                png = await page.screenshot(full_page=self._full_page, type="png")
                final_url = page.url
            finally:
                # Chromium is a child process; never leave it running
                await browser.close()

        logger.debug(
            "browser fetch complete",
            extra={"url": url, "status_code": status, "html_length": len(html), "screenshot_bytes": len(png)},
        )
        return FetchedPage(
            url=url,
            html=html,
            status_code=status,
            final_url=final_url,
            screenshot=base64.b64encode(png).decode("ascii"),
        )
