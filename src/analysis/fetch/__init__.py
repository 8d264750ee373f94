"""Page fetching submodule with selectable transports."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .http_fetcher import HttpFetcher, PageFetcher
from .models import FetchedPage

if TYPE_CHECKING:
    from src.config import Settings

__all__ = [
    "FetchedPage",
    "HttpFetcher",
    "PageFetcher",
    "build_fetcher",
]


def build_fetcher(settings: Settings) -> PageFetcher:
    """Build the fetcher selected by ``settings.fetch_mode``."""
    if settings.fetch_mode == "browser":
        # Playwright is an optional install; only import it when selected
        from .browser_fetcher import BrowserFetcher

        return BrowserFetcher(
            user_agent=settings.user_agent,
            timeout=settings.fetch_timeout_seconds,
        )

    return HttpFetcher(
        user_agent=settings.user_agent,
        timeout=settings.fetch_timeout_seconds,
    )
