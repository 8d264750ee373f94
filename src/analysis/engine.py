"""Analysis engine — fetch, extract, score pipeline orchestrator."""

from __future__ import annotations

import logging
import time
from urllib.parse import urlparse

from src.analysis.errors import ValidationError
from src.analysis.extract import ScrapedPage, build_scraped_page
from src.analysis.fetch import PageFetcher, build_fetcher
from src.analysis.sample import sample_response
from src.analysis.scoring import AgentScorer, Scorer, build_scoring_request
from src.api.schemas import AnalysisResponse, PageMetadata
from src.config import Settings

logger = logging.getLogger(__name__)

_VALID_SCHEMES = {"http", "https"}


def validate_url(url: str | None) -> str:
    """Return the trimmed URL or raise ``ValidationError``."""
    if not url or not url.strip():
        raise ValidationError("URL is required")

    url = url.strip()
    parsed = urlparse(url)
    if parsed.scheme not in _VALID_SCHEMES or not parsed.hostname:
        raise ValidationError(f"Invalid URL: {url!r} (expected an absolute http or https URL)")
    return url


def page_metadata(page: ScrapedPage) -> PageMetadata:
    return PageMetadata(
        title=page.title,
        description=page.description,
        word_count=page.word_count,
        reading_time=page.reading_time_minutes,
        has_author_info=page.has_author_info,
        has_dates=page.has_dates,
        has_references=page.has_references,
        has_schema=page.has_schema,
    )


class AnalysisEngine:
    """Runs one URL through fetch -> extract -> score and builds the response."""

    def __init__(
        self,
        settings: Settings,
        fetcher: PageFetcher | None = None,
        scorer: Scorer | None = None,
    ) -> None:
        self._settings = settings
        self._fetcher = fetcher or build_fetcher(settings)
        self._scorer = scorer or AgentScorer(
            api_key=settings.openai_api_key,
            model=settings.scoring_model,
            preview_chars=settings.content_preview_chars,
        )

    async def scrape(self, url: str) -> ScrapedPage:
        """Fetch *url* and extract a ``ScrapedPage`` from it."""
        started = time.perf_counter()
        fetched = await self._fetcher.fetch(url)
        logger.info(
            "page fetched",
            extra={
                "url": url,
                "status_code": fetched.status_code,
                "html_length": len(fetched.html),
                "elapsed_ms": round((time.perf_counter() - started) * 1000),
            },
        )

        page = build_scraped_page(fetched.html, url=url, screenshot=fetched.screenshot)
        if page.degradations:
            logger.warning(
                "extraction degraded",
                extra={"url": url, "degradations": list(page.degradations)},
            )
        return page

    async def run(self, url: str | None) -> AnalysisResponse:
        """Execute the full analysis pipeline and return a response."""
        url = validate_url(url)

        if self._settings.mock_analysis:
            logger.info("mock analysis served", extra={"url": url})
            return sample_response(url)

        # Credential problems surface before any network call
        self._scorer.check_ready()

        started = time.perf_counter()
        logger.info("analysis started", extra={"url": url})

        page = await self.scrape(url)
        request = build_scoring_request(
            page,
            max_content_chars=self._settings.max_content_chars,
            max_headings=self._settings.max_headings,
        )
        report = await self._scorer.score(request)

        response = AnalysisResponse(
            **report.model_dump(),
            url=url,
            metadata=page_metadata(page),
        )
        logger.info(
            "analysis completed",
            extra={
                "url": url,
                "overall_score": response.overall_score,
                "word_count": page.word_count,
                "elapsed_ms": round((time.perf_counter() - started) * 1000),
            },
        )
        return response
