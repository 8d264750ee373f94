"""Fixtures — sample HTML, settings, stub fetcher and scorer."""

import logging
from pathlib import Path

import pytest

from src.config import Settings
from tests.stubs import StubFetcher, StubScorer

FIXTURES = Path(__file__).parent / "fixtures"

REPORT_PAYLOAD = {
    "overallScore": 81,
    "eeatScore": 77,
    "helpfulContentScore": 85,
    "visualScore": 70,
    "eeatAnalysis": {
        "strengths": ["Named author", "Cites the SCA", "Clear publish date"],
        "weaknesses": ["No author bio", "Single source", "No reviewer"],
        "recommendations": ["Add a bio", "Cite more research", "Add a reviewer"],
    },
    "helpfulContentAnalysis": {
        "strengths": ["Practical steps", "Specific temperatures", "Focused topic"],
        "weaknesses": ["Short", "No troubleshooting", "No equipment list"],
        "recommendations": ["Add a FAQ", "Add ratios", "Add a gear section"],
    },
    "visualAnalysis": {
        "strengths": ["Clear headings", "Images with alt text", "Short paragraphs"],
        "weaknesses": ["Empty heading", "Image without alt", "No table"],
        "recommendations": ["Remove empty heading", "Add alt text", "Add a ratio table"],
    },
}


@pytest.fixture(autouse=True)
def _restore_logging():
    """setup_logging() rewires global loggers; undo it after each test."""
    names = ("", "uvicorn", "uvicorn.access", "uvicorn.error", "httpx")
    saved = {}
    for name in names:
        lg = logging.getLogger(name)
        saved[name] = (list(lg.handlers), lg.level, lg.propagate)
    yield
    for name, (handlers, level, propagate) in saved.items():
        lg = logging.getLogger(name)
        lg.handlers[:] = handlers
        lg.setLevel(level)
        lg.propagate = propagate


@pytest.fixture
def article_html() -> str:
    return (FIXTURES / "article.html").read_text(encoding="utf-8")


@pytest.fixture
def report_payload() -> dict:
    return REPORT_PAYLOAD


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        openai_api_key="test-key",
        scoring_model="gpt-4o",
        fetch_timeout_seconds=5,
    )


@pytest.fixture
def stub_fetcher(article_html: str) -> StubFetcher:
    return StubFetcher(article_html)


@pytest.fixture
def stub_scorer(report_payload: dict) -> StubScorer:
    return StubScorer(report_payload)
