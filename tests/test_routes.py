"""HTTP boundary tests for POST /api/analyze."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from src.analysis.engine import AnalysisEngine
from src.analysis.errors import FetchError, MissingCredentialError
from src.analysis.scoring import AgentScorer
from src.main import app
from tests.stubs import StubFetcher, StubScorer

URL = "https://example.com/coffee"


@pytest.fixture
def client():
    # No context manager: the lifespan would replace the engine set below
    yield TestClient(app)
    app.state.engine = None


def _install(engine: AnalysisEngine) -> None:
    app.state.engine = engine


class TestAnalyzeEndpoint:
    def test_success_returns_report_and_metadata(self, client, settings, stub_fetcher, stub_scorer, report_payload):
        _install(AnalysisEngine(settings, fetcher=stub_fetcher, scorer=stub_scorer))

        resp = client.post("/api/analyze", json={"url": URL})

        assert resp.status_code == 200
        body = resp.json()
        for key, value in report_payload.items():
            assert body[key] == value
        assert body["url"] == URL
        assert body["metadata"]["title"] == "How to Brew Better Coffee at Home"
        assert body["metadata"]["hasSchema"] is True
        assert body["metadata"]["readingTime"] == 1

    def test_missing_url_returns_400(self, client, settings, stub_fetcher, stub_scorer):
        _install(AnalysisEngine(settings, fetcher=stub_fetcher, scorer=stub_scorer))

        resp = client.post("/api/analyze", json={})

        assert resp.status_code == 400
        assert resp.json() == {"error": "URL is required"}
        assert stub_fetcher.calls == []

    def test_malformed_url_returns_400(self, client, settings, stub_fetcher, stub_scorer):
        _install(AnalysisEngine(settings, fetcher=stub_fetcher, scorer=stub_scorer))

        resp = client.post("/api/analyze", json={"url": "not a url"})

        assert resp.status_code == 400
        assert "Invalid URL" in resp.json()["error"]

    def test_non_json_body_returns_400(self, client, settings, stub_fetcher, stub_scorer):
        _install(AnalysisEngine(settings, fetcher=stub_fetcher, scorer=stub_scorer))

        resp = client.post("/api/analyze", content="url=https://example.com", headers={"Content-Type": "text/plain"})

        assert resp.status_code == 400
        assert "error" in resp.json()

    def test_invalid_scoring_json_returns_500_without_partial_report(self, client, settings, stub_fetcher):
        scorer = AgentScorer(api_key="test-key")
        agent = MagicMock()
        result = MagicMock()
        result.output = "I think this page is pretty good!"
        result.usage = MagicMock(return_value=MagicMock(input_tokens=1, output_tokens=1))
        agent.run = AsyncMock(return_value=result)
        _install(AnalysisEngine(settings, fetcher=stub_fetcher, scorer=scorer))

        with pytest.MonkeyPatch.context() as mp:
            mp.setattr("src.analysis.scoring.Agent", MagicMock(return_value=agent))
            resp = client.post("/api/analyze", json={"url": URL})

        assert resp.status_code == 500
        body = resp.json()
        assert list(body) == ["error"]
        assert body["error"].startswith("Failed to analyze the URL: AI analysis failed")

    def test_fetch_error_returns_500(self, client, settings, stub_scorer):
        fetcher = MagicMock()
        fetcher.fetch = AsyncMock(side_effect=FetchError("Failed to fetch webpage: 403 Forbidden", status_code=403))
        _install(AnalysisEngine(settings, fetcher=fetcher, scorer=stub_scorer))

        resp = client.post("/api/analyze", json={"url": URL})

        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to analyze the URL: Failed to fetch webpage: 403 Forbidden"}

    def test_missing_credential_returns_500(self, client, settings, stub_fetcher):
        scorer = MagicMock()
        scorer.score = AsyncMock(side_effect=MissingCredentialError("OpenAI API key is missing."))
        _install(AnalysisEngine(settings, fetcher=stub_fetcher, scorer=scorer))

        resp = client.post("/api/analyze", json={"url": URL})

        assert resp.status_code == 500
        assert "OpenAI API key is missing" in resp.json()["error"]

    def test_unexpected_error_returns_500(self, client, settings, stub_fetcher):
        scorer = MagicMock()
        scorer.score = AsyncMock(side_effect=RuntimeError("kaboom"))
        _install(AnalysisEngine(settings, fetcher=stub_fetcher, scorer=scorer))

        resp = client.post("/api/analyze", json={"url": URL})

        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to analyze the URL: kaboom"}

    def test_mock_mode(self, client, settings, stub_fetcher, stub_scorer):
        settings.mock_analysis = True
        _install(AnalysisEngine(settings, fetcher=stub_fetcher, scorer=stub_scorer))

        resp = client.post("/api/analyze", json={"url": URL})

        assert resp.status_code == 200
        assert resp.json()["overallScore"] == 72
        assert resp.json()["metadata"]["wordCount"] == 1250


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_lifespan_builds_engine(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "")
    monkeypatch.setenv("MOCK_ANALYSIS", "true")
    from src.config import get_settings

    get_settings.cache_clear()
    try:
        with TestClient(app) as client:
            assert isinstance(app.state.engine, AnalysisEngine)
            resp = client.post("/api/analyze", json={"url": URL})
            assert resp.status_code == 200
    finally:
        get_settings.cache_clear()
        app.state.engine = None
