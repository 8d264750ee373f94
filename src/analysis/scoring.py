"""Scoring request construction and the text-generation scorer."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError as PydanticValidationError
from pydantic_ai import Agent
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.openai import OpenAIProvider

from src.analysis.errors import MissingCredentialError, ScoringError
from src.analysis.extract import ScrapedPage
from src.analysis.prompts import format_scoring_prompt
from src.api.schemas import AnalysisReport

logger = logging.getLogger(__name__)

_CODE_FENCE_RE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)


@dataclass(frozen=True)
class ScoringRequest:
    """The subset of a scraped page that is sent to the scoring model."""

    url: str
    title: str
    description: str
    content: str
    headings: tuple[str, ...]
    author: str | None
    published_date: str | None
    has_author_info: bool
    has_dates: bool
    has_references: bool
    has_schema: bool
    word_count: int
    reading_time_minutes: int
    image_count: int


def build_scoring_request(
    page: ScrapedPage,
    max_content_chars: int = 15000,
    max_headings: int = 20,
) -> ScoringRequest:
    return ScoringRequest(
        url=page.url,
        title=page.title,
        description=page.description,
        content=page.plain_text[:max_content_chars],
        headings=page.headings[:max_headings],
        author=page.author,
        published_date=page.published_date,
        has_author_info=page.has_author_info,
        has_dates=page.has_dates,
        has_references=page.has_references,
        has_schema=page.has_schema,
        word_count=page.word_count,
        reading_time_minutes=page.reading_time_minutes,
        image_count=len(page.images),
    )


def parse_report(text: str) -> AnalysisReport:
    """Parse the model's reply into an ``AnalysisReport`` or raise ``ScoringError``."""
    body = text.strip()
    fenced = _CODE_FENCE_RE.match(body)
    if fenced:
        body = fenced.group(1)

    try:
        data = json.loads(body)
    except json.JSONDecodeError as exc:
        raise ScoringError(f"AI analysis failed: response was not valid JSON ({exc.msg})") from exc

    if not isinstance(data, dict):
        raise ScoringError("AI analysis failed: expected a JSON object")

    try:
        return AnalysisReport.model_validate(data)
    except PydanticValidationError as exc:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in exc.errors()})
        raise ScoringError(
            f"AI analysis failed: invalid or missing fields: {', '.join(fields)}"
        ) from exc


class Scorer(Protocol):
    """Anything that can turn a scoring request into a report."""

    def check_ready(self) -> None:
        """Raise if the scorer cannot be called (e.g. missing credentials)."""

    async def score(self, request: ScoringRequest) -> AnalysisReport: ...


class AgentScorer:
    """Scores pages with a PydanticAI agent backed by an OpenAI chat model."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o",
        preview_chars: int = 3000,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._preview_chars = preview_chars

    def check_ready(self) -> None:
        if not self._api_key:
            raise MissingCredentialError(
                "OpenAI API key is missing. Please add it to your environment variables."
            )

    async def score(self, request: ScoringRequest) -> AnalysisReport:
        self.check_ready()

        prompt = format_scoring_prompt(request, preview_chars=self._preview_chars)
        agent = Agent(
            OpenAIChatModel(self._model, provider=OpenAIProvider(api_key=self._api_key))
        )
        logger.info(
            "scoring request sent",
            extra={"url": request.url, "model": self._model, "prompt_chars": len(prompt)},
        )
        try:
            result = await agent.run(prompt)
        except Exception as exc:
            logger.warning("scoring call failed", extra={"url": request.url}, exc_info=True)
            raise ScoringError(f"AI analysis failed: {exc}") from exc

        usage = result.usage()
        logger.info(
            "scoring response received",
            extra={
                "url": request.url,
                "input_tokens": usage.input_tokens or 0,
                "output_tokens": usage.output_tokens or 0,
            },
        )
        return parse_report(result.output)
