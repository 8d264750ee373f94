"""Derived page signals computed from already-extracted fields."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any
from urllib.parse import urlparse

if TYPE_CHECKING:
    from .models import Link

WORDS_PER_MINUTE = 200

_REFERENCE_SCHEMES = {"http", "https"}


@dataclass(frozen=True)
class PageSignals:
    word_count: int
    reading_time_minutes: int
    has_author_info: bool
    has_dates: bool
    has_references: bool
    has_schema: bool


def count_words(text: str) -> int:
    """Count runs of non-whitespace; empty tokens never count."""
    return len(text.split())


def reading_time(word_count: int, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    return math.ceil(word_count / words_per_minute)


def is_reference(url: str) -> bool:
    return urlparse(url.strip()).scheme.lower() in _REFERENCE_SCHEMES


def derive_signals(
    plain_text: str,
    author: str | None,
    published_date: str | None,
    links: Sequence[Link],
    structured_data: Sequence[Any],
) -> PageSignals:
    """Compute the heuristic signals for a page. Pure and deterministic."""
    words = count_words(plain_text)
    return PageSignals(
        word_count=words,
        reading_time_minutes=reading_time(words),
        has_author_info=bool(author),
        has_dates=bool(published_date),
        has_references=any(is_reference(link.url) for link in links),
        has_schema=len(structured_data) > 0,
    )
