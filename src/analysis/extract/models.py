"""Data models for the extract submodule."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from .heuristics import derive_signals


@dataclass(frozen=True)
class Link:
    text: str
    url: str


@dataclass(frozen=True)
class Image:
    alt_text: str
    src: str


@dataclass(frozen=True)
class ScrapedPage:
    """Everything extracted from one fetched page.

    Word count, reading time and the ``has_*`` flags are not constructor
    arguments; they are always derived from the other fields.
    """

    url: str
    title: str = ""
    description: str = ""
    raw_content: str = ""
    plain_text: str = ""
    headings: tuple[str, ...] = ()
    links: tuple[Link, ...] = ()
    images: tuple[Image, ...] = ()
    author: str | None = None
    published_date: str | None = None
    structured_data: tuple[Any, ...] = ()
    screenshot: str | None = None
    degradations: tuple[str, ...] = ()

    word_count: int = field(init=False)
    reading_time_minutes: int = field(init=False)
    has_author_info: bool = field(init=False)
    has_dates: bool = field(init=False)
    has_references: bool = field(init=False)
    has_schema: bool = field(init=False)

    def __post_init__(self) -> None:
        signals = derive_signals(
            self.plain_text,
            self.author,
            self.published_date,
            self.links,
            self.structured_data,
        )
        for name, value in asdict(signals).items():
            object.__setattr__(self, name, value)
