"""Structural extraction: metadata, headings, links, images, JSON-LD."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from bs4 import BeautifulSoup, Tag

from .models import Image, Link

logger = logging.getLogger(__name__)

_HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]
_SKIPPED_HREF_PREFIXES = ("#", "javascript:")


@dataclass(frozen=True)
class SelectorRule:
    """Read the first element matching ``selector``.

    ``attributes`` are tried in order; element text is the last resort.
    """

    selector: str
    attributes: tuple[str, ...]

    def apply(self, soup: BeautifulSoup) -> str:
        el = soup.select_one(self.selector)
        if el is None:
            return ""
        for attr in self.attributes:
            value = el.get(attr)
            if isinstance(value, list):
                value = " ".join(value)
            value = (value or "").strip()
            if value:
                return value
        return el.get_text().strip()


# Order matters: the first rule producing a non-empty value wins.
AUTHOR_RULES: tuple[SelectorRule, ...] = (
    SelectorRule('meta[name="author"]', ("content",)),
    SelectorRule('meta[property="article:author"]', ("content",)),
    SelectorRule(".author", ("content",)),
    SelectorRule(".byline", ("content",)),
    SelectorRule('[rel="author"]', ("content",)),
    SelectorRule('[itemprop="author"]', ("content",)),
)

DATE_RULES: tuple[SelectorRule, ...] = (
    SelectorRule('meta[name="date"]', ("content", "datetime")),
    SelectorRule('meta[property="article:published_time"]', ("content", "datetime")),
    SelectorRule("time", ("content", "datetime")),
    SelectorRule('[itemprop="datePublished"]', ("content", "datetime")),
    SelectorRule(".published-date", ("content", "datetime")),
    SelectorRule(".post-date", ("content", "datetime")),
)


@dataclass(frozen=True)
class StructuralFields:
    title: str
    description: str
    headings: tuple[str, ...]
    links: tuple[Link, ...]
    images: tuple[Image, ...]
    author: str | None
    published_date: str | None
    structured_data: tuple[Any, ...]
    dropped_structured_data: int = 0


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def first_match(soup: BeautifulSoup, rules: tuple[SelectorRule, ...]) -> str | None:
    """Evaluate *rules* in order and return the first non-empty value."""
    for rule in rules:
        value = rule.apply(soup)
        if value:
            return value
    return None


def extract_title(soup: BeautifulSoup) -> str:
    el = soup.find("title")
    return el.get_text().strip() if el is not None else ""


def extract_description(soup: BeautifulSoup) -> str:
    el = soup.find("meta", attrs={"name": "description"})
    if el is None:
        return ""
    return (el.get("content") or "").strip()


def extract_headings(soup: BeautifulSoup) -> list[str]:
    return [el.get_text().strip() for el in soup.find_all(_HEADING_TAGS)]


def extract_links(soup: BeautifulSoup) -> list[Link]:
    links: list[Link] = []
    for el in soup.find_all("a"):
        href = (el.get("href") or "").strip()
        if not href or href.lower().startswith(_SKIPPED_HREF_PREFIXES):
            continue
        links.append(Link(text=el.get_text().strip(), url=href))
    return links


def extract_images(soup: BeautifulSoup) -> list[Image]:
    images: list[Image] = []
    for el in soup.find_all("img"):
        src = (el.get("src") or "").strip()
        if src:
            images.append(Image(alt_text=el.get("alt") or "", src=src))
    return images


def _is_json_ld(el: Tag) -> bool:
    return (el.get("type") or "").strip().lower() == "application/ld+json"


def extract_structured_data(soup: BeautifulSoup) -> tuple[list[Any], int]:
    """Parse every JSON-LD block. Returns (parsed blocks, number dropped)."""
    blocks: list[Any] = []
    dropped = 0
    for el in soup.find_all("script"):
        if not _is_json_ld(el):
            continue
        try:
            blocks.append(json.loads(el.get_text()))
        except json.JSONDecodeError:
            dropped += 1
            logger.debug("dropping malformed json-ld block", extra={"block_index": len(blocks) + dropped - 1})
    return blocks, dropped


def extract_structure(soup: BeautifulSoup) -> StructuralFields:
    """Pull every structural field from a parsed document."""
    structured_data, dropped = extract_structured_data(soup)
    return StructuralFields(
        title=extract_title(soup),
        description=extract_description(soup),
        headings=tuple(extract_headings(soup)),
        links=tuple(extract_links(soup)),
        images=tuple(extract_images(soup)),
        author=first_match(soup, AUTHOR_RULES),
        published_date=first_match(soup, DATE_RULES),
        structured_data=tuple(structured_data),
        dropped_structured_data=dropped,
    )
