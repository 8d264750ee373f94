"""Content extraction: structure, readable text and derived signals."""

from __future__ import annotations

import logging

from .heuristics import PageSignals, derive_signals
from .models import Image, Link, ScrapedPage
from .readability import ReadabilityResult, extract_readable
from .structure import StructuralFields, extract_structure, parse_html

__all__ = [
    "Image",
    "Link",
    "PageSignals",
    "ReadabilityResult",
    "ScrapedPage",
    "StructuralFields",
    "build_scraped_page",
    "derive_signals",
    "extract_readable",
    "extract_structure",
]

logger = logging.getLogger(__name__)


def build_scraped_page(
    html: str,
    url: str,
    screenshot: str | None = None,
) -> ScrapedPage:
    """Run structural and readability extraction over *html*.

    Recoverable problems (readability failure, malformed JSON-LD) are recorded
    in ``ScrapedPage.degradations`` instead of being raised.
    """
    structure = extract_structure(parse_html(html))
    readable = extract_readable(html, url=url)

    degradations: list[str] = []
    if readable.degraded:
        degradations.append(readable.reason or "readability fallback")
    if structure.dropped_structured_data:
        degradations.append(
            f"dropped {structure.dropped_structured_data} malformed JSON-LD block(s)"
        )

    page = ScrapedPage(
        url=url,
        title=structure.title,
        description=structure.description,
        raw_content=readable.content,
        plain_text=readable.plain_text,
        headings=structure.headings,
        links=structure.links,
        images=structure.images,
        author=structure.author,
        published_date=structure.published_date,
        structured_data=structure.structured_data,
        screenshot=screenshot,
        degradations=tuple(degradations),
    )
    logger.debug(
        "page extracted",
        extra={
            "url": url,
            "word_count": page.word_count,
            "headings": len(page.headings),
            "links": len(page.links),
            "images": len(page.images),
            "json_ld_blocks": len(page.structured_data),
            "degradations": list(page.degradations),
        },
    )
    return page
