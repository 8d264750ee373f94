"""Main-content isolation with a readability pass and a body-text fallback."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bs4 import BeautifulSoup
from readability import Document

logger = logging.getLogger(__name__)

_NON_CONTENT_TAGS = ["script", "style", "noscript", "template"]

_BLOCK_TAGS = [
    "address", "article", "aside", "blockquote", "dd", "details", "div", "dl",
    "dt", "figcaption", "figure", "footer", "form", "h1", "h2", "h3", "h4",
    "h5", "h6", "header", "hr", "li", "main", "nav", "ol", "p", "pre",
    "section", "summary", "table", "td", "th", "tr", "ul",
]

# Marks block boundaries inside get_text() output; whitespace in the source
# never separates blocks.
_BLOCK_BREAK = "\u2029"


@dataclass(frozen=True)
class ReadabilityResult:
    """Article content, plus whether the body fallback had to be used."""

    content: str
    plain_text: str
    degraded: bool = False
    reason: str | None = None


def html_to_text(html: str | BeautifulSoup) -> str:
    """Visible text of *html*, one block per line, scripts and styles removed.

    Inline markup (links, emphasis, superscripts) does not split words; only
    block elements and ``<br>`` start a new line. Runs of whitespace collapse
    to a single space.
    """
    soup = html if isinstance(html, BeautifulSoup) else BeautifulSoup(html, "lxml")
    for tag in soup(_NON_CONTENT_TAGS):
        tag.decompose()
    for br in soup.find_all("br"):
        br.replace_with(_BLOCK_BREAK)
    for block in soup.find_all(_BLOCK_TAGS):
        block.insert_before(_BLOCK_BREAK)
        block.append(_BLOCK_BREAK)

    lines = (" ".join(chunk.split()) for chunk in soup.get_text().split(_BLOCK_BREAK))
    return "\n".join(line for line in lines if line)


def _body_fallback(html: str, reason: str) -> ReadabilityResult:
    soup = BeautifulSoup(html, "lxml")
    body = soup.body if soup.body is not None else soup
    content = body.decode_contents()
    return ReadabilityResult(
        content=content,
        plain_text=html_to_text(BeautifulSoup(content, "lxml")),
        degraded=True,
        reason=reason,
    )


def extract_readable(html: str, url: str | None = None) -> ReadabilityResult:
    """Run readability over *html*; never raises for extraction failures."""
    try:
        article_html = Document(html, url=url).summary(html_partial=True)
    except Exception as exc:
        # readability raises a mix of lxml and its own Unparseable errors
        logger.warning("readability failed, using body text", extra={"url": url, "error": str(exc)})
        return _body_fallback(html, f"readability failed: {exc}")

    plain_text = html_to_text(article_html)
    if not plain_text:
        logger.info("readability found no content, using body text", extra={"url": url})
        return _body_fallback(html, "readability returned no content")

    return ReadabilityResult(content=article_html, plain_text=plain_text)
