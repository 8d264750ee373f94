"""Readability extractor tests, including the body-text fallback."""

from unittest.mock import MagicMock, patch

from src.analysis.extract.readability import extract_readable, html_to_text


def test_html_to_text_strips_scripts_and_styles():
    html = "<div><style>p{}</style><p>Hello</p><script>alert(1)</script><noscript>js off</noscript><p>world</p></div>"
    assert html_to_text(html) == "Hello\nworld"


def test_readability_isolates_article(article_html):
    result = extract_readable(article_html, url="https://example.com/coffee")
    assert result.degraded is False
    assert result.reason is None
    assert "burr grinder" in result.plain_text
    assert "Water that is" in result.plain_text
    assert "tracking" not in result.plain_text
    assert "font-family" not in result.plain_text
    assert result.content


@patch("src.analysis.extract.readability.Document")
def test_readability_exception_falls_back_to_body(mock_document, article_html):
    mock_document.return_value.summary.side_effect = ValueError("boom")

    result = extract_readable(article_html)

    assert result.degraded is True
    assert "boom" in result.reason
    # Body fallback includes navigation and footer text too
    assert "Skip to content" in result.plain_text
    assert "Privacy" in result.plain_text
    assert "burr grinder" in result.plain_text
    assert "tracking" not in result.plain_text


@patch("src.analysis.extract.readability.Document")
def test_readability_empty_result_falls_back_to_body(mock_document):
    mock_document.return_value.summary.return_value = "<div><script>x()</script></div>"

    result = extract_readable("<html><body><p>Only body text</p></body></html>")

    assert result.degraded is True
    assert result.reason == "readability returned no content"
    assert result.plain_text == "Only body text"
    assert "<p>Only body text</p>" in result.content


@patch("src.analysis.extract.readability.Document")
def test_readability_constructor_failure_is_absorbed(mock_document):
    mock_document.side_effect = RuntimeError("unparseable")

    result = extract_readable("<p>fragment</p>")

    assert result.degraded is True
    assert result.plain_text == "fragment"


def test_readability_on_empty_document_never_raises():
    result = extract_readable("")
    assert result.plain_text == ""
    assert result.degraded is True


def test_readability_passes_url_to_document():
    with patch("src.analysis.extract.readability.Document") as mock_document:
        mock_document.return_value = MagicMock(summary=MagicMock(return_value="<p>Article body</p>"))
        result = extract_readable("<p>Article body</p>", url="https://example.com/a")

    mock_document.assert_called_once_with("<p>Article body</p>", url="https://example.com/a")
    assert result.plain_text == "Article body"
    assert result.degraded is False


INLINE_HTML = (
    "<html><body><article><p>See <a href='https://x.org'>this guide</a>, and "
    "don<em>'</em>t skip E=mc<sup>2</sup>.</p></article></body></html>"
)


def test_html_to_text_keeps_inline_markup_in_words():
    assert html_to_text(INLINE_HTML) == "See this guide, and don't skip E=mc2."


def test_html_to_text_breaks_lines_only_at_blocks():
    html = (
        "<div><h2>Intro</h2><p>First  line\n   wraps here<br>after break</p>"
        "<ul><li>one <b>bold</b></li><li>two</li></ul></div>"
    )
    assert html_to_text(html) == "Intro\nFirst line wraps here\nafter break\none bold\ntwo"


def test_readability_text_has_no_split_words():
    result = extract_readable(INLINE_HTML)
    assert "See this guide, and don't skip E=mc2." in result.plain_text
