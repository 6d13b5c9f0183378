"""Markdown rendering and HTML document helpers."""

from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from markdown_it import MarkdownIt

from issueblog.errors import ParseError
from issueblog.lib.log import get_logger

logger = get_logger(__name__)


class MarkdownRenderer:
    """Render GitHub-flavoured markdown issue bodies to HTML."""

    def __init__(self) -> None:
        # gfm-like: tables, strikethrough and autolinked URLs; raw HTML passes through
        self._md = MarkdownIt("gfm-like")

    def render(self, text: str) -> str:
        return self._md.render(text or "")

    __call__ = render


def parse_html(html: str) -> BeautifulSoup:
    """Parse an HTML fragment into a document.

    Raises:
        ParseError: If the parser rejects the markup.
    """
    try:
        return BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as exc:
        raise ParseError(f"Unparsable HTML: {exc}") from exc


def first_paragraph(html: str) -> str:
    """Inner HTML of the first ``<p>`` element, or "" if there is none."""
    try:
        doc = parse_html(html)
    except ParseError as exc:
        logger.debug("summary_parse_failed", error=str(exc))
        return ""
    paragraph = doc.find("p")
    if paragraph is None:
        return ""
    return paragraph.decode_contents()


__all__ = ["MarkdownRenderer", "parse_html", "first_paragraph"]
