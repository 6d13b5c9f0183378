"""Rewrite links between issues of the same repository into blog-relative links.

An issue body that links to ``https://github.com/<owner>/<repo>/issues/42``
should, once published, point at the page generated for issue 42 instead of
back at the tracker. Links to anything else are left exactly as written.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

from issueblog.errors import ParseError
from issueblog.lib.log import get_logger
from issueblog.markdown import parse_html
from issueblog.models import Issue

logger = get_logger(__name__)

GITHUB_URL = "https://github.com"

_NUMBER_RE = re.compile(r"[+-]?[0-9]+")


def issue_base_url(owner: str, name: str) -> str:
    return f"{GITHUB_URL}/{owner}/{name}/issues/"


def parse_issue_number(href: str, base_url: str) -> int | None:
    """Issue number referenced by ``href``, or None if it is not an issue link.

    Only surrounding spaces and slashes are tolerated around the number;
    ``.../issues/7#issuecomment-1`` is not an issue link.
    """
    if not href.startswith(base_url):
        return None
    remainder = href[len(base_url):].strip(" /")
    if not _NUMBER_RE.fullmatch(remainder):
        return None
    return int(remainder)


def rewrite_links(html: str, links_by_number: Mapping[int, str], base_url: str) -> str:
    """Return ``html`` with known intra-repository issue links made relative.

    Raises:
        ParseError: If the document cannot be parsed.
    """
    doc = parse_html(html)
    for anchor in doc.find_all("a", href=True):
        href = anchor["href"]
        number = parse_issue_number(href, base_url)
        if number is None:
            continue
        target = links_by_number.get(number)
        if target is None:
            continue
        anchor["href"] = target
        logger.debug("crosslink_rewritten", href=href, target=target)
    return str(doc)


def rewrite_cross_links(issues: Sequence[Issue], base_url: str) -> None:
    """Rewrite every issue's content in place; unparsable content is kept as is."""
    links_by_number = {issue.number: issue.link for issue in issues}
    for issue in issues:
        try:
            issue.content = rewrite_links(issue.content, links_by_number, base_url)
        except ParseError as exc:
            logger.debug("crosslink_parse_failed", number=issue.number, error=str(exc))


__all__ = [
    "issue_base_url",
    "parse_issue_number",
    "rewrite_links",
    "rewrite_cross_links",
]
