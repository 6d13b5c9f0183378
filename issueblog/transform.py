"""Turn raw tracker issues into publishable blog entries."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from issueblog.lib.log import get_logger
from issueblog.markdown import MarkdownRenderer, first_paragraph
from issueblog.models import Issue, Label, RawIssue, issue_link

logger = get_logger(__name__)

DRAFT_LABEL = "draft"

Renderer = Callable[[str], str]


def transform_issue(raw: RawIssue, render: Renderer) -> Issue | None:
    """Build the blog entry for one raw issue.

    Returns None for issues that must not be published: an empty title, or
    any label named exactly ``draft``.
    """
    if not raw.title:
        logger.debug("issue_skipped_untitled", number=raw.number)
        return None

    labels: list[Label] = []
    for raw_label in raw.labels:
        if raw_label.name == DRAFT_LABEL:
            logger.debug("issue_skipped_draft", number=raw.number)
            return None
        labels.append(Label.for_name(raw_label.name))

    content = render(raw.body)
    return Issue(
        number=raw.number,
        title=raw.title,
        link=issue_link(raw.number, raw.title),
        content=content,
        summary=first_paragraph(content),
        labels=labels,
        github_link=raw.html_url,
        created=raw.created_at,
    )


def prepare_issues(
    raw_issues: Iterable[RawIssue],
    render: Renderer | None = None,
) -> list[Issue]:
    """Transform issues in source order, dropping the unpublishable ones."""
    render = render or MarkdownRenderer()
    issues: list[Issue] = []
    for raw in raw_issues:
        issue = transform_issue(raw, render)
        if issue is not None:
            issues.append(issue)
    return issues


__all__ = ["DRAFT_LABEL", "transform_issue", "prepare_issues"]
