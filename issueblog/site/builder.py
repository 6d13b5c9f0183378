"""Static blog builder for a repository's issues."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from issueblog.config import BlogConfig, TemplateSpec, ThemeConfig
from issueblog.crosslink import issue_base_url, rewrite_cross_links
from issueblog.errors import WriteError
from issueblog.feed import build_feed
from issueblog.labels import label_pages
from issueblog.lib.log import build_context, get_logger
from issueblog.markdown import MarkdownRenderer
from issueblog.models import Issue, Label, RawIssue
from issueblog.output import OutputSink
from issueblog.templates import TemplateContext, TemplateRenderer
from issueblog.transform import prepare_issues

logger = get_logger(__name__)


class BuildResult(BaseModel):
    issues: int
    issue_pages: int
    label_pages: int
    custom_pages: int
    written: list[Path]


class SiteBuilder:
    """Build a static blog from raw issues.

    Generates, in order:
    - {number}-{slug}.html: one page per published issue
    - the Atom feed (``config.feed_file``)
    - the index page over all issues
    - label-{name}.html: one index page per label
    - any additional theme pages, each over all issues

    The first failure aborts the build; files already written stay in place.
    """

    def __init__(
        self,
        config: BlogConfig,
        theme: ThemeConfig,
        renderer: Optional[TemplateRenderer] = None,
        sink: Optional[OutputSink] = None,
        markdown: Optional[Callable[[str], str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.config = config
        self.theme = theme
        self.renderer = renderer or TemplateRenderer(config.theme_dir)
        self.sink = sink or OutputSink(config.output_dir)
        self.markdown = markdown or MarkdownRenderer()
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def build(self, raw_issues: Sequence[RawIssue]) -> BuildResult:
        with build_context(repository=self.config.repository.full_name):
            logger.info("build_started", raw_issues=len(raw_issues))

            issues = self.prepare(raw_issues)
            for issue in issues:
                self._generate_issue_page(issue)
            self._generate_feed(issues)
            self._generate_page(self.theme.index_template, issues)
            label_count = self._generate_label_pages(issues)
            for template in self.theme.other_templates:
                self._generate_page(template, issues)

            result = BuildResult(
                issues=len(issues),
                issue_pages=len(issues),
                label_pages=label_count,
                custom_pages=len(self.theme.other_templates),
                written=list(self.sink.written),
            )
            logger.info(
                "build_finished",
                issues=result.issues,
                label_pages=result.label_pages,
                custom_pages=result.custom_pages,
            )
            return result

    def prepare(self, raw_issues: Sequence[RawIssue]) -> list[Issue]:
        """Transform raw issues and point intra-repository links at their pages."""
        issues = prepare_issues(raw_issues, self.markdown)
        repo = self.config.repository
        rewrite_cross_links(issues, issue_base_url(repo.owner, repo.name))
        return issues

    def _context(
        self,
        issues: list[Issue],
        issue: Optional[Issue] = None,
        selected_label: Optional[Label] = None,
    ) -> TemplateContext:
        return TemplateContext(
            site=self.config.site,
            repository=self.config.repository,
            today=self.clock(),
            theme=self.theme,
            issues=issues,
            issue=issue,
            selected_label=selected_label,
            custom={**self.theme.custom, **self.config.custom},
        )

    def _generate_issue_page(self, issue: Issue) -> None:
        template = self.theme.issue_template
        html = self.renderer.render(template.source, self._context([issue], issue=issue), template.layout)
        self.sink.write(issue.link, html)

    def _generate_feed(self, issues: list[Issue]) -> None:
        self.sink.write(self.config.feed_file, build_feed(issues, self.config, now=self.clock()))

    def _generate_page(
        self,
        template: TemplateSpec,
        issues: list[Issue],
        selected_label: Optional[Label] = None,
        target: Optional[str] = None,
    ) -> None:
        html = self.renderer.render(
            template.source,
            self._context(issues, selected_label=selected_label),
            template.layout,
        )
        self.sink.write(target or template.target or template.source, html)

    def _generate_label_pages(self, issues: list[Issue]) -> int:
        """Render the index template once per label.

        Returns:
            Number of label pages generated
        """
        pages = label_pages(issues)
        for page in pages:
            try:
                self._generate_page(
                    self.theme.index_template,
                    page.issues,
                    selected_label=page.label,
                    target=page.target,
                )
            except WriteError:
                logger.error("label_page_unwritable", label=page.label.name, target=page.target)
                raise
        return len(pages)


__all__ = ["BuildResult", "SiteBuilder"]
